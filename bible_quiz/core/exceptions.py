class QuizError(Exception):
    """Base class for errors raised by the quiz core."""


class NotFoundError(QuizError):
    pass


class InvalidArgumentError(QuizError):
    pass


class AlreadyCompletedError(QuizError):
    """Raised when a finished session is answered or completed again."""
