import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, DateTime, JSON, Uuid
from bible_quiz.core.database import Base


UNANSWERED = None


class QuizSession(Base):
    __tablename__ = "quiz_sessions"

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        unique=True,
        index=True
    )

    user_id = Column(String, nullable=True, index=True)
    category = Column(String, nullable=False)
    difficulty = Column(String, nullable=False)
    question_ids = Column(JSON, nullable=False)  # [question uuid as str, ...]
    answers = Column(JSON, nullable=False)  # [option index or null, ...]
    score = Column(Integer, nullable=False, default=0)
    total_questions = Column(Integer, nullable=False, default=0)
    started_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    completed_at = Column(DateTime, nullable=True)

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None
