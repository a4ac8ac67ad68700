import logging
import random
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.orm import Session

from bible_quiz.core.config import settings
from bible_quiz.core.exceptions import AlreadyCompletedError, InvalidArgumentError, NotFoundError
from bible_quiz.core.sampling import shuffle_and_take
from bible_quiz.models.question_db.question_crud import find_questions, get_question_by_id, get_questions_by_ids
from bible_quiz.models.question_db.question_db import Question
from bible_quiz.models.session_db.session_db import QuizSession, UNANSWERED
from bible_quiz.models.stats_db.stats_crud import record_completion

logger = logging.getLogger(__name__)


def get_session_by_id(db: Session, session_id: UUID) -> Optional[QuizSession]:
    return db.query(QuizSession).filter(QuizSession.id == session_id).first()


def _require_session(db: Session, session_id: UUID) -> QuizSession:
    """Load a session for writing: row-locked and refreshed from the database."""
    session = (
        db.query(QuizSession)
        .filter(QuizSession.id == session_id)
        .with_for_update()
        .populate_existing()
        .first()
    )
    if not session:
        logger.warning("Quiz session %s not found", session_id)
        raise NotFoundError("Quiz session not found")
    return session


def _update_open_session(db: Session, session_id: UUID, values: dict) -> bool:
    """Apply ``values`` only while the session is still open.

    The ``completed_at IS NULL`` condition is checked by the database, so a
    completion committed by another request in the meantime makes this a no-op.
    """
    updated = (
        db.query(QuizSession)
        .filter(QuizSession.id == session_id, QuizSession.completed_at.is_(None))
        .update(values, synchronize_session=False)
    )
    return updated > 0


def start_quiz(
    db: Session,
    category: str,
    difficulty: str,
    user_id: Optional[str] = None,
    rng: Optional[random.Random] = None,
    sample_size: Optional[int] = None,
) -> QuizSession:
    if not category or not difficulty:
        raise InvalidArgumentError("category and difficulty are required")

    sample_size = settings.QUIZ_SIZE if sample_size is None else sample_size
    if sample_size < 1:
        raise InvalidArgumentError("sample_size must be at least 1")

    questions = shuffle_and_take(find_questions(db, category, difficulty), sample_size, rng)
    question_ids = [str(q.id) for q in questions]

    session = QuizSession(
        user_id=user_id,
        category=category,
        difficulty=difficulty,
        question_ids=question_ids,
        answers=[UNANSWERED] * len(question_ids),
        score=0,
        total_questions=len(question_ids),
    )
    db.add(session)
    db.commit()
    db.refresh(session)

    if not question_ids:
        logger.warning("Quiz %s started with no questions for %s / %s", session.id, category, difficulty)
    else:
        logger.info("Quiz %s started: %d questions [%s / %s]", session.id, len(question_ids), category, difficulty)
    return session


def get_quiz_session(db: Session, session_id: UUID) -> Optional[Tuple[QuizSession, List[Question]]]:
    """Return the session with its questions resolved now, skipping deleted ones."""
    session = get_session_by_id(db, session_id)
    if not session:
        return None

    questions = [q for q in get_questions_by_ids(db, session.question_ids) if q is not None]
    return session, questions


def submit_answer(db: Session, session_id: UUID, question_index: int, answer: int) -> str:
    session = _require_session(db, session_id)
    if session.is_completed:
        logger.warning("Answer rejected for quiz %s: already completed", session_id)
        raise AlreadyCompletedError("Quiz session already completed")

    if not 0 <= question_index < len(session.question_ids):
        logger.warning("Answer rejected for quiz %s: question index %d out of range", session_id, question_index)
        raise InvalidArgumentError(f"Question index {question_index} out of range")

    question = get_question_by_id(db, UUID(session.question_ids[question_index]))
    if not question:
        logger.warning("Answer rejected for quiz %s: question %d no longer exists", session_id, question_index)
        raise NotFoundError("Question not found")

    if not 0 <= answer < len(question.options):
        logger.warning("Answer rejected for quiz %s: option %d out of range", session_id, answer)
        raise InvalidArgumentError(f"Answer {answer} out of range for question {question_index}")

    answers = list(session.answers)
    answers[question_index] = answer
    if not _update_open_session(db, session_id, {QuizSession.answers: answers}):
        db.rollback()
        raise AlreadyCompletedError("Quiz session already completed")

    db.commit()
    return "Answer submitted"


def calculate_score(answers: List[Optional[int]], questions: List[Optional[Question]]) -> int:
    score = 0
    for answer, question in zip(answers, questions):
        if question is not None and answer is not UNANSWERED and answer == question.correct_answer:
            score += 1
    return score


def percentage(score: int, total_questions: int) -> int:
    if not total_questions:
        return 0
    return round(score / total_questions * 100)


def complete_quiz(db: Session, session_id: UUID, now: Optional[datetime] = None) -> dict:
    session = _require_session(db, session_id)
    if session.is_completed:
        raise AlreadyCompletedError("Quiz session already completed")

    now = now or datetime.now(timezone.utc)
    questions = get_questions_by_ids(db, session.question_ids)
    score = calculate_score(session.answers, questions)
    user_id, category, total_questions = session.user_id, session.category, session.total_questions

    if not _update_open_session(db, session_id, {QuizSession.score: score, QuizSession.completed_at: now}):
        db.rollback()
        raise AlreadyCompletedError("Quiz session already completed")

    try:
        if user_id:
            record_completion(db, user_id, score, category=category, completed_at=now)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Failed to complete quiz %s", session_id)
        raise

    logger.info("Quiz %s completed: %d/%d", session_id, score, total_questions)
    return {
        "score": score,
        "total_questions": total_questions,
        "percentage": percentage(score, total_questions),
    }
