import random
from typing import Dict, List, Optional, Sequence
from uuid import UUID
from sqlalchemy.orm import Session

from bible_quiz.core.exceptions import InvalidArgumentError
from bible_quiz.core.sampling import shuffle_and_take
from bible_quiz.models.question_db.question_db import Question
from bible_quiz.schemas.question.question_base import QuestionCreate


def create_question(db: Session, question_in: QuestionCreate, commit: bool = True) -> Question:
    question = Question(
        slug=question_in.slug,
        question=question_in.question,
        options=list(question_in.options),
        correct_answer=question_in.correct_answer,
        category=question_in.category,
        difficulty=question_in.difficulty,
        verse=question_in.verse,
        explanation=question_in.explanation,
    )
    db.add(question)
    if not commit:
        db.flush()
        return question

    db.commit()
    db.refresh(question)
    return question


def get_question_by_id(db: Session, question_id: UUID) -> Optional[Question]:
    return db.query(Question).filter(Question.id == question_id).first()


def get_question_by_slug(db: Session, slug: str) -> Optional[Question]:
    return db.query(Question).filter(Question.slug == slug).first()


def get_questions_by_ids(db: Session, question_ids: Sequence[str]) -> List[Optional[Question]]:
    """Resolve ids in the given order; missing questions come back as ``None``."""
    if not question_ids:
        return []

    wanted = [UUID(str(qid)) for qid in question_ids]
    found: Dict[UUID, Question] = {
        q.id: q for q in db.query(Question).filter(Question.id.in_(wanted)).all()
    }
    return [found.get(qid) for qid in wanted]


def find_questions(db: Session, category: str, difficulty: Optional[str] = None) -> List[Question]:
    query = db.query(Question).filter(Question.category == category)
    if difficulty:
        query = query.filter(Question.difficulty == difficulty)

    # stable base order so a seeded rng gives reproducible samples
    return query.order_by(Question.id).all()


def get_questions_by_category(
    db: Session,
    category: str,
    difficulty: Optional[str] = None,
    limit: int = 10,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    if limit < 1:
        raise InvalidArgumentError("limit must be at least 1")

    questions = find_questions(db, category, difficulty)
    return shuffle_and_take(questions, limit, rng)


def get_all_categories(db: Session) -> List[str]:
    rows = db.query(Question.category).distinct().all()
    return sorted(row[0] for row in rows)


def get_all_difficulties(db: Session) -> List[str]:
    rows = db.query(Question.difficulty).distinct().all()
    return sorted(row[0] for row in rows)
