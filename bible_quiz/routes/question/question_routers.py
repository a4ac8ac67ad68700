import random
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from bible_quiz.core.database import get_db
from bible_quiz.core.sampling import get_rng
from bible_quiz.models.question_db.question_crud import get_questions_by_category, get_all_categories, \
    get_all_difficulties
from bible_quiz.models.question_db.seed_questions import add_sample_questions
from bible_quiz.schemas.question.question_base import QuestionOut

question_router = APIRouter(prefix="/questions", tags=["Questions"])


@question_router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db)):
    return get_all_categories(db)


@question_router.get("/difficulties", response_model=List[str])
def list_difficulties(db: Session = Depends(get_db)):
    return get_all_difficulties(db)


@question_router.get("/", response_model=List[QuestionOut])
def list_questions(
    category: str = Query(..., min_length=1),
    difficulty: Optional[str] = None,
    limit: int = Query(10, ge=1),
    db: Session = Depends(get_db),
    rng: random.Random = Depends(get_rng),
):
    return get_questions_by_category(db, category, difficulty=difficulty, limit=limit, rng=rng)


@question_router.post("/seed")
def seed_questions(db: Session = Depends(get_db)):
    return {"message": add_sample_questions(db)}
