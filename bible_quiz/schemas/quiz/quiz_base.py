from uuid import UUID
from datetime import datetime

from pydantic import BaseModel, Field
from typing import List, Optional

from bible_quiz.schemas.question.question_base import QuestionOut


class StartQuizIn(BaseModel):
    category: str = Field(min_length=1)
    difficulty: str = Field(min_length=1)
    user_id: Optional[str] = None


class StartQuizOut(BaseModel):
    session_id: UUID


class AnswerSubmission(BaseModel):
    question_index: int
    answer: int


class QuizSessionOut(BaseModel):
    id: UUID
    user_id: Optional[str] = None
    category: str
    difficulty: str
    question_ids: List[UUID]
    answers: List[Optional[int]]
    score: int
    total_questions: int
    started_at: datetime
    completed_at: Optional[datetime] = None
    questions: List[QuestionOut]


class QuizResultOut(BaseModel):
    score: int
    total_questions: int
    percentage: int
