from uuid import UUID

from pydantic import BaseModel, Field, model_validator
from typing import List, Optional


class QuestionBase(BaseModel):
    question: str = Field(min_length=1)
    options: List[str] = Field(min_length=2)
    correct_answer: int = Field(ge=0)
    category: str = Field(min_length=1)
    difficulty: str = Field(min_length=1)
    verse: Optional[str] = None
    explanation: Optional[str] = None

    @model_validator(mode="after")
    def check_correct_answer(self):
        if self.correct_answer >= len(self.options):
            raise ValueError("correct_answer must be a valid index into options")
        return self


class QuestionCreate(QuestionBase):
    slug: Optional[str] = None


class QuestionOut(QuestionBase):
    id: UUID

    class Config:
        from_attributes = True
