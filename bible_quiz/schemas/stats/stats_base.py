from datetime import datetime

from pydantic import BaseModel
from typing import Optional


class UserStatOut(BaseModel):
    user_id: str
    total_quizzes: int
    total_score: int
    best_score: int
    average_score: float
    streak: int
    last_quiz_date: Optional[datetime] = None
    favorite_category: Optional[str] = None

    class Config:
        from_attributes = True
