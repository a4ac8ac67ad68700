from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from bible_quiz.core.config import settings
from bible_quiz.core.database import get_db
from bible_quiz.models.stats_db.stats_crud import get_leaderboard, get_user_stats
from bible_quiz.schemas.stats.stats_base import UserStatOut

leaderboard_router = APIRouter(prefix="/leaderboard", tags=["Leaderboard"])


@leaderboard_router.get("/", response_model=List[UserStatOut])
def leaderboard(limit: int = Query(settings.LEADERBOARD_LIMIT, ge=1), db: Session = Depends(get_db)):
    return get_leaderboard(db, limit=limit)


@leaderboard_router.get("/users/{user_id}", response_model=UserStatOut)
def user_stats(user_id: str, db: Session = Depends(get_db)):
    stats = get_user_stats(db, user_id)
    if not stats:
        raise HTTPException(status_code=404, detail="User stats not found")
    return stats
