import logging
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session

from bible_quiz.core.exceptions import InvalidArgumentError
from bible_quiz.models.stats_db.stats_db import UserStat

logger = logging.getLogger(__name__)


def next_streak(current: int, last_quiz_date: Optional[datetime], completed_at: datetime) -> int:
    """Consecutive-day streak after a quiz finished at ``completed_at``."""
    if last_quiz_date is None:
        return 1

    gap = (completed_at.date() - last_quiz_date.date()).days
    if gap <= 0:
        return max(current, 1)
    if gap == 1:
        return current + 1
    return 1


def pick_favorite_category(category_counts: dict) -> Optional[str]:
    if not category_counts:
        return None
    return min(category_counts, key=lambda name: (-category_counts[name], name))


def get_user_stats(db: Session, user_id: str) -> Optional[UserStat]:
    return db.query(UserStat).filter(UserStat.user_id == user_id).first()


def record_completion(
    db: Session,
    user_id: str,
    score: int,
    category: Optional[str] = None,
    completed_at: Optional[datetime] = None,
) -> UserStat:
    """Fold one finished quiz into the user's running stats.

    Only flushes; committing is left to the caller so the session completion
    and the stats update land in the same transaction.
    """
    completed_at = completed_at or datetime.now(timezone.utc)
    stats = (
        db.query(UserStat)
        .filter(UserStat.user_id == user_id)
        .with_for_update()
        .first()
    )

    if stats is None:
        stats = UserStat(
            user_id=user_id,
            total_quizzes=1,
            total_score=score,
            best_score=score,
            streak=1,
            last_quiz_date=completed_at,
            category_counts={},
        )
        db.add(stats)
    else:
        stats.total_quizzes += 1
        stats.total_score += score
        stats.best_score = max(stats.best_score, score)
        stats.streak = next_streak(stats.streak, stats.last_quiz_date, completed_at)
        stats.last_quiz_date = completed_at

    if category:
        counts = dict(stats.category_counts or {})
        counts[category] = counts.get(category, 0) + 1
        stats.category_counts = counts
        stats.favorite_category = pick_favorite_category(counts)

    db.flush()
    logger.debug("Stats for %s: %d quizzes, best %d", user_id, stats.total_quizzes, stats.best_score)
    return stats


def get_leaderboard(db: Session, limit: int = 10) -> List[UserStat]:
    if limit < 1:
        raise InvalidArgumentError("limit must be at least 1")

    return (
        db.query(UserStat)
        .order_by(UserStat.best_score.desc(), UserStat.total_score.desc(), UserStat.user_id.asc())
        .limit(limit)
        .all()
    )
