import uuid
from sqlalchemy import Column, String, Integer, DateTime, JSON, Uuid
from bible_quiz.core.database import Base


class UserStat(Base):
    __tablename__ = "user_stats"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(String, unique=True, nullable=False, index=True)
    total_quizzes = Column(Integer, nullable=False, default=0)
    total_score = Column(Integer, nullable=False, default=0)
    best_score = Column(Integer, nullable=False, default=0)
    streak = Column(Integer, nullable=False, default=0)
    last_quiz_date = Column(DateTime, nullable=True)
    favorite_category = Column(String, nullable=True)
    category_counts = Column(JSON, nullable=False, default=dict)  # { category: quizzes }

    @property
    def average_score(self) -> float:
        if not self.total_quizzes:
            return 0.0
        return round(self.total_score / self.total_quizzes, 1)
