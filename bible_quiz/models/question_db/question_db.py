import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, Text, DateTime, JSON, Uuid
from bible_quiz.core.database import Base


class Question(Base):
    __tablename__ = "questions"

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        unique=True,
        index=True
    )

    slug = Column(String, unique=True, nullable=True)
    question = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)  # ["option 1", "option 2", ...]
    correct_answer = Column(Integer, nullable=False)  # index into options
    category = Column(String, nullable=False, index=True)
    difficulty = Column(String, nullable=False, index=True)
    verse = Column(String, nullable=True)
    explanation = Column(Text, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
