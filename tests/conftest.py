import random

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bible_quiz.core.database import Base, get_db
from bible_quiz.core.sampling import get_rng
from bible_quiz.models.question_db.question_crud import create_question
from bible_quiz.models.question_db.question_db import Question  # noqa: F401
from bible_quiz.models.session_db.session_db import QuizSession  # noqa: F401
from bible_quiz.models.stats_db.stats_db import UserStat  # noqa: F401
from bible_quiz.schemas.question.question_base import QuestionCreate


class NoShuffle(random.Random):
    """Random source that leaves the candidate order untouched."""

    def shuffle(self, x):
        return None


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def rng():
    return NoShuffle()


@pytest.fixture
def make_question(db):
    counter = {"n": 0}

    def _make(category="Old Testament", difficulty="Easy", correct_answer=0, options=None, **extra):
        counter["n"] += 1
        question_in = QuestionCreate(
            question=f"Question {counter['n']}?",
            options=options or ["A", "B", "C", "D"],
            correct_answer=correct_answer,
            category=category,
            difficulty=difficulty,
            **extra,
        )
        return create_question(db, question_in)

    return _make


@pytest.fixture
def client(engine, rng):
    from main import app

    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rng] = lambda: rng
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def file_session_factory(tmp_path):
    """Sessions on a file-backed SQLite database, each with its own connection."""
    engine = create_engine(f"sqlite:///{tmp_path / 'quiz.db'}", connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()
