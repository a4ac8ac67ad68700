"""Tests for the quiz session lifecycle: start, answer, complete."""

import logging
import random
import uuid
from datetime import datetime, timezone

import pytest

from bible_quiz.core.exceptions import AlreadyCompletedError, InvalidArgumentError, NotFoundError
from bible_quiz.models.question_db.question_crud import create_question
from bible_quiz.models.session_db import session_crud
from bible_quiz.models.session_db.session_crud import start_quiz, get_quiz_session, submit_answer, complete_quiz, \
    get_session_by_id, calculate_score
from bible_quiz.models.stats_db.stats_crud import get_user_stats
from bible_quiz.models.stats_db.stats_db import UserStat
from bible_quiz.schemas.question.question_base import QuestionCreate


def answer_all(db, session, correct):
    """Answer every slot; ``correct`` decides per index whether to pick the right option."""
    _, questions = get_quiz_session(db, session.id)
    for index, question in enumerate(questions):
        if correct(index):
            choice = question.correct_answer
        else:
            choice = (question.correct_answer + 1) % len(question.options)
        submit_answer(db, session.id, index, choice)


def test_start_quiz_caps_sample_at_ten(db, make_question):
    for _ in range(15):
        make_question()

    session = start_quiz(db, "Old Testament", "Easy", rng=random.Random(1))

    assert session.total_questions == 10
    assert len(session.question_ids) == 10
    assert len(set(session.question_ids)) == 10
    assert session.answers == [None] * 10
    assert session.score == 0
    assert session.completed_at is None


def test_start_quiz_uses_all_matching_when_fewer(db, make_question):
    for _ in range(8):
        make_question()
    make_question(difficulty="Hard")

    session = start_quiz(db, "Old Testament", "Easy")

    assert session.total_questions == 8


def test_start_quiz_with_no_matches_gives_empty_session(db, make_question):
    make_question()

    session = start_quiz(db, "Psalms", "Easy", user_id="user_a")
    assert session.question_ids == []
    assert session.total_questions == 0

    result = complete_quiz(db, session.id)
    assert result == {"score": 0, "total_questions": 0, "percentage": 0}


def test_start_quiz_rejects_blank_labels(db):
    with pytest.raises(InvalidArgumentError):
        start_quiz(db, "", "Easy")


def test_session_snapshot_ignores_later_questions(db, make_question, rng):
    make_question()
    session = start_quiz(db, "Old Testament", "Easy", rng=rng)
    make_question()

    _, questions = get_quiz_session(db, session.id)
    assert len(questions) == 1
    assert get_session_by_id(db, session.id).total_questions == 1


def test_get_quiz_session_unknown_id_returns_none(db):
    assert get_quiz_session(db, uuid.uuid4()) is None


def test_get_quiz_session_drops_deleted_questions(db, make_question, rng):
    first = make_question()
    make_question()
    session = start_quiz(db, "Old Testament", "Easy", rng=rng)

    db.delete(first)
    db.commit()

    _, questions = get_quiz_session(db, session.id)
    assert len(questions) == 1
    assert questions[0].id != first.id


def test_score_counts_matching_answers_only(db, make_question, rng):
    for _ in range(5):
        make_question(correct_answer=2)
    session = start_quiz(db, "Old Testament", "Easy", rng=rng)

    submit_answer(db, session.id, 0, 2)
    submit_answer(db, session.id, 1, 0)
    submit_answer(db, session.id, 3, 2)

    result = complete_quiz(db, session.id)
    assert result == {"score": 2, "total_questions": 5, "percentage": 40}
    assert get_session_by_id(db, session.id).score == 2


def test_calculate_score_ignores_sentinels_and_missing_questions(db, make_question):
    q1 = make_question(correct_answer=0)
    q2 = make_question(correct_answer=1)

    assert calculate_score([0, None, 1], [q1, q2, None]) == 1


def test_resubmitting_keeps_last_answer(db, make_question, rng):
    make_question(correct_answer=1)
    session = start_quiz(db, "Old Testament", "Easy", rng=rng)

    submit_answer(db, session.id, 0, 1)
    assert submit_answer(db, session.id, 0, 3) == "Answer submitted"

    assert get_session_by_id(db, session.id).answers == [3]
    assert complete_quiz(db, session.id)["score"] == 0


def test_submit_answer_validates_ranges(db, make_question, rng):
    make_question(options=["A", "B", "C"])
    session = start_quiz(db, "Old Testament", "Easy", rng=rng)

    with pytest.raises(InvalidArgumentError):
        submit_answer(db, session.id, 1, 0)
    with pytest.raises(InvalidArgumentError):
        submit_answer(db, session.id, -1, 0)
    with pytest.raises(InvalidArgumentError):
        submit_answer(db, session.id, 0, 3)
    with pytest.raises(InvalidArgumentError):
        submit_answer(db, session.id, 0, -1)

    assert get_session_by_id(db, session.id).answers == [None]


def test_unknown_session_raises_not_found(db):
    with pytest.raises(NotFoundError):
        submit_answer(db, uuid.uuid4(), 0, 0)
    with pytest.raises(NotFoundError):
        complete_quiz(db, uuid.uuid4())


def test_completion_is_one_time(db, make_question, rng):
    make_question(correct_answer=0)
    session = start_quiz(db, "Old Testament", "Easy", user_id="user_a", rng=rng)
    submit_answer(db, session.id, 0, 0)
    complete_quiz(db, session.id)

    with pytest.raises(AlreadyCompletedError):
        complete_quiz(db, session.id)
    with pytest.raises(AlreadyCompletedError):
        submit_answer(db, session.id, 0, 1)

    stats = get_user_stats(db, "user_a")
    assert stats.total_quizzes == 1
    assert stats.total_score == 1


def test_completion_records_user_stats(db, make_question, rng):
    for _ in range(4):
        make_question()

    first = start_quiz(db, "Old Testament", "Easy", user_id="user_a", rng=rng)
    answer_all(db, first, lambda i: i < 3)
    complete_quiz(db, first.id)

    second = start_quiz(db, "Old Testament", "Easy", user_id="user_a", rng=rng)
    answer_all(db, second, lambda i: i < 1)
    complete_quiz(db, second.id)

    stats = get_user_stats(db, "user_a")
    assert stats.total_quizzes == 2
    assert stats.total_score == 4
    assert stats.best_score == 3
    assert stats.favorite_category == "Old Testament"


def test_anonymous_completion_skips_stats(db, make_question, rng):
    make_question()
    session = start_quiz(db, "Old Testament", "Easy", rng=rng)
    complete_quiz(db, session.id)

    assert db.query(UserStat).count() == 0


def test_completion_uses_given_timestamp(db, make_question, rng):
    make_question()
    session = start_quiz(db, "Old Testament", "Easy", user_id="user_a", rng=rng)
    finished = datetime(2026, 5, 4, 12, 0, tzinfo=timezone.utc)

    complete_quiz(db, session.id, now=finished)

    assert get_session_by_id(db, session.id).completed_at.date() == finished.date()
    assert get_user_stats(db, "user_a").last_quiz_date.date() == finished.date()


def test_failed_stats_update_rolls_back_completion(db, make_question, rng, monkeypatch):
    make_question()
    session = start_quiz(db, "Old Testament", "Easy", user_id="user_a", rng=rng)

    def broken_record_completion(*args, **kwargs):
        raise RuntimeError("stats store unavailable")

    monkeypatch.setattr(session_crud, "record_completion", broken_record_completion)

    with pytest.raises(RuntimeError):
        complete_quiz(db, session.id)

    reloaded = get_session_by_id(db, session.id)
    assert reloaded.completed_at is None
    assert get_user_stats(db, "user_a") is None


def _open_quiz(factory, user_id="user_a", questions=1):
    setup = factory()
    try:
        for n in range(questions):
            create_question(setup, QuestionCreate(
                question=f"Question {n}?",
                options=["A", "B", "C", "D"],
                correct_answer=0,
                category="Old Testament",
                difficulty="Easy",
            ))
        return start_quiz(setup, "Old Testament", "Easy", user_id=user_id).id
    finally:
        setup.close()


def test_concurrent_completion_counts_once(file_session_factory):
    session_id = _open_quiz(file_session_factory)
    first = file_session_factory()
    second = file_session_factory()
    try:
        # first request has already read the open session
        assert get_session_by_id(first, session_id).completed_at is None

        complete_quiz(second, session_id)
        with pytest.raises(AlreadyCompletedError):
            complete_quiz(first, session_id)
    finally:
        first.close()
        second.close()

    check = file_session_factory()
    try:
        stats = get_user_stats(check, "user_a")
        assert stats.total_quizzes == 1
        assert stats.total_score == 0
    finally:
        check.close()


def test_concurrent_answers_to_different_slots_are_both_kept(file_session_factory):
    session_id = _open_quiz(file_session_factory, questions=2)
    first = file_session_factory()
    second = file_session_factory()
    try:
        assert get_session_by_id(first, session_id).answers == [None, None]

        submit_answer(second, session_id, 0, 0)
        submit_answer(first, session_id, 1, 2)
    finally:
        first.close()
        second.close()

    check = file_session_factory()
    try:
        assert get_session_by_id(check, session_id).answers == [0, 2]
    finally:
        check.close()


def test_rejected_answers_are_logged(db, make_question, rng, caplog):
    make_question()
    session = start_quiz(db, "Old Testament", "Easy", rng=rng)

    with caplog.at_level(logging.WARNING, logger="bible_quiz.models.session_db.session_crud"):
        with pytest.raises(InvalidArgumentError):
            submit_answer(db, session.id, 0, 9)
        with pytest.raises(NotFoundError):
            submit_answer(db, uuid.uuid4(), 0, 0)

    messages = [record.getMessage() for record in caplog.records]
    assert any("option 9 out of range" in m for m in messages)
    assert any("not found" in m for m in messages)
