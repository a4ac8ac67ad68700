import random
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from bible_quiz.core.database import get_db
from bible_quiz.core.exceptions import AlreadyCompletedError, InvalidArgumentError, NotFoundError
from bible_quiz.core.sampling import get_rng
from bible_quiz.models.session_db.session_crud import start_quiz, get_quiz_session, submit_answer, complete_quiz
from bible_quiz.schemas.question.question_base import QuestionOut
from bible_quiz.schemas.quiz.quiz_base import StartQuizIn, StartQuizOut, AnswerSubmission, QuizSessionOut, \
    QuizResultOut

quiz_router = APIRouter(prefix="/quiz", tags=["Quiz"])


@quiz_router.post("/start", response_model=StartQuizOut)
def start_quiz_route(payload: StartQuizIn, db: Session = Depends(get_db), rng: random.Random = Depends(get_rng)):
    try:
        session = start_quiz(db, payload.category, payload.difficulty, user_id=payload.user_id, rng=rng)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return StartQuizOut(session_id=session.id)


@quiz_router.get("/{session_id}", response_model=QuizSessionOut)
def get_quiz_session_route(session_id: UUID, db: Session = Depends(get_db)):
    result = get_quiz_session(db, session_id)
    if not result:
        raise HTTPException(status_code=404, detail="Quiz session not found")

    session, questions = result
    return QuizSessionOut(
        id=session.id,
        user_id=session.user_id,
        category=session.category,
        difficulty=session.difficulty,
        question_ids=session.question_ids,
        answers=session.answers,
        score=session.score,
        total_questions=session.total_questions,
        started_at=session.started_at,
        completed_at=session.completed_at,
        questions=[QuestionOut.model_validate(q) for q in questions],
    )


@quiz_router.post("/{session_id}/answers")
def submit_answer_route(session_id: UUID, payload: AnswerSubmission, db: Session = Depends(get_db)):
    try:
        message = submit_answer(db, session_id, payload.question_index, payload.answer)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AlreadyCompletedError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return {"message": message}


@quiz_router.post("/{session_id}/complete", response_model=QuizResultOut)
def complete_quiz_route(session_id: UUID, db: Session = Depends(get_db)):
    try:
        return complete_quiz(db, session_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AlreadyCompletedError as e:
        raise HTTPException(status_code=409, detail=str(e))
