import logging

from sqlalchemy.orm import Session
from bible_quiz.core.database import SessionLocal
from bible_quiz.core.logging_config import configure_logging
from bible_quiz.models.question_db.question_crud import create_question, get_question_by_slug
from bible_quiz.schemas.question.question_base import QuestionCreate

logger = logging.getLogger(__name__)

OLD_TESTAMENT = "పాత నిబంధన"
NEW_TESTAMENT = "కొత్త నిబంధన"

EASY = "సులభం"
MEDIUM = "మధ్యమం"
HARD = "కష్టం"


sample_questions = [
    {
        "slug": "ot-creation-days",
        "question": "దేవుడు ప్రపంచాన్ని ఎన్ని రోజుల్లో సృష్టించాడు?",
        "options": ["5 రోజులు", "6 రోజులు", "7 రోజులు", "8 రోజులు"],
        "correct_answer": 1,
        "category": OLD_TESTAMENT,
        "difficulty": EASY,
        "verse": "ఆదికాండము 1:31",
        "explanation": "దేవుడు 6 రోజుల్లో ప్రపంచాన్ని సృష్టించి, 7వ రోజు విశ్రమించాడు."
    },
    {
        "slug": "nt-birthplace-of-jesus",
        "question": "యేసు ఎక్కడ జన్మించాడు?",
        "options": ["నజరేతు", "బేత్లెహేము", "జెరూసలేము", "కపర్నహూము"],
        "correct_answer": 1,
        "category": NEW_TESTAMENT,
        "difficulty": EASY,
        "verse": "మత్తయి 2:1",
        "explanation": "యేసు బేత్లెహేములో జన్మించాడు, దావీదు పట్టణంలో."
    },
    {
        "slug": "ot-ten-commandments",
        "question": "మోషే ఎన్ని ఆజ్ఞలను పొందాడు?",
        "options": ["8", "10", "12", "15"],
        "correct_answer": 1,
        "category": OLD_TESTAMENT,
        "difficulty": EASY,
        "verse": "నిర్గమకాండము 20",
        "explanation": "మోషే సీనై పర్వతంపై దేవుని నుండి 10 ఆజ్ఞలను పొందాడు."
    },
    {
        "slug": "nt-twelve-disciples",
        "question": "యేసు ఎంత మంది శిష్యులను ఎంపిక చేసుకున్నాడు?",
        "options": ["10", "11", "12", "13"],
        "correct_answer": 2,
        "category": NEW_TESTAMENT,
        "difficulty": EASY,
        "verse": "మత్తయి 10:1-4",
        "explanation": "యేసు 12 మంది శిష్యులను ఎంపిక చేసుకున్నాడు."
    },
    {
        "slug": "ot-david-and-goliath",
        "question": "దావీదు ఎవరిని చంపాడు?",
        "options": ["గొల్యాతు", "సౌలు", "అబ్షాలోము", "యోనాతాను"],
        "correct_answer": 0,
        "category": OLD_TESTAMENT,
        "difficulty": MEDIUM,
        "verse": "1 సమూయేలు 17:50",
        "explanation": "దావీదు రాయితో గొల్యాతు దైత్యుడిని చంపాడు."
    },
    {
        "slug": "nt-first-resurrection-appearance",
        "question": "యేసు మొదట ఎవరికి కనిపించాడు పునరుత్థానం తర్వాత?",
        "options": ["పేతురు", "యోహాను", "మగ్దలేనే మరియ", "తోమా"],
        "correct_answer": 2,
        "category": NEW_TESTAMENT,
        "difficulty": MEDIUM,
        "verse": "యోహాను 20:14-18",
        "explanation": "యేసు పునరుత్థానం తర్వాత మొదట మగ్దలేనే మరియకు కనిపించాడు."
    },
    {
        "slug": "ot-flood-days",
        "question": "నోవహు ఓడలో ఎంత రోజులు ఉన్నాడు?",
        "options": ["40 రోజులు", "100 రోజులు", "150 రోజులు", "365 రోజులు"],
        "correct_answer": 2,
        "category": OLD_TESTAMENT,
        "difficulty": HARD,
        "verse": "ఆదికాండము 7:24",
        "explanation": "నీరు 150 రోజులు భూమిపై ఉండింది."
    },
    {
        "slug": "nt-pauline-letters",
        "question": "పౌలు ఎన్ని లేఖలు వ్రాసాడు?",
        "options": ["12", "13", "14", "15"],
        "correct_answer": 1,
        "category": NEW_TESTAMENT,
        "difficulty": HARD,
        "verse": "కొత్త నిబంధన",
        "explanation": "పౌలు 13 లేఖలు వ్రాసాడు (హెబ్రీయులకు వ్రాసిన లేఖ వివాదాస్పదం)."
    }
]


def add_sample_questions(db: Session) -> str:
    """Insert the sample catalog, skipping entries that were seeded before."""
    added = 0
    for data in sample_questions:
        if get_question_by_slug(db, data["slug"]):
            continue

        create_question(db, QuestionCreate(**data), commit=False)
        added += 1

    db.commit()
    logger.info("Seeded %d sample questions (%d already present)", added, len(sample_questions) - added)
    return "Sample questions added successfully!"


def seed_sample_questions():
    db: Session = SessionLocal()
    try:
        add_sample_questions(db)
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    seed_sample_questions()
