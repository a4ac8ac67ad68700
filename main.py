from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.middleware.cors import CORSMiddleware
from bible_quiz.core.config import settings
from bible_quiz.core.logging_config import configure_logging
from bible_quiz.routes.quiz.quiz_routers import quiz_router
from bible_quiz.routes.question.question_routers import question_router
from bible_quiz.routes.leaderboard.leaderboard_routers import leaderboard_router

logger = configure_logging()

app = FastAPI(title="Bible Quiz API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz_router)
app.include_router(question_router)
app.include_router(leaderboard_router)
logger.info("Routers mounted: quiz, questions, leaderboard")


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return """
    <html>
        <head>
            <title>Bible Quiz</title>
        </head>
        <body>
            <h1>తెలుగు బైబిల్ క్విజ్ API</h1>
            <p>See the API documentation <a href="/docs">here</a>.</p>
        </body>
    </html>
    """
