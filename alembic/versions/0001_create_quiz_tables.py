"""create questions, quiz_sessions and user_stats

Revision ID: 0001
Revises:
Create Date: 2026-10-19 18:00:00
"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "questions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("slug", sa.String(), nullable=True, unique=True),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=False),
        sa.Column("correct_answer", sa.Integer(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("difficulty", sa.String(), nullable=False),
        sa.Column("verse", sa.String(), nullable=True),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_questions_id", "questions", ["id"], unique=True)
    op.create_index("ix_questions_category", "questions", ["category"])
    op.create_index("ix_questions_difficulty", "questions", ["difficulty"])

    op.create_table(
        "quiz_sessions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.String(), nullable=True),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("difficulty", sa.String(), nullable=False),
        sa.Column("question_ids", sa.JSON(), nullable=False),
        sa.Column("answers", sa.JSON(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("total_questions", sa.Integer(), nullable=False),
        sa.Column("started_at", sa.DateTime(), nullable=True),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_quiz_sessions_id", "quiz_sessions", ["id"], unique=True)
    op.create_index("ix_quiz_sessions_user_id", "quiz_sessions", ["user_id"])

    op.create_table(
        "user_stats",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("total_quizzes", sa.Integer(), nullable=False),
        sa.Column("total_score", sa.Integer(), nullable=False),
        sa.Column("best_score", sa.Integer(), nullable=False),
        sa.Column("streak", sa.Integer(), nullable=False),
        sa.Column("last_quiz_date", sa.DateTime(), nullable=True),
        sa.Column("favorite_category", sa.String(), nullable=True),
        sa.Column("category_counts", sa.JSON(), nullable=False),
    )
    op.create_index("ix_user_stats_id", "user_stats", ["id"])
    op.create_index("ix_user_stats_user_id", "user_stats", ["user_id"], unique=True)


def downgrade() -> None:
    op.drop_table("user_stats")
    op.drop_table("quiz_sessions")
    op.drop_table("questions")
