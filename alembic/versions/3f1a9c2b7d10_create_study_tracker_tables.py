"""create study tracker tables

Revision ID: 3f1a9c2b7d10
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1a9c2b7d10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# (name, category, color, sort_order)
SEED_SUBJECTS = [
    ("영어 독해", "english", "#3b82f6", 1),
    ("영어 문법", "english", "#6366f1", 2),
    ("영어 단어", "english", "#0ea5e9", 3),
    ("영어 듣기", "english", "#06b6d4", 4),
    ("수학 개념", "math", "#ef4444", 5),
    ("수학 문제풀이", "math", "#f97316", 6),
    ("국어", "other", "#22c55e", 7),
    ("과학", "other", "#a855f7", 8),
    ("사회", "other", "#eab308", 9),
    ("기타", "other", "#64748b", 10),
]


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create profile, subject, session, goal and textbook tables."""
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_profiles"),
        sa.UniqueConstraint("name", name="uq_profiles_name"),
    )

    subjects = op.create_table(
        "subjects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("color", sa.String(length=20), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_subjects"),
    )
    op.create_index("ix_subjects_sort_order", "subjects", ["sort_order"])

    op.create_table(
        "study_sessions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("subject_id", sa.Integer(), nullable=False),
        sa.Column("study_date", sa.Date(), nullable=False),
        sa.Column("textbook", sa.String(length=255), nullable=True),
        sa.Column("study_range", sa.String(length=255), nullable=True),
        sa.Column("duration_minutes", sa.Integer(), nullable=False),
        sa.Column("memo", sa.Text(), nullable=True),
        sa.CheckConstraint(
            "duration_minutes > 0", name="ck_study_sessions_duration_positive"
        ),
        sa.ForeignKeyConstraint(
            ["profile_id"],
            ["profiles.id"],
            name="fk_study_sessions_profile_id",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["subject_id"], ["subjects.id"], name="fk_study_sessions_subject_id"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_study_sessions"),
    )
    op.create_index("ix_study_sessions_profile_id", "study_sessions", ["profile_id"])
    op.create_index("ix_study_sessions_subject_id", "study_sessions", ["subject_id"])
    op.create_index("ix_study_sessions_study_date", "study_sessions", ["study_date"])

    op.create_table(
        "weekly_goals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("subject_id", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("week_number", sa.Integer(), nullable=False),
        sa.Column("target_minutes", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["profile_id"],
            ["profiles.id"],
            name="fk_weekly_goals_profile_id",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["subject_id"], ["subjects.id"], name="fk_weekly_goals_subject_id"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_weekly_goals"),
        sa.UniqueConstraint(
            "profile_id",
            "subject_id",
            "year",
            "week_number",
            name="uq_weekly_goal_profile_subject_week",
        ),
    )
    op.create_index("ix_weekly_goals_profile_id", "weekly_goals", ["profile_id"])

    op.create_table(
        "textbook_suggestions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("subject_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(
            ["subject_id"],
            ["subjects.id"],
            name="fk_textbook_suggestions_subject_id",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_textbook_suggestions"),
        sa.UniqueConstraint("subject_id", "name", name="uq_textbook_subject_name"),
    )
    op.create_index(
        "ix_textbook_suggestions_subject_id", "textbook_suggestions", ["subject_id"]
    )

    op.bulk_insert(
        subjects,
        [
            {"name": name, "category": category, "color": color, "sort_order": order}
            for name, category, color, order in SEED_SUBJECTS
        ],
    )


def downgrade() -> None:
    """Drop all study tracker tables."""
    op.drop_table("textbook_suggestions")
    op.drop_table("weekly_goals")
    op.drop_table("study_sessions")
    op.drop_table("subjects")
    op.drop_table("profiles")
