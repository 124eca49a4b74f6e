"""initial_schema

Create the schema for LearnHub:
- Users (IDs issued by the identity provider, scored for the leaderboard)
- Content topics (caller-chosen IDs)
- Contents (denormalized upvote counter)
- Content votes (one per user and content item)
- Projects (priority-ordered)
- Project responses (verified by the project owner)

Revision ID: 3c41d9e07a52
Revises:
Create Date: 2026-10-19 09:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41d9e07a52"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _uuid_id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE user_role AS ENUM ('ADMIN', 'USER');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE project_type AS ENUM ('FREE', 'PAID');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(128), nullable=False),
        sa.Column("email", sa.String(50), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column(
            "role",
            postgresql.ENUM("ADMIN", "USER", name="user_role", create_type=False),
            nullable=False,
            server_default="USER",
        ),
        sa.Column("profile_picture", sa.String(1000), nullable=True),
        sa.Column("credit", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("score", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index(
        "idx_users_score_id", "users", [sa.text("score DESC"), "id"]
    )

    # ========================================================================
    # CONTENT_TOPICS table
    # ========================================================================
    op.create_table(
        "content_topics",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # CONTENTS table
    # ========================================================================
    op.create_table(
        "contents",
        _uuid_id(),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("topic_id", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("cover_photo", sa.String(1000), nullable=False),
        sa.Column("summary", sa.String(1000), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("upvote_count", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["topic_id"], ["content_topics.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvote_count >= 0", name="upvote_count_non_negative"),
    )
    op.create_index(
        "idx_contents_created_at", "contents", [sa.text("created_at DESC")]
    )
    op.create_index(
        "idx_contents_upvote_count", "contents", [sa.text("upvote_count DESC")]
    )
    op.create_index("idx_contents_user_id", "contents", ["user_id"])
    op.create_index("idx_contents_topic_id", "contents", ["topic_id"])

    # ========================================================================
    # CONTENT_VOTES table
    # ========================================================================
    op.create_table(
        "content_votes",
        _uuid_id(),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["content_id"], ["contents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        # Backs the toggle: a second insert for the same pair is rejected
        sa.UniqueConstraint("content_id", "user_id", name="uq_content_vote"),
    )
    op.create_index("idx_content_votes_user_id", "content_votes", ["user_id"])

    # ========================================================================
    # PROJECTS table
    # ========================================================================
    op.create_table(
        "projects",
        _uuid_id(),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM("FREE", "PAID", name="project_type", create_type=False),
            nullable=False,
        ),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_projects_priority", "projects", [sa.text("priority DESC")])
    op.create_index(
        "idx_projects_created_at", "projects", [sa.text("created_at DESC")]
    )
    op.create_index("idx_projects_user_id", "projects", ["user_id"])

    # ========================================================================
    # PROJECT_RESPONSES table
    # ========================================================================
    op.create_table(
        "project_responses",
        _uuid_id(),
        sa.Column("project_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("payment_number", sa.String(20), nullable=True),
        sa.Column(
            "is_verified", sa.Boolean(), nullable=False, server_default="false"
        ),
        _created_at(),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_project_responses_project_id",
        "project_responses",
        ["project_id", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("project_responses")
    op.drop_table("projects")
    op.drop_table("content_votes")
    op.drop_table("contents")
    op.drop_table("content_topics")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS project_type")
    op.execute("DROP TYPE IF EXISTS user_role")
