"""SQLAlchemy table definitions for LearnHub.

Queries are built with SQLAlchemy Core against these tables.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

user_role = postgresql.ENUM("ADMIN", "USER", name="user_role", create_type=False)
project_type = postgresql.ENUM("FREE", "PAID", name="project_type", create_type=False)

# ============================================================================
# USERS TABLE (IDs are issued by the identity provider)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(128), primary_key=True),
    Column("email", String(50), nullable=False, unique=True),
    Column("full_name", String(255), nullable=False),
    Column("role", user_role, nullable=False, server_default="USER"),
    Column("profile_picture", String(1000), nullable=True),
    Column("credit", Integer, nullable=False, server_default="0"),
    Column("score", Integer, nullable=False, server_default="0"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

# Leaderboard: ORDER BY score DESC, id ASC
Index("idx_users_score_id", users_table.c.score.desc(), users_table.c.id)

# ============================================================================
# CONTENT TOPICS TABLE
# ============================================================================
content_topics_table = Table(
    "content_topics",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("description", String(255), nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

# ============================================================================
# CONTENTS TABLE
# ============================================================================
contents_table = Table(
    "contents",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")
    ),
    Column(
        "user_id",
        String(128),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "topic_id",
        String(255),
        ForeignKey("content_topics.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(255), nullable=False),
    Column("cover_photo", String(1000), nullable=False),
    Column("summary", String(1000), nullable=False),
    Column("body", Text, nullable=False),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint("upvote_count >= 0", name="upvote_count_non_negative"),
)

Index("idx_contents_created_at", contents_table.c.created_at.desc())
Index("idx_contents_upvote_count", contents_table.c.upvote_count.desc())
Index("idx_contents_user_id", contents_table.c.user_id)
Index("idx_contents_topic_id", contents_table.c.topic_id)

# ============================================================================
# CONTENT VOTES TABLE
# ============================================================================
content_votes_table = Table(
    "content_votes",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")
    ),
    Column(
        "content_id",
        UUID,
        ForeignKey("contents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        String(128),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("content_id", "user_id", name="uq_content_vote"),
)

Index("idx_content_votes_user_id", content_votes_table.c.user_id)

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")
    ),
    Column(
        "user_id",
        String(128),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(255), nullable=False),
    Column("body", Text, nullable=False),
    Column("type", project_type, nullable=False),
    Column("priority", Integer, nullable=False, server_default="0"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index("idx_projects_priority", projects_table.c.priority.desc())
Index("idx_projects_created_at", projects_table.c.created_at.desc())
Index("idx_projects_user_id", projects_table.c.user_id)

# ============================================================================
# PROJECT RESPONSES TABLE
# ============================================================================
project_responses_table = Table(
    "project_responses",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")
    ),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        String(128),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("body", Text, nullable=False),
    Column("payment_number", String(20), nullable=True),
    Column("is_verified", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index(
    "idx_project_responses_project_id",
    project_responses_table.c.project_id,
    project_responses_table.c.created_at,
)
