"""Test configuration and shared builders."""

from datetime import datetime, timezone
from uuid import uuid4

from learnhub.domain.model import Content, Project, Topic, User
from learnhub.domain.value import (
    Caller,
    ContentId,
    ProjectId,
    ProjectType,
    Role,
    TopicId,
    UserId,
)


def make_user(
    user_id: str,
    score: int = 0,
    full_name: str | None = None,
    role: Role = Role.USER,
) -> User:
    """Build a user whose email and name derive from its ID."""
    return User(
        id=UserId(user_id),
        email=f"{user_id}@learnhub.test",
        full_name=full_name or user_id,
        role=role,
        score=score,
    )


def make_caller(user: User) -> Caller:
    """Build the caller a token for ``user`` would resolve to."""
    return Caller(user_id=user.id, email=user.email, role=user.role)


def make_topic(topic_id: str = "physics") -> Topic:
    return Topic(id=TopicId(topic_id), description=f"All about {topic_id}")


def make_content(
    owner: User,
    topic: Topic,
    title: str = "Entropy for beginners",
    upvote_count: int = 0,
    created_at: datetime | None = None,
) -> Content:
    """Build a content item with fixed filler text."""
    return Content(
        id=ContentId(uuid4()),
        owner_id=owner.id,
        topic_id=topic.id,
        title=title,
        cover_photo="https://cdn.learnhub.test/cover.png",
        summary="A short summary",
        body="The full body",
        upvote_count=upvote_count,
        created_at=created_at or datetime.now(timezone.utc),
    )


def make_project(
    owner: User,
    title: str = "Translate lecture notes",
    type: ProjectType = ProjectType.FREE,
    priority: int = 0,
    created_at: datetime | None = None,
) -> Project:
    return Project(
        id=ProjectId(uuid4()),
        owner_id=owner.id,
        title=title,
        body="Details of the project",
        type=type,
        priority=priority,
        created_at=created_at or datetime.now(timezone.utc),
    )
