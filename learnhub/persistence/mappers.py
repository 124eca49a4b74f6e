"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Ownership columns are
named ``user_id`` in the schema and ``owner_id``/``voter_id``/``responder_id``
in the domain.
"""

from typing import Any, Dict

from learnhub.domain.model import (
    Content,
    ContentFullRow,
    ContentShortRow,
    LeaderboardRow,
    Project,
    ProjectFullRow,
    ProjectResponse,
    ProjectResponseRow,
    ProjectShortRow,
    Topic,
    User,
    Vote,
)
from learnhub.domain.value import (
    ContentId,
    ProjectId,
    ProjectResponseId,
    ProjectType,
    Role,
    TopicId,
    UserId,
    VoteId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        email=row["email"],
        full_name=row["full_name"],
        role=Role(row["role"]),
        profile_picture=row.get("profile_picture"),
        credit=row["credit"],
        score=row["score"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model."""
    return Topic(
        id=TopicId(row["id"]),
        description=row["description"],
        created_at=row["created_at"],
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict."""
    return topic.model_dump()


def row_to_content(row: Dict[str, Any]) -> Content:
    """Convert database row to Content domain model.

    Args:
        row: Database row as dict

    Returns:
        Content domain model
    """
    return Content(
        id=ContentId(row["id"]),
        owner_id=UserId(row["user_id"]),
        topic_id=TopicId(row["topic_id"]),
        title=row["title"],
        cover_photo=row["cover_photo"],
        summary=row["summary"],
        body=row["body"],
        upvote_count=row["upvote_count"],
        created_at=row["created_at"],
    )


def content_to_dict(content: Content) -> Dict[str, Any]:
    """Convert Content domain model to database dict.

    Args:
        content: Content domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = content.model_dump(exclude={"owner_id"})
    data["user_id"] = content.owner_id
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        content_id=ContentId(row["content_id"]),
        voter_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "content_id": vote.content_id,
        "user_id": vote.voter_id,
        "created_at": vote.created_at,
    }


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model."""
    return Project(
        id=ProjectId(row["id"]),
        owner_id=UserId(row["user_id"]),
        title=row["title"],
        body=row["body"],
        type=ProjectType(row["type"]),
        priority=row["priority"],
        created_at=row["created_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Convert Project domain model to database dict."""
    data = project.model_dump(exclude={"owner_id"})
    data["user_id"] = project.owner_id
    data["type"] = project.type.value
    return data


def row_to_project_response(row: Dict[str, Any]) -> ProjectResponse:
    """Convert database row to ProjectResponse domain model."""
    return ProjectResponse(
        id=ProjectResponseId(row["id"]),
        project_id=ProjectId(row["project_id"]),
        responder_id=UserId(row["user_id"]),
        body=row["body"],
        payment_number=row.get("payment_number"),
        is_verified=row["is_verified"],
        created_at=row["created_at"],
    )


def project_response_to_dict(response: ProjectResponse) -> Dict[str, Any]:
    """Convert ProjectResponse domain model to database dict."""
    data = response.model_dump(exclude={"responder_id"})
    data["user_id"] = response.responder_id
    return data


# Read projections: the queries label their columns with the projection's
# field names, so rows validate directly.


def row_to_content_short(row: Dict[str, Any]) -> ContentShortRow:
    return ContentShortRow.model_validate(row)


def row_to_content_full(row: Dict[str, Any]) -> ContentFullRow:
    return ContentFullRow.model_validate(row)


def row_to_project_short(row: Dict[str, Any]) -> ProjectShortRow:
    return ProjectShortRow.model_validate(row)


def row_to_project_full(row: Dict[str, Any]) -> ProjectFullRow:
    return ProjectFullRow.model_validate(row)


def row_to_project_response_row(row: Dict[str, Any]) -> ProjectResponseRow:
    return ProjectResponseRow.model_validate(row)


def row_to_leaderboard(row: Dict[str, Any]) -> LeaderboardRow:
    return LeaderboardRow.model_validate(row)
