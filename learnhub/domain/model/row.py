"""Read projections returned by listings and detail lookups.

Rows join the author's display data onto the entity so a page can be
rendered without further lookups. Listing predicates and ordering rules
are evaluated against the attribute names used here.
"""

from datetime import datetime
from typing import Optional

from learnhub.domain.model.common import DomainModel
from learnhub.domain.value import (
    ContentId,
    ProjectId,
    ProjectResponseId,
    ProjectType,
    TopicId,
    UserId,
    VoteId,
)


class ContentShortRow(DomainModel):
    """Content as shown in a listing."""

    id: ContentId
    topic_id: TopicId
    title: str
    voted_by_viewer: Optional[VoteId] = None  # Viewer's vote id, if any
    owner_id: UserId
    author_name: str
    author_profile_picture: Optional[str] = None
    cover_photo: str
    summary: str
    upvote_count: int
    created_at: datetime


class ContentFullRow(ContentShortRow):
    """Content detail, including the body."""

    body: str


class ProjectShortRow(DomainModel):
    """Project as shown in a listing."""

    id: ProjectId
    title: str
    owner_id: UserId
    author_name: str
    author_profile_picture: Optional[str] = None
    created_at: datetime
    type: ProjectType
    priority: int


class ProjectFullRow(ProjectShortRow):
    """Project detail, including the body."""

    body: str


class ProjectResponseRow(DomainModel):
    """A response to a project with its responder's display data."""

    id: ProjectResponseId
    project_id: ProjectId
    responder_id: UserId
    responder_name: str
    responder_profile_picture: Optional[str] = None
    body: str
    payment_number: Optional[str] = None
    is_verified: bool
    created_at: datetime


class LeaderboardRow(DomainModel):
    """A user's leaderboard position.

    ``rank`` is the dense rank over the whole user population.
    """

    user_id: UserId
    full_name: str
    profile_picture: Optional[str] = None
    score: int
    rank: int
