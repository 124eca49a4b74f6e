"""Domain model entities for LearnHub."""

from learnhub.domain.model.content import Content
from learnhub.domain.model.project import Project, ProjectResponse
from learnhub.domain.model.row import (
    ContentFullRow,
    ContentShortRow,
    LeaderboardRow,
    ProjectFullRow,
    ProjectResponseRow,
    ProjectShortRow,
)
from learnhub.domain.model.topic import Topic
from learnhub.domain.model.user import User
from learnhub.domain.model.vote import Vote

__all__ = [
    "User",
    "Topic",
    "Content",
    "Vote",
    "Project",
    "ProjectResponse",
    # Read projections
    "ContentShortRow",
    "ContentFullRow",
    "ProjectShortRow",
    "ProjectFullRow",
    "ProjectResponseRow",
    "LeaderboardRow",
]
