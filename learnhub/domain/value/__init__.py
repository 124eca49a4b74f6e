"""Domain value objects for LearnHub."""

from learnhub.domain.value.identifiers import (
    ContentId,
    ProjectId,
    ProjectResponseId,
    TopicId,
    UserId,
    VoteId,
)
from learnhub.domain.value.types import (
    Caller,
    ContentSortCategory,
    DateRange,
    ProjectSortCategory,
    ProjectType,
    Role,
    SortDirection,
    VoteDelta,
)

__all__ = [
    # Identifiers
    "UserId",
    "TopicId",
    "ContentId",
    "VoteId",
    "ProjectId",
    "ProjectResponseId",
    # Types
    "Caller",
    "ContentSortCategory",
    "DateRange",
    "ProjectSortCategory",
    "ProjectType",
    "Role",
    "SortDirection",
    "VoteDelta",
]
