"""Repository interfaces for the LearnHub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from learnhub.domain.repository.content import ContentRepository
from learnhub.domain.repository.project import ProjectRepository
from learnhub.domain.repository.project_response import ProjectResponseRepository
from learnhub.domain.repository.topic import TopicRepository
from learnhub.domain.repository.user import UserRepository
from learnhub.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "TopicRepository",
    "ContentRepository",
    "VoteRepository",
    "ProjectRepository",
    "ProjectResponseRepository",
]
