"""In-memory repository implementations for testing."""

from .content import InMemoryContentRepository
from .project import InMemoryProjectRepository
from .project_response import InMemoryProjectResponseRepository
from .store import InMemoryStore
from .topic import InMemoryTopicRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryContentRepository",
    "InMemoryProjectRepository",
    "InMemoryProjectResponseRepository",
    "InMemoryStore",
    "InMemoryTopicRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
