"""PostgreSQL repository implementations."""

from learnhub.persistence.repository.content import PostgresContentRepository
from learnhub.persistence.repository.project import PostgresProjectRepository
from learnhub.persistence.repository.project_response import (
    PostgresProjectResponseRepository,
)
from learnhub.persistence.repository.topic import PostgresTopicRepository
from learnhub.persistence.repository.user import PostgresUserRepository
from learnhub.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTopicRepository",
    "PostgresContentRepository",
    "PostgresVoteRepository",
    "PostgresProjectRepository",
    "PostgresProjectResponseRepository",
]
