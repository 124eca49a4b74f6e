"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from learnhub.config import Settings
from learnhub.domain.repository import (
    ContentRepository,
    ProjectRepository,
    ProjectResponseRepository,
    TopicRepository,
    UserRepository,
    VoteRepository,
)
from learnhub.persistence.database import create_engine, create_session_factory
from learnhub.persistence.repository import (
    PostgresContentRepository,
    PostgresProjectRepository,
    PostgresProjectResponseRepository,
    PostgresTopicRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from learnhub.util.di.base import ProviderBase
from learnhub.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        Row locks taken during the request are released at that point.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self, session: AsyncSession) -> TopicRepository:
        """Provide Topic repository."""
        return PostgresTopicRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_content_repository(self, session: AsyncSession) -> ContentRepository:
        """Provide Content repository."""
        return PostgresContentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_project_repository(self, session: AsyncSession) -> ProjectRepository:
        """Provide Project repository."""
        return PostgresProjectRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_project_response_repository(
        self, session: AsyncSession
    ) -> ProjectResponseRepository:
        """Provide ProjectResponse repository."""
        return PostgresProjectResponseRepository(session)
