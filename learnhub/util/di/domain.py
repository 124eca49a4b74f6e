"""Domain layer DI providers."""

from dishka import Scope, provide

from learnhub.config import AuthSettings
from learnhub.domain.repository import (
    ContentRepository,
    ProjectRepository,
    ProjectResponseRepository,
    TopicRepository,
    UserRepository,
    VoteRepository,
)
from learnhub.domain.service import (
    ContentService,
    JWTService,
    LeaderboardService,
    ProjectResponseService,
    ProjectService,
    TopicService,
    UserService,
    VoteService,
)
from learnhub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_topic_service(self, topic_repository: TopicRepository) -> TopicService:
        """Provide topic domain service."""
        return TopicService(topic_repository=topic_repository)

    @provide
    def get_content_service(
        self,
        content_repository: ContentRepository,
        vote_repository: VoteRepository,
        topic_service: TopicService,
        user_service: UserService,
    ) -> ContentService:
        """Provide content domain service."""
        return ContentService(
            content_repository=content_repository,
            vote_repository=vote_repository,
            topic_service=topic_service,
            user_service=user_service,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        content_repository: ContentRepository,
        user_service: UserService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            content_repository=content_repository,
            user_service=user_service,
        )

    @provide
    def get_project_service(
        self, project_repository: ProjectRepository, user_service: UserService
    ) -> ProjectService:
        """Provide project domain service."""
        return ProjectService(
            project_repository=project_repository, user_service=user_service
        )

    @provide
    def get_project_response_service(
        self,
        response_repository: ProjectResponseRepository,
        project_service: ProjectService,
        user_service: UserService,
    ) -> ProjectResponseService:
        """Provide project response domain service."""
        return ProjectResponseService(
            response_repository=response_repository,
            project_service=project_service,
            user_service=user_service,
        )

    @provide
    def get_leaderboard_service(
        self, user_repository: UserRepository, user_service: UserService
    ) -> LeaderboardService:
        """Provide leaderboard domain service."""
        return LeaderboardService(
            user_repository=user_repository, user_service=user_service
        )
