"""Application layer DI providers."""

from dishka import Scope, provide

from learnhub.application.usecase.auth import RegisterUseCase, ResolveCallerUseCase
from learnhub.application.usecase.content import (
    CreateContentUseCase,
    DeleteContentUseCase,
    GetContentUseCase,
    ListContentsUseCase,
    UpdateContentUseCase,
)
from learnhub.application.usecase.project import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdatePriorityUseCase,
    UpdateProjectUseCase,
)
from learnhub.application.usecase.project_response import (
    CreateResponseUseCase,
    GetResponseUseCase,
    ListResponsesUseCase,
    VerifyResponseUseCase,
)
from learnhub.application.usecase.topic import (
    CreateTopicUseCase,
    DeleteTopicUseCase,
    ListTopicsUseCase,
)
from learnhub.application.usecase.user import (
    GetLeaderboardUseCase,
    GetUserInfoUseCase,
    UpdateUserInfoUseCase,
)
from learnhub.application.usecase.vote import ToggleVoteUseCase
from learnhub.config import ListingSettings
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_resolve_caller_use_case(
        self, jwt_service: JWTService
    ) -> ResolveCallerUseCase:
        """Provide resolve caller use case."""
        return ResolveCallerUseCase(jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_register_use_case(self, user_service: UserService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service)

    # Content use cases
    @provide(scope=Scope.REQUEST)
    def get_create_content_use_case(
        self, content_service: ContentService
    ) -> CreateContentUseCase:
        """Provide create content use case."""
        return CreateContentUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_update_content_use_case(
        self, content_service: ContentService
    ) -> UpdateContentUseCase:
        """Provide update content use case."""
        return UpdateContentUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_content_use_case(
        self, content_service: ContentService
    ) -> DeleteContentUseCase:
        """Provide delete content use case."""
        return DeleteContentUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_get_content_use_case(
        self, content_service: ContentService
    ) -> GetContentUseCase:
        """Provide get content use case."""
        return GetContentUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_list_contents_use_case(
        self, content_service: ContentService, settings: ListingSettings
    ) -> ListContentsUseCase:
        """Provide list contents use case."""
        return ListContentsUseCase(content_service=content_service, settings=settings)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_vote_use_case(self, vote_service: VoteService) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(vote_service=vote_service)

    # Topic use cases
    @provide(scope=Scope.REQUEST)
    def get_create_topic_use_case(
        self, topic_service: TopicService
    ) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(topic_service=topic_service)

    @provide(scope=Scope.REQUEST)
    def get_list_topics_use_case(self, topic_service: TopicService) -> ListTopicsUseCase:
        """Provide list topics use case."""
        return ListTopicsUseCase(topic_service=topic_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_topic_use_case(
        self, topic_service: TopicService
    ) -> DeleteTopicUseCase:
        """Provide delete topic use case."""
        return DeleteTopicUseCase(topic_service=topic_service)

    # Project use cases
    @provide(scope=Scope.REQUEST)
    def get_create_project_use_case(
        self, project_service: ProjectService
    ) -> CreateProjectUseCase:
        """Provide create project use case."""
        return CreateProjectUseCase(project_service=project_service)

    @provide(scope=Scope.REQUEST)
    def get_update_project_use_case(
        self, project_service: ProjectService
    ) -> UpdateProjectUseCase:
        """Provide update project use case."""
        return UpdateProjectUseCase(project_service=project_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_project_use_case(
        self, project_service: ProjectService
    ) -> DeleteProjectUseCase:
        """Provide delete project use case."""
        return DeleteProjectUseCase(project_service=project_service)

    @provide(scope=Scope.REQUEST)
    def get_update_priority_use_case(
        self, project_service: ProjectService
    ) -> UpdatePriorityUseCase:
        """Provide update priority use case."""
        return UpdatePriorityUseCase(project_service=project_service)

    @provide(scope=Scope.REQUEST)
    def get_get_project_use_case(
        self, project_service: ProjectService
    ) -> GetProjectUseCase:
        """Provide get project use case."""
        return GetProjectUseCase(project_service=project_service)

    @provide(scope=Scope.REQUEST)
    def get_list_projects_use_case(
        self, project_service: ProjectService, settings: ListingSettings
    ) -> ListProjectsUseCase:
        """Provide list projects use case."""
        return ListProjectsUseCase(project_service=project_service, settings=settings)

    # Project response use cases
    @provide(scope=Scope.REQUEST)
    def get_create_response_use_case(
        self, response_service: ProjectResponseService
    ) -> CreateResponseUseCase:
        """Provide create project response use case."""
        return CreateResponseUseCase(response_service=response_service)

    @provide(scope=Scope.REQUEST)
    def get_list_responses_use_case(
        self, response_service: ProjectResponseService, settings: ListingSettings
    ) -> ListResponsesUseCase:
        """Provide list project responses use case."""
        return ListResponsesUseCase(
            response_service=response_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_response_use_case(
        self, response_service: ProjectResponseService
    ) -> GetResponseUseCase:
        """Provide get project response use case."""
        return GetResponseUseCase(response_service=response_service)

    @provide(scope=Scope.REQUEST)
    def get_verify_response_use_case(
        self, response_service: ProjectResponseService
    ) -> VerifyResponseUseCase:
        """Provide verify project response use case."""
        return VerifyResponseUseCase(response_service=response_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_info_use_case(
        self, user_service: UserService, leaderboard_service: LeaderboardService
    ) -> GetUserInfoUseCase:
        """Provide get user info use case."""
        return GetUserInfoUseCase(
            user_service=user_service, leaderboard_service=leaderboard_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_user_info_use_case(
        self, user_service: UserService
    ) -> UpdateUserInfoUseCase:
        """Provide update user info use case."""
        return UpdateUserInfoUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_leaderboard_use_case(
        self, leaderboard_service: LeaderboardService, settings: ListingSettings
    ) -> GetLeaderboardUseCase:
        """Provide get leaderboard use case."""
        return GetLeaderboardUseCase(
            leaderboard_service=leaderboard_service, settings=settings
        )
