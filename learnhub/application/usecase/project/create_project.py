"""Create project use case."""

from pydantic import BaseModel

from learnhub.domain.service import ProjectService
from learnhub.domain.value import Caller, ProjectId, ProjectType


class CreateProjectRequest(BaseModel):
    """Create project request."""

    caller: Caller  # From authenticated user
    title: str
    body: str
    type: ProjectType


class CreateProjectResponse(BaseModel):
    """Create project response."""

    project_id: ProjectId


class CreateProjectUseCase:
    """Use case for posting a project."""

    def __init__(self, project_service: ProjectService) -> None:
        """Initialize create project use case.

        Args:
            project_service: Project domain service
        """
        self.project_service = project_service

    async def execute(self, request: CreateProjectRequest) -> CreateProjectResponse:
        """Execute create project flow.

        Raises:
            ForbiddenError: If the caller is not an admin
            NotFoundError: If the caller is not registered
        """
        project = await self.project_service.create_project(
            request.caller, request.title, request.body, request.type
        )
        return CreateProjectResponse(project_id=project.id)
