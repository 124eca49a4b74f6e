"""Update project use case."""

from pydantic import BaseModel

from learnhub.domain.service import ProjectService
from learnhub.domain.value import Caller, ProjectId, ProjectType


class UpdateProjectRequest(BaseModel):
    """Update project request."""

    caller: Caller
    project_id: ProjectId
    title: str
    body: str
    type: ProjectType


class UpdateProjectUseCase:
    """Use case for editing a project. Priority is left alone."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: UpdateProjectRequest) -> None:
        """Execute update project flow.

        Raises:
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller is neither owner nor admin
        """
        await self.project_service.update_project(
            request.caller,
            request.project_id,
            request.title,
            request.body,
            request.type,
        )
