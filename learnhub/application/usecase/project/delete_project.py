"""Delete project use case."""

from pydantic import BaseModel

from learnhub.domain.service import ProjectService
from learnhub.domain.value import Caller, ProjectId


class DeleteProjectRequest(BaseModel):
    """Delete project request."""

    caller: Caller
    project_id: ProjectId


class DeleteProjectUseCase:
    """Use case for removing a project and its responses."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: DeleteProjectRequest) -> None:
        await self.project_service.delete_project(request.caller, request.project_id)
