"""Get project use case."""

from pydantic import BaseModel

from learnhub.domain.model import ProjectFullRow
from learnhub.domain.service import ProjectService
from learnhub.domain.value import ProjectId


class GetProjectRequest(BaseModel):
    """Get project request."""

    project_id: ProjectId


class GetProjectUseCase:
    """Use case for reading one project."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: GetProjectRequest) -> ProjectFullRow:
        """Get the project detail.

        Raises:
            NotFoundError: If the project does not exist
        """
        return await self.project_service.get_project_detail(request.project_id)
