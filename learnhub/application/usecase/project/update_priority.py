"""Update project priority use case."""

from pydantic import BaseModel

from learnhub.domain.service import ProjectService
from learnhub.domain.value import Caller, ProjectId


class UpdatePriorityRequest(BaseModel):
    """Update priority request."""

    caller: Caller
    project_id: ProjectId
    priority: int


class UpdatePriorityUseCase:
    """Use case for reprioritizing a project."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: UpdatePriorityRequest) -> None:
        """Execute update priority flow.

        Raises:
            ForbiddenError: If the caller is not an admin
            NotFoundError: If the project does not exist
        """
        await self.project_service.update_priority(
            request.caller, request.project_id, request.priority
        )
