"""Create project response use case."""

from typing import Optional

from pydantic import BaseModel

from learnhub.domain.service import ProjectResponseService
from learnhub.domain.value import Caller, ProjectId, ProjectResponseId


class CreateResponseRequest(BaseModel):
    """Create project response request."""

    caller: Caller  # From authenticated user
    project_id: ProjectId
    body: str
    payment_number: Optional[str] = None  # Where a paid project pays out


class CreateResponseResponse(BaseModel):
    """Create project response response."""

    response_id: ProjectResponseId


class CreateResponseUseCase:
    """Use case for responding to a project."""

    def __init__(self, response_service: ProjectResponseService) -> None:
        """Initialize create response use case.

        Args:
            response_service: Project response domain service
        """
        self.response_service = response_service

    async def execute(self, request: CreateResponseRequest) -> CreateResponseResponse:
        """Execute create response flow.

        Raises:
            NotFoundError: If the caller is not registered or the project is unknown
        """
        response = await self.response_service.create_response(
            request.caller,
            request.project_id,
            request.body,
            request.payment_number,
        )
        return CreateResponseResponse(response_id=response.id)
