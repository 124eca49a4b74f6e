"""Get project response use case."""

from pydantic import BaseModel

from learnhub.domain.model import ProjectResponseRow
from learnhub.domain.service import ProjectResponseService
from learnhub.domain.value import ProjectResponseId


class GetResponseRequest(BaseModel):
    """Get project response request."""

    response_id: ProjectResponseId


class GetResponseUseCase:
    """Use case for reading one project response."""

    def __init__(self, response_service: ProjectResponseService) -> None:
        self.response_service = response_service

    async def execute(self, request: GetResponseRequest) -> ProjectResponseRow:
        return await self.response_service.get_response(request.response_id)
