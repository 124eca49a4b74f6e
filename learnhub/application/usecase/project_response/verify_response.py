"""Verify project response use case."""

import logfire
from pydantic import BaseModel

from learnhub.domain.service import ProjectResponseService
from learnhub.domain.value import Caller, ProjectResponseId


class VerifyResponseRequest(BaseModel):
    """Verify project response request."""

    caller: Caller
    response_id: ProjectResponseId
    verified: bool


class VerifyResponseResponse(BaseModel):
    """Verification state after the request."""

    response_id: ProjectResponseId
    is_verified: bool


class VerifyResponseUseCase:
    """Use case for marking a response as verified, or undoing that."""

    def __init__(self, response_service: ProjectResponseService) -> None:
        """Initialize verify response use case.

        Args:
            response_service: Project response domain service
        """
        self.response_service = response_service

    async def execute(self, request: VerifyResponseRequest) -> VerifyResponseResponse:
        """Execute verify response flow.

        Raises:
            NotFoundError: If the response does not exist
            ForbiddenError: If the caller neither owns the project nor is an admin
        """
        with logfire.span(
            "verify_response.execute",
            response_id=str(request.response_id),
            user_id=request.caller.user_id,
        ):
            response = await self.response_service.verify_response(
                request.caller, request.response_id, request.verified
            )
            return VerifyResponseResponse(
                response_id=response.id, is_verified=response.is_verified
            )
