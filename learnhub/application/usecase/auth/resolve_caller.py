"""Resolve caller use case."""

from pydantic import BaseModel

from learnhub.domain.service import JWTService
from learnhub.domain.value import Caller


class ResolveCallerRequest(BaseModel):
    """Resolve caller request."""

    token: str  # Bearer token


class ResolveCallerUseCase:
    """Use case for turning a bearer token into the calling identity."""

    def __init__(self, jwt_service: JWTService) -> None:
        self.jwt_service = jwt_service

    async def execute(self, request: ResolveCallerRequest) -> Caller:
        """Verify the token and read the caller from its claims.

        Raises:
            JWTError: If token is invalid or expired
        """
        return self.jwt_service.resolve_caller(request.token)
