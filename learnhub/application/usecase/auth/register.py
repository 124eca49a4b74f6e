"""Register use case."""

from datetime import datetime

from pydantic import BaseModel

from learnhub.domain.service import UserService
from learnhub.domain.value import Caller, Role


class RegisterRequest(BaseModel):
    """Register request."""

    caller: Caller  # Identity from the verified token


class RegisterResponse(BaseModel):
    """Register response."""

    user_id: str
    email: str
    full_name: str
    role: Role
    created_at: datetime


class RegisterUseCase:
    """Use case for creating the account of a newly authenticated identity."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration.

        Raises:
            InvalidArgumentError: If the token carries no email
            ConflictError: If the account already exists
        """
        user = await self.user_service.register(request.caller)
        return RegisterResponse(
            user_id=user.id,
            email=user.email,
            full_name=user.full_name,
            role=user.role,
            created_at=user.created_at,
        )
