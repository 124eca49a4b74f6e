"""Update user info use case."""

from typing import Optional

from pydantic import BaseModel, Field

from learnhub.domain.service import UserService
from learnhub.domain.value import Caller


class UpdateUserInfoRequest(BaseModel):
    """Update user info request. Empty fields are left unchanged."""

    caller: Caller  # From authenticated user
    full_name: Optional[str] = Field(default=None, max_length=255)
    profile_picture: Optional[str] = Field(default=None, max_length=1000)


class UpdateUserInfoUseCase:
    """Use case for editing the caller's own profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateUserInfoRequest) -> None:
        """Execute update user info flow.

        Raises:
            NotFoundError: If the caller is not registered
        """
        await self.user_service.update_info(
            request.caller,
            full_name=request.full_name,
            profile_picture=request.profile_picture,
        )
