"""Get user info use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from learnhub.domain.service import LeaderboardService, UserService
from learnhub.domain.value import Role, UserId


class GetUserInfoRequest(BaseModel):
    """Get user info request."""

    user_id: UserId


class GetUserInfoResponse(BaseModel):
    """A user's profile with their standing on the leaderboard."""

    user_id: UserId
    email: str
    full_name: str
    role: Role
    profile_picture: Optional[str]
    credit: int
    score: int
    rank: int
    created_at: datetime


class GetUserInfoUseCase:
    """Use case for reading a user's profile and rank."""

    def __init__(
        self, user_service: UserService, leaderboard_service: LeaderboardService
    ) -> None:
        """Initialize get user info use case.

        Args:
            user_service: User domain service
            leaderboard_service: Leaderboard domain service
        """
        self.user_service = user_service
        self.leaderboard_service = leaderboard_service

    async def execute(self, request: GetUserInfoRequest) -> GetUserInfoResponse:
        """Execute get user info flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("get_user_info.execute", user_id=request.user_id):
            user = await self.user_service.get_user(request.user_id)
            rank = await self.leaderboard_service.rank_of(user.id)

            return GetUserInfoResponse(
                user_id=user.id,
                email=user.email,
                full_name=user.full_name,
                role=user.role,
                profile_picture=user.profile_picture,
                credit=user.credit,
                score=user.score,
                rank=rank,
                created_at=user.created_at,
            )
