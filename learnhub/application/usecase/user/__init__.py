"""User use cases."""

from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
)
from .get_user_info import GetUserInfoRequest, GetUserInfoResponse, GetUserInfoUseCase
from .update_user_info import UpdateUserInfoRequest, UpdateUserInfoUseCase

__all__ = [
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
    "GetUserInfoRequest",
    "GetUserInfoResponse",
    "GetUserInfoUseCase",
    "UpdateUserInfoRequest",
    "UpdateUserInfoUseCase",
]
