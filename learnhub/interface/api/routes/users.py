"""User and leaderboard routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from learnhub.application.usecase.auth import ResolveCallerUseCase
from learnhub.application.usecase.user import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    GetUserInfoRequest,
    GetUserInfoResponse,
    GetUserInfoUseCase,
    UpdateUserInfoRequest,
    UpdateUserInfoUseCase,
)
from learnhub.domain.value import UserId
from learnhub.interface.api.auth import require_caller

router = APIRouter(prefix="/v1/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserInfoAPIRequest(BaseModel):
    """API request for updating the caller's profile."""

    full_name: str | None = Field(default=None, max_length=255)
    profile_picture: str | None = Field(default=None, max_length=1000)


@router.get("/leaderboard", response_model=GetLeaderboardResponse)
async def get_leaderboard(
    get_leaderboard_use_case: FromDishka[GetLeaderboardUseCase],
    page: int = Query(default=0),
    size: int = Query(default=10),
) -> GetLeaderboardResponse:
    """Get one page of users ranked by score.

    Example:
        GET /v1/users/leaderboard?page=0&size=3

        Response:
        {
            "items": [
                {"user_id": "a", "full_name": "alice", "score": 100, "rank": 1},
                {"user_id": "b", "full_name": "bob", "score": 100, "rank": 1},
                {"user_id": "c", "full_name": "carol", "score": 90, "rank": 2}
            ],
            "total": 5,
            "page": 0,
            "size": 3,
            "total_pages": 2
        }
    """
    return await get_leaderboard_use_case.execute(
        GetLeaderboardRequest(page=page, size=size)
    )


@router.get("", response_model=GetUserInfoResponse)
async def get_user_info(
    get_user_info_use_case: FromDishka[GetUserInfoUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    user_id: str | None = Query(default=None),
    authorization: str | None = Header(default=None),
) -> GetUserInfoResponse:
    """Get a user's profile and rank.

    Without ``user_id`` the caller's own profile is returned, which
    requires authentication.
    """
    if not user_id:
        caller = await require_caller(authorization, resolve_caller)
        user_id = caller.user_id
    return await get_user_info_use_case.execute(
        GetUserInfoRequest(user_id=UserId(user_id))
    )


@router.put("", status_code=status.HTTP_204_NO_CONTENT)
async def update_user_info(
    request: UpdateUserInfoAPIRequest,
    update_user_info_use_case: FromDishka[UpdateUserInfoUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """Update the caller's display name or profile picture."""
    caller = await require_caller(authorization, resolve_caller)
    await update_user_info_use_case.execute(
        UpdateUserInfoRequest(
            caller=caller,
            full_name=request.full_name,
            profile_picture=request.profile_picture,
        )
    )
