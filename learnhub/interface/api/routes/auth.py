"""Authentication routes.

Tokens are issued by the identity provider; this API only verifies them.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status

from learnhub.application.usecase.auth import (
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
    ResolveCallerUseCase,
)
from learnhub.interface.api.auth import require_caller

router = APIRouter(prefix="/v1/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    register_use_case: FromDishka[RegisterUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> RegisterResponse:
    """Create the account for the identity in the bearer token.

    The display name defaults to the local part of the token's email.

    Raises:
        AuthenticationError: If no token was sent (401)
        ConflictError: If the account already exists (409)
    """
    caller = await require_caller(authorization, resolve_caller)
    return await register_use_case.execute(RegisterRequest(caller=caller))
