"""Bearer token handling for routes."""

from learnhub.application.usecase.auth import (
    ResolveCallerRequest,
    ResolveCallerUseCase,
)
from learnhub.domain.value import Caller
from learnhub.interface.error import AuthenticationError

BEARER_PREFIX = "bearer "


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Raises:
        AuthenticationError: If the header uses another scheme
    """
    if not authorization:
        return None
    if not authorization.lower().startswith(BEARER_PREFIX):
        raise AuthenticationError("Authorization header must use the Bearer scheme")
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


async def require_caller(
    authorization: str | None, resolve_caller: ResolveCallerUseCase
) -> Caller:
    """Resolve the caller of an endpoint that needs authentication.

    Raises:
        AuthenticationError: If no token was sent
        JWTError: If the token is invalid or expired
    """
    token = bearer_token(authorization)
    if not token:
        raise AuthenticationError("Authentication required")
    return await resolve_caller.execute(ResolveCallerRequest(token=token))


async def optional_caller(
    authorization: str | None, resolve_caller: ResolveCallerUseCase
) -> Caller | None:
    """Resolve the caller when a token was sent, else None.

    A token that is sent but invalid is still rejected.
    """
    token = bearer_token(authorization)
    if not token:
        return None
    return await resolve_caller.execute(ResolveCallerRequest(token=token))
