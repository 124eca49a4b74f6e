"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from functools import lru_cache

import jwt
from pydantic import BaseModel

from learnhub.config import AuthSettings
from learnhub.util.error import ConfigurationError


class TokenPayload(BaseModel):
    """Claims read from an identity-provider token."""

    sub: str
    email: str | None = None
    scp: str | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


@lru_cache(maxsize=4)
def _jwks_client(url: str) -> jwt.PyJWKClient:
    # PyJWKClient caches fetched keys itself; one client per URL keeps that cache
    return jwt.PyJWKClient(url)


def create_token(
    sub: str,
    settings: AuthSettings,
    email: str | None = None,
    scp: str | None = None,
) -> str:
    """Create a token signed with the shared secret.

    Only usable when tokens are verified with the shared secret, i.e. in
    development and tests.

    Args:
        sub: Subject (user ID)
        settings: Authentication settings
        email: Email claim
        scp: Scope claim (role)

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload: dict[str, object] = {"sub": sub, "exp": expiry}
    if email is not None:
        payload["email"] = email
    if scp is not None:
        payload["scp"] = scp
    if settings.audience:
        payload["aud"] = settings.audience
    if settings.issuer:
        payload["iss"] = settings.issuer

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
        ConfigurationError: If no verification key is configured
    """
    if settings.jwks_url:
        try:
            key = _jwks_client(settings.jwks_url).get_signing_key_from_jwt(token).key
        except jwt.PyJWKClientError as e:
            raise JWTError(f"Unable to resolve signing key: {e}")
    elif settings.jwt_secret:
        key = settings.jwt_secret
    else:
        raise ConfigurationError("Neither auth.jwks_url nor auth.jwt_secret is set")

    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.audience,
            issuer=settings.issuer,
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
