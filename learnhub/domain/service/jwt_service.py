"""JWT token domain service."""

import logfire

from learnhub.config import AuthSettings
from learnhub.domain.value import Caller, Role, UserId
from learnhub.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service turning bearer tokens into caller identities."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, email: str | None = None, role: Role = Role.USER
    ) -> str:
        """Create a token signed with the shared secret.

        Args:
            user_id: Subject claim
            email: Email claim
            role: Role written to the scope claim

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(
                user_id, self.auth_settings, email=email, scp=role.value
            )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.sub)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def resolve_caller(self, token: str) -> Caller:
        """Verify a token and build the caller identity from its claims.

        A caller is an admin when the scope claim equals the configured
        admin scope.

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.verify_token(token)
        role = Role.ADMIN if payload.scp == self.auth_settings.admin_scope else Role.USER
        return Caller(user_id=UserId(payload.sub), email=payload.email, role=role)
