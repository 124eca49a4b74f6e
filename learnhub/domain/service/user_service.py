"""User domain service."""

import logfire

from learnhub.domain.error import ConflictError, InvalidArgumentError, NotFoundError
from learnhub.domain.model.user import User
from learnhub.domain.repository import UserRepository
from learnhub.domain.value import Caller, UserId

from .base import Service


def full_name_from_email(email: str) -> str:
    """Derive a display name from the local part of an email address."""
    local_part, _, _ = email.partition("@")
    return local_part or email


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def register(self, caller: Caller) -> User:
        """Create an account for an authenticated identity.

        The account takes its ID, email and role from the token claims.

        Args:
            caller: Identity resolved from the bearer token

        Returns:
            The created user

        Raises:
            InvalidArgumentError: If the token carries no email
            ConflictError: If the ID or email is already registered
        """
        with logfire.span("user_service.register", user_id=caller.user_id):
            if not caller.email:
                raise InvalidArgumentError("Token carries no email claim")

            if await self.user_repository.find_by_id(caller.user_id):
                logfire.warn("User already registered", user_id=caller.user_id)
                raise ConflictError(f"User already exists: {caller.user_id}")
            if await self.user_repository.find_by_email(caller.email):
                logfire.warn("Email already registered", email=caller.email)
                raise ConflictError(f"User with email {caller.email} already exists")

            user = User(
                id=caller.user_id,
                email=caller.email,
                full_name=full_name_from_email(caller.email),
                role=caller.role,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=saved.id, role=saved.role.value)
            return saved

    async def get_user(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.get_user", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            return user

    async def update_info(
        self,
        caller: Caller,
        full_name: str | None = None,
        profile_picture: str | None = None,
    ) -> User:
        """Update the caller's own profile.

        Empty or missing values leave the stored value unchanged.

        Args:
            caller: Identity updating its profile
            full_name: New display name
            profile_picture: New profile picture URL

        Returns:
            The updated user
        """
        with logfire.span("user_service.update_info", user_id=caller.user_id):
            user = await self.get_user(caller.user_id)

            update: dict[str, str] = {}
            if full_name:
                update["full_name"] = full_name
            if profile_picture:
                update["profile_picture"] = profile_picture
            if not update:
                return user

            updated = User.model_validate({**user.model_dump(), **update})
            saved = await self.user_repository.save(updated)
            logfire.info(
                "User info updated", user_id=caller.user_id, fields=sorted(update)
            )
            return saved
