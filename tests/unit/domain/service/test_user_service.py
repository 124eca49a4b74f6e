"""Unit tests for UserService."""

import pytest

from learnhub.domain.error import ConflictError, InvalidArgumentError, NotFoundError
from learnhub.domain.service import UserService
from learnhub.domain.service.user_service import full_name_from_email
from learnhub.domain.value import Caller, Role, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_takes_identity_from_claims(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        caller = Caller(user_id=UserId("uid-1"), email="ada.l@example.com", role=Role.ADMIN)

        # Act
        user = await service.register(caller)

        # Assert
        assert user.id == "uid-1"
        assert user.full_name == "ada.l"
        assert user.role == Role.ADMIN
        assert user.score == 0

    @pytest.mark.asyncio
    async def test_registering_twice_raises_conflict(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        caller = Caller(user_id=UserId("uid-1"), email="ada@example.com")
        await service.register(caller)

        # Act & Assert
        with pytest.raises(ConflictError):
            await service.register(caller)

    @pytest.mark.asyncio
    async def test_taken_email_raises_conflict(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        await service.register(Caller(user_id=UserId("uid-1"), email="ada@example.com"))

        # Act & Assert
        with pytest.raises(ConflictError, match="email"):
            await service.register(
                Caller(user_id=UserId("uid-2"), email="ada@example.com")
            )

    @pytest.mark.asyncio
    async def test_token_without_email_is_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(InvalidArgumentError):
            await service.register(Caller(user_id=UserId("uid-1")))


class TestUpdateInfo:
    """Tests for update_info."""

    @pytest.mark.asyncio
    async def test_empty_values_leave_profile_unchanged(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        caller = Caller(user_id=UserId("uid-1"), email="ada@example.com")
        await service.register(caller)

        # Act
        updated = await service.update_info(caller, full_name="", profile_picture=None)

        # Assert
        assert updated.full_name == "ada"
        assert updated.profile_picture is None

    @pytest.mark.asyncio
    async def test_updates_given_fields(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        caller = Caller(user_id=UserId("uid-1"), email="ada@example.com")
        await service.register(caller)

        # Act
        await service.update_info(caller, full_name="Ada Lovelace")

        # Assert
        stored = await service.get_user(caller.user_id)
        assert stored.full_name == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_unregistered_caller_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.update_info(Caller(user_id=UserId("ghost")), full_name="X")


def test_full_name_from_email_uses_local_part():
    assert full_name_from_email("grace.hopper@navy.mil") == "grace.hopper"
