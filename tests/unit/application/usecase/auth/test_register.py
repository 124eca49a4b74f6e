"""Unit tests for RegisterUseCase."""

import pytest

from learnhub.application.usecase.auth import RegisterRequest, RegisterUseCase
from learnhub.domain.error import ConflictError, InvalidArgumentError
from learnhub.domain.service import UserService
from learnhub.domain.value import Caller, Role, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_creates_user_from_token_identity(self, unit_env):
        """Name derives from the email; role comes from the token."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        user_service = await unit_env.get(UserService)
        caller = Caller(
            user_id=UserId("uid-1"), email="grace.hopper@learnhub.test", role=Role.ADMIN
        )

        # Act
        response = await use_case.execute(RegisterRequest(caller=caller))

        # Assert
        assert response.user_id == "uid-1"
        assert response.full_name == "grace.hopper"
        assert response.role == Role.ADMIN
        saved = await user_service.get_user(UserId("uid-1"))
        assert saved.email == "grace.hopper@learnhub.test"
        assert saved.score == 0

    @pytest.mark.asyncio
    async def test_second_registration_conflicts(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        caller = Caller(user_id=UserId("uid-2"), email="two@learnhub.test")
        await use_case.execute(RegisterRequest(caller=caller))

        # Act / Assert
        with pytest.raises(ConflictError):
            await use_case.execute(RegisterRequest(caller=caller))

    @pytest.mark.asyncio
    async def test_token_without_email_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)

        # Act / Assert
        with pytest.raises(InvalidArgumentError):
            await use_case.execute(
                RegisterRequest(caller=Caller(user_id=UserId("uid-3")))
            )
