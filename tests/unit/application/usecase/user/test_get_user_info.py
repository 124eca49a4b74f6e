"""Unit tests for GetUserInfoUseCase."""

import pytest

from learnhub.application.usecase.user import GetUserInfoRequest, GetUserInfoUseCase
from learnhub.domain.error import NotFoundError
from learnhub.domain.repository import UserRepository
from learnhub.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestGetUserInfoUseCase:
    """Tests for GetUserInfoUseCase."""

    @pytest.mark.asyncio
    async def test_profile_includes_dense_rank(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetUserInfoUseCase)
        users = await unit_env.get(UserRepository)
        for user_id, score in {"a": 50, "b": 50, "c": 20}.items():
            await users.save(make_user(user_id, score=score))

        # Act
        response = await use_case.execute(GetUserInfoRequest(user_id=UserId("c")))

        # Assert
        assert response.user_id == "c"
        assert response.email == "c@learnhub.test"
        assert response.score == 20
        assert response.rank == 2

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetUserInfoUseCase)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserInfoRequest(user_id=UserId("ghost")))
