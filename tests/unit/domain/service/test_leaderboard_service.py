"""Unit tests for LeaderboardService."""

import pytest

from learnhub.domain.error import InvalidArgumentError, NotFoundError
from learnhub.domain.repository import UserRepository
from learnhub.domain.service import LeaderboardService
from learnhub.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

SCORES = {"e": 80, "a": 100, "d": 80, "b": 100, "c": 90}


async def _seed_scores(unit_env):
    users = await unit_env.get(UserRepository)
    for user_id, score in SCORES.items():
        await users.save(make_user(user_id, score=score))


class TestLeaderboard:
    """Tests for dense ranking."""

    @pytest.mark.asyncio
    async def test_equal_scores_share_a_rank(self, unit_env):
        """Scores 100, 100, 90, 80, 80 rank 1, 1, 2, 3, 3."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        await _seed_scores(unit_env)

        # Act
        page = await service.leaderboard_page(0, 10)

        # Assert
        assert [row.user_id for row in page.items] == ["a", "b", "c", "d", "e"]
        assert [row.score for row in page.items] == [100, 100, 90, 80, 80]
        assert [row.rank for row in page.items] == [1, 1, 2, 3, 3]
        assert page.total == 5

    @pytest.mark.asyncio
    async def test_rank_of_matches_leaderboard_rows(self, unit_env):
        # Arrange
        service = await unit_env.get(LeaderboardService)
        await _seed_scores(unit_env)

        # Act
        page = await service.leaderboard_page(0, 10)

        # Assert
        for row in page.items:
            assert await service.rank_of(row.user_id) == row.rank

    @pytest.mark.asyncio
    async def test_pages_concatenate_to_the_full_ranking(self, unit_env):
        """Ranks are global, not restarted on each page."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        await _seed_scores(unit_env)

        # Act
        pages = [await service.leaderboard_page(p, 2) for p in range(3)]
        whole = await service.leaderboard_page(0, 5)

        # Assert
        assert [r for page in pages for r in page.items] == whole.items
        assert pages[1].items[0].rank == 2
        assert pages[2].items == [whole.items[4]]

    @pytest.mark.asyncio
    async def test_rank_of_unknown_user_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(LeaderboardService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User"):
            await service.rank_of(UserId("ghost"))

    @pytest.mark.asyncio
    async def test_negative_page_is_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(LeaderboardService)

        # Act & Assert
        with pytest.raises(InvalidArgumentError):
            await service.leaderboard_page(-1, 10)
