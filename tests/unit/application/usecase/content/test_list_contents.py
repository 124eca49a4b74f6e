"""Unit tests for ListContentsUseCase."""

from datetime import date, datetime, timezone

import pytest

from learnhub.application.usecase.content import (
    ListContentsRequest,
    ListContentsUseCase,
)
from learnhub.domain.error import InvalidArgumentError
from learnhub.domain.repository import (
    ContentRepository,
    TopicRepository,
    UserRepository,
)
from learnhub.domain.value import ContentSortCategory, SortDirection
from tests.conftest import make_content, make_topic, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

# 02:00 on 2 March in Dhaka, still 1 March in UTC
LATE_EVENING_UTC = datetime(2026, 3, 1, 20, 0, tzinfo=timezone.utc)


async def _seed(unit_env):
    users = await unit_env.get(UserRepository)
    topics = await unit_env.get(TopicRepository)
    contents = await unit_env.get(ContentRepository)

    author = await users.save(make_user("author-1", full_name="Ada Lovelace"))
    topic = await topics.save(make_topic("maths"))
    late = await contents.save(
        make_content(author, topic, title="Late post", created_at=LATE_EVENING_UTC)
    )
    popular = await contents.save(
        make_content(author, topic, title="Popular post", upvote_count=7)
    )
    return late, popular


class TestListContentsUseCase:
    """Tests for ListContentsUseCase."""

    @pytest.mark.asyncio
    async def test_calendar_dates_use_default_zone(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListContentsUseCase)
        late, _ = await _seed(unit_env)

        # Act
        response = await use_case.execute(
            ListContentsRequest(start_date=date(2026, 3, 2), end_date=date(2026, 3, 2))
        )

        # Assert
        assert [row.id for row in response.items] == [late.id]

    @pytest.mark.asyncio
    async def test_explicit_zone_shifts_the_day(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListContentsUseCase)
        await _seed(unit_env)

        # Act
        response = await use_case.execute(
            ListContentsRequest(
                start_date=date(2026, 3, 2), end_date=date(2026, 3, 2), zone_id="UTC"
            )
        )

        # Assert
        assert response.items == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_sorted_by_votes_descending_by_default(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListContentsUseCase)
        late, popular = await _seed(unit_env)

        # Act
        response = await use_case.execute(ListContentsRequest())

        # Assert
        assert [row.id for row in response.items] == [popular.id, late.id]
        assert response.total == 2
        assert response.page == 0
        assert response.size == 10

    @pytest.mark.asyncio
    async def test_sort_by_created_at_ascending(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListContentsUseCase)
        late, popular = await _seed(unit_env)

        # Act
        response = await use_case.execute(
            ListContentsRequest(
                sort_type=ContentSortCategory.CREATED_AT,
                sort_direction=SortDirection.ASC,
            )
        )

        # Assert
        assert [row.id for row in response.items] == [late.id, popular.id]

    @pytest.mark.asyncio
    async def test_oversized_page_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListContentsUseCase)

        # Act / Assert
        with pytest.raises(InvalidArgumentError):
            await use_case.execute(ListContentsRequest(size=101))

    @pytest.mark.asyncio
    async def test_unknown_zone_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListContentsUseCase)

        # Act / Assert
        with pytest.raises(InvalidArgumentError):
            await use_case.execute(
                ListContentsRequest(start_date=date(2026, 3, 2), zone_id="Nowhere/Land")
            )
