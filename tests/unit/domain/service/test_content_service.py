"""Unit tests for ContentService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from learnhub.domain.error import ForbiddenError, NotFoundError
from learnhub.domain.query import ContentCriteria, compose_content_spec
from learnhub.domain.repository import (
    ContentRepository,
    TopicRepository,
    UserRepository,
    VoteRepository,
)
from learnhub.domain.service import ContentService, VoteService
from learnhub.domain.value import (
    ContentId,
    ContentSortCategory,
    Role,
    SortDirection,
    TopicId,
)
from tests.conftest import make_caller, make_content, make_topic, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

DAY = datetime(2026, 5, 10, tzinfo=timezone.utc)


async def _seed(unit_env):
    """Two authors, two topics and five content items."""
    users = await unit_env.get(UserRepository)
    topics = await unit_env.get(TopicRepository)
    contents = await unit_env.get(ContentRepository)

    alice = await users.save(make_user("alice", full_name="Alice Smith"))
    bob = await users.save(make_user("bob", full_name="Bob Jones"))
    physics = await topics.save(make_topic("physics"))
    biology = await topics.save(make_topic("biology"))

    items = [
        make_content(alice, physics, "Entropy basics", 5, DAY),
        make_content(alice, biology, "Cell division", 5, DAY + timedelta(days=1)),
        make_content(bob, physics, "Quantum entropy", 2, DAY + timedelta(days=2)),
        make_content(bob, physics, "Optics", 9, DAY + timedelta(days=3)),
        make_content(bob, biology, "Genetics", 0, DAY + timedelta(days=4)),
    ]
    for item in items:
        await contents.save(item)
    return alice, bob, items


class TestListContents:
    """Tests for content listings."""

    @pytest.mark.asyncio
    async def test_filters_combine_with_and(self, unit_env):
        """Only items matching every filter are returned."""
        # Arrange
        service = await unit_env.get(ContentService)
        _, bob, _ = await _seed(unit_env)
        spec = compose_content_spec(
            ContentCriteria(
                author_id=bob.id, topic_id=TopicId("physics"), title="ENTROPY"
            )
        )

        # Act
        page = await service.list_contents(spec, None, 0, 10)

        # Assert
        assert [row.title for row in page.items] == ["Quantum entropy"]
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_author_name_filter_matches_substring(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        await _seed(unit_env)
        spec = compose_content_spec(ContentCriteria(author_name="smith"))

        # Act
        page = await service.list_contents(spec, None, 0, 10)

        # Assert
        assert page.total == 2
        assert {row.author_name for row in page.items} == {"Alice Smith"}

    @pytest.mark.asyncio
    async def test_date_range_is_inclusive(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        await _seed(unit_env)
        spec = compose_content_spec(
            ContentCriteria(start=DAY + timedelta(days=1), end=DAY + timedelta(days=3))
        )

        # Act
        page = await service.list_contents(spec, None, 0, 10)

        # Assert
        assert page.total == 3

    @pytest.mark.asyncio
    async def test_total_is_independent_of_paging(self, unit_env):
        """Count never depends on page or size, and pages add up to it."""
        # Arrange
        service = await unit_env.get(ContentService)
        await _seed(unit_env)
        spec = compose_content_spec(ContentCriteria())

        # Act
        pages = [await service.list_contents(spec, None, p, 2) for p in range(3)]
        whole = await service.list_contents(spec, None, 0, 100)

        # Assert
        assert {page.total for page in pages} == {5}
        assert sum(len(page.items) for page in pages) == whole.total == 5
        assert [r.id for page in pages for r in page.items] == [
            r.id for r in whole.items
        ]
        assert pages[0].total_pages == 3

    @pytest.mark.asyncio
    async def test_equal_vote_counts_are_ordered_by_id(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        _, _, items = await _seed(unit_env)
        spec = compose_content_spec(ContentCriteria())

        # Act
        page = await service.list_contents(spec, None, 0, 10)

        # Assert
        tied = sorted([items[0].id, items[1].id], key=str)
        assert [row.upvote_count for row in page.items] == [9, 5, 5, 2, 0]
        assert [row.id for row in page.items[1:3]] == tied

    @pytest.mark.asyncio
    async def test_sort_by_created_at_ascending(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        await _seed(unit_env)
        spec = compose_content_spec(
            ContentCriteria(
                sort=ContentSortCategory.CREATED_AT, direction=SortDirection.ASC
            )
        )

        # Act
        page = await service.list_contents(spec, None, 0, 10)

        # Assert
        assert [row.title for row in page.items][0] == "Entropy basics"
        assert [row.title for row in page.items][-1] == "Genetics"

    @pytest.mark.asyncio
    async def test_rows_carry_the_viewers_vote(self, unit_env):
        """voted_by_viewer holds the viewer's vote ID and is empty elsewhere."""
        # Arrange
        service = await unit_env.get(ContentService)
        vote_service = await unit_env.get(VoteService)
        votes = await unit_env.get(VoteRepository)
        alice, _, items = await _seed(unit_env)
        await vote_service.toggle_vote(items[3].id, alice.id)
        vote = await votes.find_by_content_and_voter(items[3].id, alice.id)
        spec = compose_content_spec(ContentCriteria())

        # Act
        as_alice = await service.list_contents(spec, alice.id, 0, 10)
        anonymous = await service.list_contents(spec, None, 0, 10)

        # Assert
        voted = {row.id: row.voted_by_viewer for row in as_alice.items}
        assert voted[items[3].id] == vote.id
        assert [v for k, v in voted.items() if k != items[3].id] == [None] * 4
        assert all(row.voted_by_viewer is None for row in anonymous.items)


class TestContentOwnership:
    """Tests for owner/admin gating of content mutations."""

    @pytest.mark.asyncio
    async def test_create_requires_admin(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        alice, _, _ = await _seed(unit_env)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await service.create_content(
                make_caller(alice), "Title", TopicId("physics"), "c", "s", "b"
            )

    @pytest.mark.asyncio
    async def test_admin_creates_content_in_existing_topic(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        users = await unit_env.get(UserRepository)
        await _seed(unit_env)
        admin = await users.save(make_user("root", role=Role.ADMIN))

        # Act
        content = await service.create_content(
            make_caller(admin), "Waves", TopicId("physics"), "c", "s", "b"
        )

        # Assert
        stored = await service.get_content(content.id)
        assert stored.owner_id == admin.id
        assert stored.upvote_count == 0

    @pytest.mark.asyncio
    async def test_create_in_unknown_topic_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        users = await unit_env.get(UserRepository)
        admin = await users.save(make_user("root", role=Role.ADMIN))

        # Act & Assert
        with pytest.raises(NotFoundError, match="Topic"):
            await service.create_content(
                make_caller(admin), "Waves", TopicId("astronomy"), "c", "s", "b"
            )

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        _, bob, items = await _seed(unit_env)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await service.update_content(
                make_caller(bob),
                items[0].id,
                "Hijacked",
                TopicId("physics"),
                "c",
                "s",
                "b",
            )

    @pytest.mark.asyncio
    async def test_owner_update_keeps_vote_count(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        alice, _, items = await _seed(unit_env)

        # Act
        await service.update_content(
            make_caller(alice),
            items[0].id,
            "Entropy revisited",
            TopicId("biology"),
            "c",
            "s",
            "b",
        )

        # Assert
        stored = await service.get_content(items[0].id)
        assert stored.title == "Entropy revisited"
        assert stored.topic_id == "biology"
        assert stored.upvote_count == 5

    @pytest.mark.asyncio
    async def test_admin_deletes_someone_elses_content_and_its_votes(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        vote_service = await unit_env.get(VoteService)
        votes = await unit_env.get(VoteRepository)
        users = await unit_env.get(UserRepository)
        alice, _, items = await _seed(unit_env)
        admin = await users.save(make_user("root", role=Role.ADMIN))
        await vote_service.toggle_vote(items[0].id, alice.id)

        # Act
        await service.delete_content(make_caller(admin), items[0].id)

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_content(items[0].id)
        assert await votes.find_by_content_and_voter(items[0].id, alice.id) is None

    @pytest.mark.asyncio
    async def test_get_detail_of_unknown_content_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.get_content_detail(ContentId(uuid4()), None)
