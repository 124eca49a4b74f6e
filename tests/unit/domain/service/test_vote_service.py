"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from learnhub.domain.error import NotFoundError
from learnhub.domain.repository import (
    ContentRepository,
    TopicRepository,
    UserRepository,
    VoteRepository,
)
from learnhub.domain.service import VoteService
from learnhub.domain.value import ContentId, UserId, VoteDelta
from tests.conftest import make_content, make_topic, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _seed_content(unit_env, voters: int = 2):
    users = await unit_env.get(UserRepository)
    topics = await unit_env.get(TopicRepository)
    contents = await unit_env.get(ContentRepository)

    owner = await users.save(make_user("owner"))
    topic = await topics.save(make_topic())
    content = await contents.save(make_content(owner, topic))
    people = [await users.save(make_user(f"voter-{i}")) for i in range(voters)]
    return content, people


class TestToggleVote:
    """Tests for toggle_vote."""

    @pytest.mark.asyncio
    async def test_first_toggle_applies_and_second_revokes(self, unit_env):
        """Toggling twice returns +1 then -1 and restores the counter."""
        # Arrange
        service = await unit_env.get(VoteService)
        contents = await unit_env.get(ContentRepository)
        votes = await unit_env.get(VoteRepository)
        content, (voter, _) = await _seed_content(unit_env)

        # Act
        first = await service.toggle_vote(content.id, voter.id)
        after_first = await contents.find_by_id(content.id)
        second = await service.toggle_vote(content.id, voter.id)
        after_second = await contents.find_by_id(content.id)

        # Assert
        assert first == VoteDelta.APPLIED
        assert second == VoteDelta.REVOKED
        assert after_first.upvote_count == 1
        assert after_second.upvote_count == 0
        assert await votes.count_by_content(content.id) == 0

    @pytest.mark.asyncio
    async def test_two_voters_interleaved(self, unit_env):
        """V1 votes, V2 votes, V1 withdraws: one vote left, counter at 1."""
        # Arrange
        service = await unit_env.get(VoteService)
        contents = await unit_env.get(ContentRepository)
        votes = await unit_env.get(VoteRepository)
        content, (v1, v2) = await _seed_content(unit_env)

        # Act
        deltas = [
            await service.toggle_vote(content.id, v1.id),
            await service.toggle_vote(content.id, v2.id),
            await service.toggle_vote(content.id, v1.id),
        ]

        # Assert
        assert deltas == [VoteDelta.APPLIED, VoteDelta.APPLIED, VoteDelta.REVOKED]
        stored = await contents.find_by_id(content.id)
        assert stored.upvote_count == 1
        assert await votes.find_by_content_and_voter(content.id, v1.id) is None
        assert await votes.find_by_content_and_voter(content.id, v2.id) is not None

    @pytest.mark.asyncio
    async def test_concurrent_toggles_keep_counter_equal_to_votes(self, unit_env):
        """Counter matches the number of vote rows after concurrent toggles."""
        # Arrange
        service = await unit_env.get(VoteService)
        contents = await unit_env.get(ContentRepository)
        votes = await unit_env.get(VoteRepository)
        content, people = await _seed_content(unit_env, voters=20)

        # Act
        deltas = await asyncio.gather(
            *(service.toggle_vote(content.id, p.id) for p in people)
        )

        # Assert
        stored = await contents.find_by_id(content.id)
        assert set(deltas) == {VoteDelta.APPLIED}
        assert stored.upvote_count == 20
        assert await votes.count_by_content(content.id) == 20

    @pytest.mark.asyncio
    async def test_vote_on_unknown_content_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(VoteService)
        _, (voter, _) = await _seed_content(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Content"):
            await service.toggle_vote(ContentId(uuid4()), voter.id)

    @pytest.mark.asyncio
    async def test_unregistered_voter_raises_not_found(self, unit_env):
        """No vote is stored and the counter stays put for an unknown voter."""
        # Arrange
        service = await unit_env.get(VoteService)
        contents = await unit_env.get(ContentRepository)
        votes = await unit_env.get(VoteRepository)
        content, _ = await _seed_content(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User"):
            await service.toggle_vote(content.id, UserId("never-registered"))

        stored = await contents.find_by_id(content.id)
        assert stored.upvote_count == 0
        assert await votes.count_by_content(content.id) == 0
