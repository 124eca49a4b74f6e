"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from learnhub.domain.model import Vote
from learnhub.domain.repository.vote import VoteRepository
from learnhub.domain.value import ContentId, UserId

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_content_and_voter(
        self, content_id: ContentId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a content item."""
        return self._store.votes.get((content_id, voter_id))

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the voter already voted on this content
        """
        key = (vote.content_id, vote.voter_id)
        if key in self._store.votes:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._store.votes[key] = vote
        return vote

    async def delete_by_content_and_voter(
        self, content_id: ContentId, voter_id: UserId
    ) -> bool:
        """Delete a user's vote on a content item."""
        return self._store.votes.pop((content_id, voter_id), None) is not None

    async def delete_by_content(self, content_id: ContentId) -> int:
        """Delete every vote on a content item."""
        keys = [k for k in self._store.votes if k[0] == content_id]
        for key in keys:
            del self._store.votes[key]
        return len(keys)

    async def count_by_content(self, content_id: ContentId) -> int:
        return sum(1 for k in self._store.votes if k[0] == content_id)
