"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from learnhub.domain.model.vote import Vote
from learnhub.domain.value import ContentId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_content_and_voter(
        self, content_id: ContentId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a content item.

        Args:
            content_id: The content's ID
            voter_id: The voter's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the voter already voted on this content
        """
        pass

    @abstractmethod
    async def delete_by_content_and_voter(
        self, content_id: ContentId, voter_id: UserId
    ) -> bool:
        """Delete a user's vote on a content item.

        Args:
            content_id: The content's ID
            voter_id: The voter's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_content(self, content_id: ContentId) -> int:
        """Delete every vote on a content item.

        Args:
            content_id: The content's ID

        Returns:
            Number of deleted votes
        """
        pass

    @abstractmethod
    async def count_by_content(self, content_id: ContentId) -> int:
        """Count votes on a content item.

        Args:
            content_id: The content's ID

        Returns:
            Number of votes
        """
        pass
