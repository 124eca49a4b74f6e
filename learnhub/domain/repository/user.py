"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from learnhub.domain.model.row import LeaderboardRow
from learnhub.domain.model.user import User
from learnhub.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence and ranking queries.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users."""
        pass

    @abstractmethod
    async def count_distinct_scores_above(self, score: int) -> int:
        """Count the distinct score values strictly greater than ``score``.

        Args:
            score: Reference score

        Returns:
            Number of distinct higher scores
        """
        pass

    @abstractmethod
    async def find_leaderboard(self, limit: int, offset: int) -> list[LeaderboardRow]:
        """Find one page of the leaderboard.

        Rows are ordered by score descending, then user ID ascending. The
        rank is the dense rank of the score over the whole population, not
        over the page.

        Args:
            limit: Maximum number of rows to return
            offset: Number of rows to skip

        Returns:
            Ranked rows for the page
        """
        pass
