"""In-memory user repository for testing."""

from typing import Optional

from learnhub.domain.model import LeaderboardRow, User
from learnhub.domain.repository.user import UserRepository
from learnhub.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._store.users[user.id] = user
        return user

    async def count(self) -> int:
        return len(self._store.users)

    async def count_distinct_scores_above(self, score: int) -> int:
        return len({u.score for u in self._store.users.values() if u.score > score})

    async def find_leaderboard(self, limit: int, offset: int) -> list[LeaderboardRow]:
        """Rank the whole population, then slice the requested page."""
        ordered = sorted(self._store.users.values(), key=lambda u: (-u.score, u.id))

        rows: list[LeaderboardRow] = []
        rank = 0
        previous: Optional[int] = None
        for user in ordered:
            if user.score != previous:
                rank += 1
                previous = user.score
            rows.append(
                LeaderboardRow(
                    user_id=user.id,
                    full_name=user.full_name,
                    profile_picture=user.profile_picture,
                    score=user.score,
                    rank=rank,
                )
            )
        return rows[offset : offset + limit]
