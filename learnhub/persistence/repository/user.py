"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.model import LeaderboardRow, User
from learnhub.domain.repository import UserRepository
from learnhub.domain.value import UserId
from learnhub.persistence.mappers import row_to_leaderboard, row_to_user, user_to_dict
from learnhub.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            # Score and credit are maintained elsewhere; never overwrite them here
            values = {
                k: v
                for k, v in user_dict.items()
                if k not in ("id", "score", "credit", "created_at")
            }
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**values)
            )
            await self.session.execute(stmt)
        else:
            stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def count(self) -> int:
        """Count all users."""
        result = await self.session.execute(
            select(func.count()).select_from(users_table)
        )
        return result.scalar() or 0

    async def count_distinct_scores_above(self, score: int) -> int:
        """Count distinct scores strictly greater than the given one."""
        stmt = select(func.count(func.distinct(users_table.c.score))).where(
            users_table.c.score > score
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_leaderboard(self, limit: int, offset: int) -> list[LeaderboardRow]:
        """Find one page of the leaderboard.

        DENSE_RANK is evaluated before LIMIT/OFFSET, so ranks are global.
        """
        with logfire.span("user_repository.find_leaderboard", limit=limit, offset=offset):
            stmt = (
                select(
                    users_table.c.id.label("user_id"),
                    users_table.c.full_name,
                    users_table.c.profile_picture,
                    users_table.c.score,
                    func.dense_rank()
                    .over(order_by=users_table.c.score.desc())
                    .label("rank"),
                )
                .order_by(users_table.c.score.desc(), users_table.c.id.asc())
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_leaderboard(dict(row)) for row in result.mappings().all()]
