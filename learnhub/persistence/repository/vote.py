"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.model import Vote
from learnhub.domain.repository import VoteRepository
from learnhub.domain.value import ContentId, UserId
from learnhub.persistence.mappers import row_to_vote, vote_to_dict
from learnhub.persistence.tables import content_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_content_and_voter(
        self, content_id: ContentId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a content item."""
        stmt = select(content_votes_table).where(
            and_(
                content_votes_table.c.content_id == content_id,
                content_votes_table.c.user_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote (raises IntegrityError on a duplicate pair)."""
        stmt = insert(content_votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete_by_content_and_voter(
        self, content_id: ContentId, voter_id: UserId
    ) -> bool:
        """Delete a user's vote on a content item."""
        stmt = delete(content_votes_table).where(
            and_(
                content_votes_table.c.content_id == content_id,
                content_votes_table.c.user_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_content(self, content_id: ContentId) -> int:
        """Delete every vote on a content item."""
        stmt = delete(content_votes_table).where(
            content_votes_table.c.content_id == content_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def count_by_content(self, content_id: ContentId) -> int:
        """Count votes on a content item."""
        stmt = (
            select(func.count())
            .select_from(content_votes_table)
            .where(content_votes_table.c.content_id == content_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
