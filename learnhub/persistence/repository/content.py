"""PostgreSQL implementation of Content repository."""

from typing import Optional

import logfire
from sqlalchemy import Select, delete, func, insert, null, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.model import Content, ContentFullRow, ContentShortRow
from learnhub.domain.query import ListingSpecification
from learnhub.domain.repository import ContentRepository
from learnhub.domain.value import ContentId, UserId
from learnhub.persistence.mappers import (
    content_to_dict,
    row_to_content,
    row_to_content_full,
    row_to_content_short,
)
from learnhub.persistence.query import ColumnMap, apply_filters, apply_ordering
from learnhub.persistence.tables import (
    content_votes_table,
    contents_table,
    users_table,
)

# Record attributes of a content row and the SQL expressions behind them
CONTENT_COLUMNS: ColumnMap = {
    "id": contents_table.c.id,
    "created_at": contents_table.c.created_at,
    "upvote_count": contents_table.c.upvote_count,
    "title": contents_table.c.title,
    "owner_id": contents_table.c.user_id,
    "topic_id": contents_table.c.topic_id,
    "author_name": users_table.c.full_name,
}

_CONTENT_WITH_AUTHOR = contents_table.join(
    users_table, contents_table.c.user_id == users_table.c.id
)


def _voted_by_viewer(viewer_id: Optional[UserId]):
    """Correlated lookup of the viewer's vote on the outer content row."""
    if not viewer_id:
        return null().label("voted_by_viewer")
    return (
        select(content_votes_table.c.id)
        .where(
            content_votes_table.c.content_id == contents_table.c.id,
            content_votes_table.c.user_id == viewer_id,
        )
        .correlate(contents_table)
        .scalar_subquery()
        .label("voted_by_viewer")
    )


def _row_columns(viewer_id: Optional[UserId], with_body: bool) -> list:
    columns = [
        contents_table.c.id,
        contents_table.c.topic_id,
        contents_table.c.title,
        _voted_by_viewer(viewer_id),
        contents_table.c.user_id.label("owner_id"),
        users_table.c.full_name.label("author_name"),
        users_table.c.profile_picture.label("author_profile_picture"),
        contents_table.c.cover_photo,
        contents_table.c.summary,
        contents_table.c.upvote_count,
        contents_table.c.created_at,
    ]
    if with_body:
        columns.append(contents_table.c.body)
    return columns


def page_statement(
    spec: ListingSpecification,
    viewer_id: Optional[UserId],
    limit: int,
    offset: int,
) -> Select:
    """Build the listing query: one row per content item, the viewer's vote
    resolved by a correlated subquery in the same statement."""
    stmt = select(*_row_columns(viewer_id, with_body=False)).select_from(
        _CONTENT_WITH_AUTHOR
    )
    stmt = apply_filters(stmt, spec, CONTENT_COLUMNS)
    stmt = apply_ordering(stmt, spec, CONTENT_COLUMNS)
    return stmt.limit(limit).offset(offset)


class PostgresContentRepository(ContentRepository):
    """PostgreSQL implementation of ContentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item by ID."""
        stmt = select(contents_table).where(contents_table.c.id == content_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_content(row._asdict()) if row else None

    async def find_by_id_for_update(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item and hold a row lock until commit/rollback."""
        with logfire.span(
            "content_repository.find_by_id_for_update", content_id=str(content_id)
        ):
            stmt = (
                select(contents_table)
                .where(contents_table.c.id == content_id)
                .with_for_update()
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_content(row._asdict()) if row else None

    async def find_full(
        self, content_id: ContentId, viewer_id: Optional[UserId]
    ) -> Optional[ContentFullRow]:
        """Find a content detail row."""
        stmt = (
            select(*_row_columns(viewer_id, with_body=True))
            .select_from(_CONTENT_WITH_AUTHOR)
            .where(contents_table.c.id == content_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_content_full(dict(row)) if row else None

    async def find_page(
        self,
        spec: ListingSpecification,
        viewer_id: Optional[UserId],
        limit: int,
        offset: int,
    ) -> list[ContentShortRow]:
        """Find one page of content rows in a single statement."""
        with logfire.span(
            "content_repository.find_page",
            predicates=[p.field for p in spec.predicates],
            order_by=spec.ordering.field,
            direction=spec.ordering.direction.value,
            limit=limit,
            offset=offset,
        ):
            stmt = page_statement(spec, viewer_id, limit, offset)
            result = await self.session.execute(stmt)
            rows = [row_to_content_short(dict(row)) for row in result.mappings().all()]
            logfire.info("Found contents", count=len(rows))
            return rows

    async def count(self, spec: ListingSpecification) -> int:
        """Count content items matching the specification's filters."""
        stmt = select(func.count()).select_from(_CONTENT_WITH_AUTHOR)
        stmt = apply_filters(stmt, spec, CONTENT_COLUMNS)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, content: Content) -> Content:
        """Save a content item (create or update)."""
        with logfire.span("content_repository.save", content_id=str(content.id)):
            existing = await self.find_by_id(content.id)

            content_dict = content_to_dict(content)

            if existing:
                # The counter only moves through adjust_upvote_count
                values = {
                    k: v
                    for k, v in content_dict.items()
                    if k not in ("id", "upvote_count", "created_at")
                }
                stmt = (
                    update(contents_table)
                    .where(contents_table.c.id == content.id)
                    .values(**values)
                )
                await self.session.execute(stmt)
            else:
                await self.session.execute(insert(contents_table).values(**content_dict))

            await self.session.flush()
            return content

    async def delete(self, content_id: ContentId) -> None:
        """Delete a content item."""
        await self.session.execute(
            delete(contents_table).where(contents_table.c.id == content_id)
        )
        await self.session.flush()

    async def adjust_upvote_count(self, content_id: ContentId, delta: int) -> int:
        """Atomically add delta to the upvote counter."""
        stmt = (
            update(contents_table)
            .where(contents_table.c.id == content_id)
            .values(upvote_count=contents_table.c.upvote_count + delta)
            .returning(contents_table.c.upvote_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one()
