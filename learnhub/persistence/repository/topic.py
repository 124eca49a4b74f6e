"""PostgreSQL implementation of Topic repository."""

from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.model import Topic
from learnhub.domain.repository import TopicRepository
from learnhub.domain.value import TopicId
from learnhub.persistence.mappers import row_to_topic, topic_to_dict
from learnhub.persistence.tables import content_topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, topic: Topic) -> Topic:
        """Insert a topic."""
        await self.session.execute(
            insert(content_topics_table).values(**topic_to_dict(topic))
        )
        await self.session.flush()
        return topic

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        stmt = select(content_topics_table).where(content_topics_table.c.id == topic_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_topic(row._asdict()) if row else None

    async def find_all(self) -> list[Topic]:
        """Find all topics ordered by ID."""
        stmt = select(content_topics_table).order_by(content_topics_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_topic(row._asdict()) for row in result.fetchall()]

    async def delete(self, topic_id: TopicId) -> None:
        """Delete a topic (contents and votes cascade in the schema)."""
        await self.session.execute(
            delete(content_topics_table).where(content_topics_table.c.id == topic_id)
        )
        await self.session.flush()
