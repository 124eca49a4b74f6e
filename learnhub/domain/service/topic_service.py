"""Topic domain service."""

import logfire

from learnhub.domain.error import ConflictError, NotFoundError
from learnhub.domain.model.topic import Topic
from learnhub.domain.repository import TopicRepository
from learnhub.domain.value import TopicId

from .base import Service


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(self, topic_repository: TopicRepository) -> None:
        self.topic_repository = topic_repository

    async def create_topic(self, topic_id: TopicId, description: str) -> Topic:
        """Create a topic under a caller-chosen ID.

        Raises:
            ConflictError: If a topic with this ID already exists
        """
        with logfire.span("topic_service.create_topic", topic_id=topic_id):
            if await self.topic_repository.find_by_id(topic_id):
                logfire.warn("Topic already exists", topic_id=topic_id)
                raise ConflictError(f"Topic already exists: {topic_id}")

            saved = await self.topic_repository.save(
                Topic(id=topic_id, description=description)
            )
            logfire.info("Topic created", topic_id=topic_id)
            return saved

    async def get_topic(self, topic_id: TopicId) -> Topic:
        """Get a topic by ID.

        Raises:
            NotFoundError: If the topic does not exist
        """
        topic = await self.topic_repository.find_by_id(topic_id)
        if not topic:
            logfire.warn("Topic not found", topic_id=topic_id)
            raise NotFoundError("Topic", topic_id)
        return topic

    async def list_topics(self) -> list[Topic]:
        with logfire.span("topic_service.list_topics"):
            return await self.topic_repository.find_all()

    async def delete_topic(self, topic_id: TopicId) -> None:
        """Delete a topic and, through the store, the content filed under it.

        Raises:
            NotFoundError: If the topic does not exist
        """
        with logfire.span("topic_service.delete_topic", topic_id=topic_id):
            await self.get_topic(topic_id)
            await self.topic_repository.delete(topic_id)
            logfire.info("Topic deleted", topic_id=topic_id)
