"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from learnhub.domain.model.topic import Topic
from learnhub.domain.value import TopicId


class TopicRepository(ABC):
    """Repository interface for Topic entity."""

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Insert a topic.

        Args:
            topic: Topic to save

        Returns:
            Saved topic
        """
        pass

    @abstractmethod
    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find topic by ID.

        Args:
            topic_id: Topic identifier

        Returns:
            Topic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Topic]:
        """Find all topics ordered by ID."""
        pass

    @abstractmethod
    async def delete(self, topic_id: TopicId) -> None:
        """Delete a topic.

        Contents filed under the topic are removed with it.

        Args:
            topic_id: Topic identifier
        """
        pass
