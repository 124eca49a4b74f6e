"""In-memory topic repository for testing."""

from typing import Optional

from learnhub.domain.model import Topic
from learnhub.domain.repository.topic import TopicRepository
from learnhub.domain.value import TopicId

from .store import InMemoryStore


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, topic: Topic) -> Topic:
        self._store.topics[topic.id] = topic
        return topic

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        return self._store.topics.get(topic_id)

    async def find_all(self) -> list[Topic]:
        return sorted(self._store.topics.values(), key=lambda t: t.id)

    async def delete(self, topic_id: TopicId) -> None:
        self._store.delete_topic(topic_id)
