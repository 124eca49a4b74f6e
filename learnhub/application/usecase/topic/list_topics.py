"""List topics use case."""

from pydantic import BaseModel

from learnhub.domain.model import Topic
from learnhub.domain.service import TopicService


class ListTopicsResponse(BaseModel):
    """List topics response."""

    topics: list[Topic]


class ListTopicsUseCase:
    """Use case for listing every topic."""

    def __init__(self, topic_service: TopicService) -> None:
        self.topic_service = topic_service

    async def execute(self) -> ListTopicsResponse:
        topics = await self.topic_service.list_topics()
        return ListTopicsResponse(topics=topics)
