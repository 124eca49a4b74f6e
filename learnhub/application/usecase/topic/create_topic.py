"""Create topic use case."""

from pydantic import BaseModel, Field

from learnhub.domain.service import TopicService
from learnhub.domain.value import TopicId


class CreateTopicRequest(BaseModel):
    """Create topic request."""

    topic_id: TopicId = Field(min_length=1, max_length=255)
    description: str


class CreateTopicResponse(BaseModel):
    """Create topic response."""

    topic_id: TopicId


class CreateTopicUseCase:
    """Use case for adding a content topic."""

    def __init__(self, topic_service: TopicService) -> None:
        self.topic_service = topic_service

    async def execute(self, request: CreateTopicRequest) -> CreateTopicResponse:
        """Execute create topic flow.

        Raises:
            ConflictError: If the topic ID is taken
        """
        topic = await self.topic_service.create_topic(
            request.topic_id, request.description
        )
        return CreateTopicResponse(topic_id=topic.id)
