"""Delete topic use case."""

from pydantic import BaseModel

from learnhub.domain.service import TopicService
from learnhub.domain.value import TopicId


class DeleteTopicRequest(BaseModel):
    """Delete topic request."""

    topic_id: TopicId


class DeleteTopicUseCase:
    """Use case for removing a topic along with its content."""

    def __init__(self, topic_service: TopicService) -> None:
        self.topic_service = topic_service

    async def execute(self, request: DeleteTopicRequest) -> None:
        """Execute delete topic flow.

        Raises:
            NotFoundError: If the topic does not exist
        """
        await self.topic_service.delete_topic(request.topic_id)
