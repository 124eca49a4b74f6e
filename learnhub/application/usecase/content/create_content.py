"""Create content use case."""

from pydantic import BaseModel

from learnhub.domain.service import ContentService
from learnhub.domain.value import Caller, ContentId, TopicId


class CreateContentRequest(BaseModel):
    """Create content request."""

    caller: Caller  # From authenticated user
    title: str
    topic_id: TopicId
    cover_photo: str
    summary: str
    body: str


class CreateContentResponse(BaseModel):
    """Create content response."""

    content_id: ContentId


class CreateContentUseCase:
    """Use case for publishing a content item."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize create content use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: CreateContentRequest) -> CreateContentResponse:
        """Execute create content flow.

        Raises:
            ForbiddenError: If the caller is not an admin
            NotFoundError: If the caller is not registered or the topic is unknown
        """
        content = await self.content_service.create_content(
            caller=request.caller,
            title=request.title,
            topic_id=request.topic_id,
            cover_photo=request.cover_photo,
            summary=request.summary,
            body=request.body,
        )
        return CreateContentResponse(content_id=content.id)
