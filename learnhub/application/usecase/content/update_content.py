"""Update content use case."""

from pydantic import BaseModel

from learnhub.domain.service import ContentService
from learnhub.domain.value import Caller, ContentId, TopicId


class UpdateContentRequest(BaseModel):
    """Update content request. Every editable field is replaced."""

    caller: Caller
    content_id: ContentId
    title: str
    topic_id: TopicId
    cover_photo: str
    summary: str
    body: str


class UpdateContentUseCase:
    """Use case for editing a content item."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: UpdateContentRequest) -> None:
        """Execute update content flow.

        Raises:
            NotFoundError: If the content or the topic does not exist
            ForbiddenError: If the caller is neither owner nor admin
        """
        await self.content_service.update_content(
            caller=request.caller,
            content_id=request.content_id,
            title=request.title,
            topic_id=request.topic_id,
            cover_photo=request.cover_photo,
            summary=request.summary,
            body=request.body,
        )
