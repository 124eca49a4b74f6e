"""Delete content use case."""

from pydantic import BaseModel

from learnhub.domain.service import ContentService
from learnhub.domain.value import Caller, ContentId


class DeleteContentRequest(BaseModel):
    """Delete content request."""

    caller: Caller
    content_id: ContentId


class DeleteContentUseCase:
    """Use case for removing a content item and its votes."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: DeleteContentRequest) -> None:
        await self.content_service.delete_content(request.caller, request.content_id)
