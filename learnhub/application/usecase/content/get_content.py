"""Get content use case."""

from typing import Optional

from pydantic import BaseModel

from learnhub.domain.model import ContentFullRow
from learnhub.domain.service import ContentService
from learnhub.domain.value import ContentId, UserId


class GetContentRequest(BaseModel):
    """Get content request."""

    content_id: ContentId
    viewer_id: Optional[UserId] = None  # Current user ID (if authenticated)


class GetContentUseCase:
    """Use case for reading one content item."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize get content use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: GetContentRequest) -> ContentFullRow:
        """Get the content detail, including whether the viewer voted on it.

        Raises:
            NotFoundError: If the content does not exist
        """
        return await self.content_service.get_content_detail(
            request.content_id, request.viewer_id
        )
