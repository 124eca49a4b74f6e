"""List contents use case."""

from datetime import date
from typing import Optional

import logfire
from pydantic import BaseModel

from learnhub.application.usecase.listing import calendar_range, check_page_size
from learnhub.config import ListingSettings
from learnhub.domain.model import ContentShortRow
from learnhub.domain.query import ContentCriteria, Page, compose_content_spec
from learnhub.domain.service import ContentService
from learnhub.domain.value import (
    ContentSortCategory,
    SortDirection,
    TopicId,
    UserId,
)


class ListContentsRequest(BaseModel):
    """List contents request.

    Dates are calendar days in ``zone_id``; both ends are inclusive.
    """

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    zone_id: Optional[str] = None  # Falls back to the configured zone
    author_id: Optional[UserId] = None
    title: Optional[str] = None
    author_name: Optional[str] = None
    topic_id: Optional[TopicId] = None
    sort_type: ContentSortCategory = ContentSortCategory.VOTES
    sort_direction: SortDirection = SortDirection.DESC
    page: int = 0
    size: int = 10
    viewer_id: Optional[UserId] = None  # Current user ID (if authenticated)


class ListContentsResponse(Page[ContentShortRow]):
    """One page of content rows."""


class ListContentsUseCase:
    """Use case for filtered, sorted and paginated content listings."""

    def __init__(
        self, content_service: ContentService, settings: ListingSettings
    ) -> None:
        """Initialize list contents use case.

        Args:
            content_service: Content domain service
            settings: Listing limits and default zone
        """
        self.content_service = content_service
        self.settings = settings

    async def execute(self, request: ListContentsRequest) -> ListContentsResponse:
        """Execute list contents flow.

        Raises:
            InvalidArgumentError: On an unknown zone, an inverted date range or
                an out-of-range page
        """
        with logfire.span(
            "list_contents.execute",
            sort=request.sort_type.value,
            direction=request.sort_direction.value,
            page=request.page,
            size=request.size,
        ):
            check_page_size(request.size, self.settings)
            start, end = calendar_range(
                request.start_date,
                request.end_date,
                request.zone_id or self.settings.default_zone_id,
            )
            spec = compose_content_spec(
                ContentCriteria(
                    start=start,
                    end=end,
                    author_id=request.author_id,
                    title=request.title,
                    author_name=request.author_name,
                    topic_id=request.topic_id,
                    sort=request.sort_type,
                    direction=request.sort_direction,
                )
            )
            result = await self.content_service.list_contents(
                spec, request.viewer_id, request.page, request.size
            )
            return ListContentsResponse(
                items=result.items,
                total=result.total,
                page=result.page,
                size=result.size,
            )
