"""List project responses use case."""

from typing import Optional

from pydantic import BaseModel

from learnhub.application.usecase.listing import check_page_size
from learnhub.config import ListingSettings
from learnhub.domain.model import ProjectResponseRow
from learnhub.domain.query import Page
from learnhub.domain.service import ProjectResponseService
from learnhub.domain.value import ProjectId, SortDirection


class ListResponsesRequest(BaseModel):
    """List project responses request."""

    project_id: ProjectId
    is_verified: Optional[bool] = None  # None lists both states
    sort_direction: SortDirection = SortDirection.ASC
    page: int = 0
    size: int = 10


class ListResponsesResponse(Page[ProjectResponseRow]):
    """One page of responses to a project."""


class ListResponsesUseCase:
    """Use case for paging through the responses to a project."""

    def __init__(
        self, response_service: ProjectResponseService, settings: ListingSettings
    ) -> None:
        self.response_service = response_service
        self.settings = settings

    async def execute(self, request: ListResponsesRequest) -> ListResponsesResponse:
        """Execute list responses flow.

        Raises:
            InvalidArgumentError: If the page is out of range
            NotFoundError: If the project does not exist
        """
        check_page_size(request.size, self.settings)
        result = await self.response_service.list_responses(
            request.project_id,
            request.is_verified,
            request.sort_direction,
            request.page,
            request.size,
        )
        return ListResponsesResponse(
            items=result.items,
            total=result.total,
            page=result.page,
            size=result.size,
        )
