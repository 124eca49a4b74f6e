"""List projects use case."""

from datetime import date
from typing import Optional

import logfire
from pydantic import BaseModel

from learnhub.application.usecase.listing import calendar_range, check_page_size
from learnhub.config import ListingSettings
from learnhub.domain.model import ProjectShortRow
from learnhub.domain.query import Page, ProjectCriteria, compose_project_spec
from learnhub.domain.service import ProjectService
from learnhub.domain.value import (
    ProjectSortCategory,
    ProjectType,
    SortDirection,
    UserId,
)


class ListProjectsRequest(BaseModel):
    """List projects request."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    zone_id: Optional[str] = None
    author_id: Optional[UserId] = None
    type: Optional[ProjectType] = None
    title: Optional[str] = None
    author_name: Optional[str] = None
    sort_type: ProjectSortCategory = ProjectSortCategory.PRIORITY
    sort_direction: SortDirection = SortDirection.DESC
    page: int = 0
    size: int = 10


class ListProjectsResponse(Page[ProjectShortRow]):
    """One page of project rows."""


class ListProjectsUseCase:
    """Use case for filtered, sorted and paginated project listings."""

    def __init__(
        self, project_service: ProjectService, settings: ListingSettings
    ) -> None:
        """Initialize list projects use case.

        Args:
            project_service: Project domain service
            settings: Listing limits and default zone
        """
        self.project_service = project_service
        self.settings = settings

    async def execute(self, request: ListProjectsRequest) -> ListProjectsResponse:
        """Execute list projects flow.

        Raises:
            InvalidArgumentError: On an unknown zone, an inverted date range or
                an out-of-range page
        """
        with logfire.span(
            "list_projects.execute",
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
            spec = compose_project_spec(
                ProjectCriteria(
                    start=start,
                    end=end,
                    author_id=request.author_id,
                    type=request.type,
                    title=request.title,
                    author_name=request.author_name,
                    sort=request.sort_type,
                    direction=request.sort_direction,
                )
            )
            result = await self.project_service.list_projects(
                spec, request.page, request.size
            )
            return ListProjectsResponse(
                items=result.items,
                total=result.total,
                page=result.page,
                size=result.size,
            )
