"""Get leaderboard use case."""

from pydantic import BaseModel

from learnhub.application.usecase.listing import check_page_size
from learnhub.config import ListingSettings
from learnhub.domain.model import LeaderboardRow
from learnhub.domain.query import Page
from learnhub.domain.service import LeaderboardService


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request."""

    page: int = 0
    size: int = 10


class GetLeaderboardResponse(Page[LeaderboardRow]):
    """One page of the leaderboard."""


class GetLeaderboardUseCase:
    """Use case for paging through users ranked by score."""

    def __init__(
        self, leaderboard_service: LeaderboardService, settings: ListingSettings
    ) -> None:
        self.leaderboard_service = leaderboard_service
        self.settings = settings

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        """Execute get leaderboard flow.

        Raises:
            InvalidArgumentError: If the page is out of range
        """
        check_page_size(request.size, self.settings)
        result = await self.leaderboard_service.leaderboard_page(
            request.page, request.size
        )
        return GetLeaderboardResponse(
            items=result.items,
            total=result.total,
            page=result.page,
            size=result.size,
        )
