"""Leaderboard domain service."""

import logfire

from learnhub.domain.model.row import LeaderboardRow
from learnhub.domain.query import Page, PageRequest
from learnhub.domain.repository import UserRepository
from learnhub.domain.value import UserId

from .base import Service
from .user_service import UserService


class LeaderboardService(Service):
    """Dense ranking of users by score.

    Equal scores share a rank and the next distinct score takes the next
    integer, so scores [100, 100, 90, 80, 80] rank [1, 1, 2, 3, 3]. Within a
    rank, users are listed by ID ascending.
    """

    def __init__(
        self, user_repository: UserRepository, user_service: UserService
    ) -> None:
        self.user_repository = user_repository
        self.user_service = user_service

    async def rank_of(self, user_id: UserId) -> int:
        """Get a user's rank: one plus the number of distinct higher scores.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("leaderboard_service.rank_of", user_id=user_id):
            user = await self.user_service.get_user(user_id)
            higher = await self.user_repository.count_distinct_scores_above(
                user.score
            )
            return higher + 1

    async def leaderboard_page(self, page: int, size: int) -> Page[LeaderboardRow]:
        """Get one page of the leaderboard.

        Raises:
            InvalidArgumentError: If page < 0 or size <= 0
        """
        request = PageRequest.of(page, size)
        with logfire.span(
            "leaderboard_service.leaderboard_page",
            page=request.page,
            size=request.size,
        ):
            rows = await self.user_repository.find_leaderboard(
                limit=request.size, offset=request.offset
            )
            total = await self.user_repository.count()
            return Page(items=rows, total=total, page=request.page, size=request.size)
