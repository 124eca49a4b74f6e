"""Toggle vote use case."""

import logfire
from pydantic import BaseModel

from learnhub.domain.service import VoteService
from learnhub.domain.value import ContentId, UserId, VoteDelta


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    content_id: ContentId
    voter_id: UserId  # From authenticated user


class ToggleVoteResponse(BaseModel):
    """Toggle vote response: +1 when a vote was added, -1 when removed."""

    delta: VoteDelta


class ToggleVoteUseCase:
    """Use case for voting on content, or withdrawing the vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute toggle vote flow.

        Raises:
            NotFoundError: If the content does not exist
            ConflictError: If a concurrent toggle inserted the same vote
        """
        with logfire.span(
            "toggle_vote.execute",
            content_id=str(request.content_id),
            user_id=request.voter_id,
        ):
            delta = await self.vote_service.toggle_vote(
                request.content_id, request.voter_id
            )
            return ToggleVoteResponse(delta=delta)
