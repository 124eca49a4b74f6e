"""Vote domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from learnhub.domain.error import ConflictError, NotFoundError
from learnhub.domain.model.vote import Vote
from learnhub.domain.repository import ContentRepository, VoteRepository
from learnhub.domain.value import ContentId, UserId, VoteDelta, VoteId

from .base import Service
from .user_service import UserService


class VoteService(Service):
    """Domain service for vote operations.

    A content item's ``upvote_count`` equals the number of votes that
    reference it once every toggle has committed.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        content_repository: ContentRepository,
        user_service: UserService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            content_repository: Content repository
            user_service: User service, to check the voter is registered
        """
        self.vote_repository = vote_repository
        self.content_repository = content_repository
        self.user_service = user_service

    async def toggle_vote(self, content_id: ContentId, voter_id: UserId) -> VoteDelta:
        """Flip a user's vote on a content item.

        The content row stays locked until the surrounding transaction ends,
        so toggles on the same item run one after another. The counter is
        adjusted relative to its stored value.

        Args:
            content_id: Content ID
            voter_id: Voting user's ID

        Returns:
            APPLIED (+1) if a vote was added, REVOKED (-1) if one was removed

        Raises:
            NotFoundError: If the content does not exist or the voter is not
                registered
            ConflictError: If a concurrent insert of the same vote won
        """
        with logfire.span(
            "vote_service.toggle_vote",
            content_id=str(content_id),
            user_id=voter_id,
        ):
            content = await self.content_repository.find_by_id_for_update(content_id)
            if not content:
                logfire.warn("Vote on non-existent content", content_id=str(content_id))
                raise NotFoundError("Content", str(content_id))
            await self.user_service.get_user(voter_id)

            removed = await self.vote_repository.delete_by_content_and_voter(
                content_id, voter_id
            )
            if removed:
                delta = VoteDelta.REVOKED
            else:
                vote = Vote(
                    id=VoteId(uuid4()), content_id=content_id, voter_id=voter_id
                )
                try:
                    await self.vote_repository.save(vote)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate vote attempt",
                        user_id=voter_id,
                        content_id=str(content_id),
                    )
                    raise ConflictError("Already voted on this content")
                delta = VoteDelta.APPLIED

            upvotes = await self.content_repository.adjust_upvote_count(
                content_id, int(delta)
            )
            logfire.info(
                "Vote toggled",
                content_id=str(content_id),
                user_id=voter_id,
                delta=int(delta),
                upvote_count=upvotes,
            )
            return delta
