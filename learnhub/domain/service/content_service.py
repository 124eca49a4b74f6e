"""Content domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from learnhub.domain.error import NotFoundError
from learnhub.domain.model.content import Content
from learnhub.domain.model.row import ContentFullRow, ContentShortRow
from learnhub.domain.query import ListingSpecification, Page, PageRequest
from learnhub.domain.repository import ContentRepository, VoteRepository
from learnhub.domain.value import Caller, ContentId, TopicId, UserId

from .authorization import require_admin, require_owner_or_admin
from .base import Service
from .topic_service import TopicService
from .user_service import UserService


class ContentService(Service):
    """Domain service for content operations and content listings."""

    def __init__(
        self,
        content_repository: ContentRepository,
        vote_repository: VoteRepository,
        topic_service: TopicService,
        user_service: UserService,
    ) -> None:
        """Initialize content service.

        Args:
            content_repository: Content repository
            vote_repository: Vote repository
            topic_service: Topic domain service
            user_service: User domain service
        """
        self.content_repository = content_repository
        self.vote_repository = vote_repository
        self.topic_service = topic_service
        self.user_service = user_service

    async def get_content(self, content_id: ContentId) -> Content:
        """Get a content item by ID.

        Raises:
            NotFoundError: If the content does not exist
        """
        content = await self.content_repository.find_by_id(content_id)
        if not content:
            logfire.warn("Content not found", content_id=str(content_id))
            raise NotFoundError("Content", str(content_id))
        return content

    async def get_content_detail(
        self, content_id: ContentId, viewer_id: Optional[UserId]
    ) -> ContentFullRow:
        """Get a content item with author data and the viewer's vote.

        Args:
            content_id: Content ID
            viewer_id: Requesting user (None when anonymous)

        Raises:
            NotFoundError: If the content does not exist
        """
        with logfire.span(
            "content_service.get_content_detail", content_id=str(content_id)
        ):
            row = await self.content_repository.find_full(content_id, viewer_id)
            if not row:
                logfire.warn("Content not found", content_id=str(content_id))
                raise NotFoundError("Content", str(content_id))
            return row

    async def create_content(
        self,
        caller: Caller,
        title: str,
        topic_id: TopicId,
        cover_photo: str,
        summary: str,
        body: str,
    ) -> Content:
        """Create a content item owned by the caller.

        Raises:
            ForbiddenError: If the caller is not an admin
            NotFoundError: If the caller is not registered or the topic is unknown
        """
        with logfire.span(
            "content_service.create_content", user_id=caller.user_id, topic_id=topic_id
        ):
            require_admin(caller, "create", "content")
            await self.user_service.get_user(caller.user_id)
            await self.topic_service.get_topic(topic_id)

            content = Content(
                id=ContentId(uuid4()),
                owner_id=caller.user_id,
                topic_id=topic_id,
                title=title,
                cover_photo=cover_photo,
                summary=summary,
                body=body,
            )
            saved = await self.content_repository.save(content)
            logfire.info("Content created", content_id=str(saved.id))
            return saved

    async def update_content(
        self,
        caller: Caller,
        content_id: ContentId,
        title: str,
        topic_id: TopicId,
        cover_photo: str,
        summary: str,
        body: str,
    ) -> Content:
        """Replace the editable fields of a content item.

        The upvote counter and ownership are never touched by an edit.

        Raises:
            NotFoundError: If the content or the topic does not exist
            ForbiddenError: If the caller is neither owner nor admin
        """
        with logfire.span(
            "content_service.update_content",
            content_id=str(content_id),
            user_id=caller.user_id,
        ):
            content = await self.get_content(content_id)
            require_owner_or_admin(content.owner_id, caller, "update", "content")
            await self.topic_service.get_topic(topic_id)

            updated = Content.model_validate(
                {
                    **content.model_dump(),
                    "title": title,
                    "topic_id": topic_id,
                    "cover_photo": cover_photo,
                    "summary": summary,
                    "body": body,
                }
            )
            saved = await self.content_repository.save(updated)
            logfire.info("Content updated", content_id=str(content_id))
            return saved

    async def delete_content(self, caller: Caller, content_id: ContentId) -> None:
        """Delete a content item together with its votes.

        Raises:
            NotFoundError: If the content does not exist
            ForbiddenError: If the caller is neither owner nor admin
        """
        with logfire.span(
            "content_service.delete_content",
            content_id=str(content_id),
            user_id=caller.user_id,
        ):
            content = await self.get_content(content_id)
            require_owner_or_admin(content.owner_id, caller, "delete", "content")

            removed_votes = await self.vote_repository.delete_by_content(content_id)
            await self.content_repository.delete(content_id)
            logfire.info(
                "Content deleted",
                content_id=str(content_id),
                removed_votes=removed_votes,
            )

    async def list_contents(
        self,
        spec: ListingSpecification,
        viewer_id: Optional[UserId],
        page: int,
        size: int,
    ) -> Page[ContentShortRow]:
        """Execute a content listing.

        Args:
            spec: Filters and ordering
            viewer_id: Requesting user, used to resolve ``voted_by_viewer``
            page: Zero-based page number
            size: Page size

        Returns:
            The requested page plus the total number of matching items

        Raises:
            InvalidArgumentError: If page < 0 or size <= 0
        """
        request = PageRequest.of(page, size)
        with logfire.span(
            "content_service.list_contents",
            page=request.page,
            size=request.size,
            predicates=len(spec.predicates),
            order_by=spec.ordering.field,
        ):
            items = await self.content_repository.find_page(
                spec, viewer_id, limit=request.size, offset=request.offset
            )
            total = await self.content_repository.count(spec)
            logfire.info("Contents listed", returned=len(items), total=total)
            return Page(
                items=items, total=total, page=request.page, size=request.size
            )
