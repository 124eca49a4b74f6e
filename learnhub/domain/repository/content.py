"""Content repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from learnhub.domain.model.content import Content
from learnhub.domain.model.row import ContentFullRow, ContentShortRow
from learnhub.domain.query import ListingSpecification
from learnhub.domain.value import ContentId, UserId


class ContentRepository(ABC):
    """Repository for Content aggregate.

    Defines the contract for content persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item by ID.

        Args:
            content_id: The content's unique identifier

        Returns:
            The content if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item and lock it until the transaction ends.

        Concurrent callers for the same item wait for the lock, which
        serializes read-check-write sequences on that item.

        Args:
            content_id: The content's unique identifier

        Returns:
            The content if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_full(
        self, content_id: ContentId, viewer_id: Optional[UserId]
    ) -> Optional[ContentFullRow]:
        """Find a content item with author data and the viewer's vote.

        Args:
            content_id: The content's unique identifier
            viewer_id: Requesting user (None when anonymous)

        Returns:
            The content detail row if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page(
        self,
        spec: ListingSpecification,
        viewer_id: Optional[UserId],
        limit: int,
        offset: int,
    ) -> list[ContentShortRow]:
        """Find one page of content rows matching a specification.

        Rows are ordered by the specification's ordering, then by id
        ascending. ``voted_by_viewer`` is resolved for every row within the
        same round-trip, never with one query per row.

        Args:
            spec: Filters and ordering
            viewer_id: Requesting user (None when anonymous)
            limit: Maximum number of rows to return
            offset: Number of rows to skip

        Returns:
            Content rows for the page
        """
        pass

    @abstractmethod
    async def count(self, spec: ListingSpecification) -> int:
        """Count content items matching a specification's filters.

        Args:
            spec: Filters (ordering is ignored)

        Returns:
            Total number of matching items
        """
        pass

    @abstractmethod
    async def save(self, content: Content) -> Content:
        """Save a content item (create or update).

        The upvote counter is only written on insert; updates leave it to
        ``adjust_upvote_count``.

        Args:
            content: The content to save

        Returns:
            The saved content
        """
        pass

    @abstractmethod
    async def delete(self, content_id: ContentId) -> None:
        """Delete a content item.

        Args:
            content_id: The content ID to delete
        """
        pass

    @abstractmethod
    async def adjust_upvote_count(self, content_id: ContentId, delta: int) -> int:
        """Atomically add ``delta`` to the upvote counter.

        The update is expressed relative to the stored value so concurrent
        adjustments never overwrite each other.

        Args:
            content_id: The content ID
            delta: Signed amount to add

        Returns:
            The counter value after the update
        """
        pass
