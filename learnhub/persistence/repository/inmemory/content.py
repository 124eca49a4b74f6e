"""In-memory content repository for testing."""

from typing import Optional

from learnhub.domain.model import Content, ContentFullRow, ContentShortRow
from learnhub.domain.query import ListingSpecification
from learnhub.domain.repository.content import ContentRepository
from learnhub.domain.value import ContentId, UserId

from .store import InMemoryStore
from .vote import InMemoryVoteRepository


class InMemoryContentRepository(ContentRepository):
    """In-memory implementation of ContentRepository for testing.

    Listings evaluate the specification directly against content rows and
    resolve the viewer's votes with one batch lookup per page.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._votes = InMemoryVoteRepository(store)

    def _to_row(self, content: Content) -> ContentFullRow:
        author = self._store.users[content.owner_id]
        return ContentFullRow(
            id=content.id,
            topic_id=content.topic_id,
            title=content.title,
            owner_id=content.owner_id,
            author_name=author.full_name,
            author_profile_picture=author.profile_picture,
            cover_photo=content.cover_photo,
            summary=content.summary,
            upvote_count=content.upvote_count,
            created_at=content.created_at,
            body=content.body,
        )

    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        return self._store.contents.get(content_id)

    async def find_by_id_for_update(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item.

        No lock is needed: in-memory calls never suspend, so a toggle runs
        without interleaving.
        """
        return self._store.contents.get(content_id)

    async def find_full(
        self, content_id: ContentId, viewer_id: Optional[UserId]
    ) -> Optional[ContentFullRow]:
        content = self._store.contents.get(content_id)
        if not content:
            return None

        row = self._to_row(content)
        if viewer_id:
            vote = await self._votes.find_by_content_and_voter(content_id, viewer_id)
            if vote:
                row = row.model_copy(update={"voted_by_viewer": vote.id})
        return row

    async def find_page(
        self,
        spec: ListingSpecification,
        viewer_id: Optional[UserId],
        limit: int,
        offset: int,
    ) -> list[ContentShortRow]:
        rows = spec.apply(self._to_row(c) for c in self._store.contents.values())
        page = [
            ContentShortRow.model_validate(row.model_dump(exclude={"body"}))
            for row in rows[offset : offset + limit]
        ]
        if not viewer_id or not page:
            return page

        # Batched against the store for the whole page
        votes = self._store.votes
        return [
            row.model_copy(
                update={
                    "voted_by_viewer": votes[(row.id, viewer_id)].id
                    if (row.id, viewer_id) in votes
                    else None
                }
            )
            for row in page
        ]

    async def count(self, spec: ListingSpecification) -> int:
        return sum(
            1 for c in self._store.contents.values() if spec.matches(self._to_row(c))
        )

    async def save(self, content: Content) -> Content:
        """Save a content item; updates keep the stored upvote count."""
        existing = self._store.contents.get(content.id)
        if existing:
            content = content.model_copy(
                update={
                    "upvote_count": existing.upvote_count,
                    "created_at": existing.created_at,
                }
            )
        self._store.contents[content.id] = content
        return content

    async def delete(self, content_id: ContentId) -> None:
        self._store.delete_content(content_id)

    async def adjust_upvote_count(self, content_id: ContentId, delta: int) -> int:
        content = self._store.contents[content_id]
        updated = content.model_copy(
            update={"upvote_count": content.upvote_count + delta}
        )
        self._store.contents[content_id] = updated
        return updated.upvote_count
