"""Content aggregate root.

Content items are the blog-like posts of the platform. Each belongs to a
topic and carries a denormalized upvote counter that only the vote toggle
is allowed to move.
"""

from datetime import datetime

from pydantic import Field

from learnhub.domain.model.common import DomainModel, utcnow
from learnhub.domain.value import ContentId, TopicId, UserId


class Content(DomainModel):
    """Content aggregate root.

    Invariant: ``upvote_count`` equals the number of votes referencing this
    item after every successful toggle.
    """

    id: ContentId
    owner_id: UserId
    topic_id: TopicId
    title: str = Field(min_length=1, max_length=255)
    cover_photo: str = Field(min_length=1, max_length=1000)
    summary: str = Field(min_length=1, max_length=1000)
    body: str = Field(min_length=1, max_length=65535)
    upvote_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
