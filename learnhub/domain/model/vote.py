"""Vote entity.

Votes are upvotes on content. Each user can hold at most one vote per
content item.
"""

from datetime import datetime

from pydantic import Field

from learnhub.domain.model.common import DomainModel, utcnow
from learnhub.domain.value import ContentId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (content, voter) pair (enforced by database unique constraint)
    - Created and removed only by the vote toggle, never updated
    """

    id: VoteId
    content_id: ContentId
    voter_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
