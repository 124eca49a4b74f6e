"""Topic entity for categorizing content."""

from datetime import datetime

from pydantic import Field

from learnhub.domain.model.common import DomainModel, utcnow
from learnhub.domain.value import TopicId


class Topic(DomainModel):
    """Content topic.

    The id is picked by the creator and doubles as the topic's slug.
    """

    id: TopicId = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1, max_length=255)
    created_at: datetime = Field(default_factory=utcnow)
