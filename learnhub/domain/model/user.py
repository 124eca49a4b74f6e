"""User aggregate root.

Users are created from identity-provider claims on registration and
accumulate a score that drives the leaderboard.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from learnhub.domain.model.common import DomainModel, utcnow
from learnhub.domain.value import Role, UserId


class User(DomainModel):
    """User aggregate root.

    The score is maintained outside this service; we only read it to rank.
    """

    id: UserId
    email: str = Field(min_length=1, max_length=50)
    full_name: str = Field(min_length=1, max_length=255)
    role: Role = Role.USER
    profile_picture: Optional[str] = Field(default=None, max_length=1000)
    credit: int = 0
    score: int = 0
    created_at: datetime = Field(default_factory=utcnow)
