"""Domain value objects for LearnHub.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from datetime import datetime
from enum import Enum, IntEnum

from pydantic import model_validator

from learnhub.domain.value.common import ValueObject
from learnhub.domain.value.identifiers import UserId


class Role(str, Enum):
    """User role, mirrored in the token's scope claim."""

    ADMIN = "ADMIN"
    USER = "USER"


class ProjectType(str, Enum):
    """Whether responders to a project get paid."""

    FREE = "FREE"
    PAID = "PAID"


class SortDirection(str, Enum):
    """Direction of an ordering clause."""

    ASC = "ASC"
    DESC = "DESC"


class ContentSortCategory(str, Enum):
    """Sortable fields of a content listing."""

    CREATED_AT = "CREATED_AT"
    VOTES = "VOTES"


class ProjectSortCategory(str, Enum):
    """Sortable fields of a project listing."""

    CREATED_AT = "CREATED_AT"
    PRIORITY = "PRIORITY"


class VoteDelta(IntEnum):
    """Signed change applied to a content's upvote count by a toggle."""

    APPLIED = 1
    REVOKED = -1


class DateRange(ValueObject):
    """Inclusive range of instants.

    Both bounds are required; callers that only know one bound must not
    build a range at all.
    """

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def validate_order(self) -> "DateRange":
        """Reject ranges that end before they start."""
        if self.start > self.end:
            raise ValueError("Date range start must not be after its end")
        return self

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end


class Caller(ValueObject):
    """Authenticated identity performing an operation."""

    user_id: UserId
    email: str | None = None
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
