"""Composable listing predicates.

A predicate names the record attribute it constrains and the criterion it
checks. In memory it is evaluated directly against a read projection; the
PostgreSQL store translates the same object into a SQL clause (see
``learnhub.persistence.query``).

Factories return ``None`` when the criterion is absent: a missing criterion
means "no constraint", never "match nothing".
"""

from abc import abstractmethod
from datetime import datetime
from typing import Any, Optional

from learnhub.domain.value import DateRange, ProjectType, TopicId, UserId
from learnhub.domain.value.common import ValueObject


class Predicate(ValueObject):
    """Base class for a single filter clause."""

    field: str

    @abstractmethod
    def matches(self, record: Any) -> bool:
        """Whether ``record`` satisfies this clause."""


class Between(Predicate):
    """Inclusive range membership."""

    low: datetime
    high: datetime

    def matches(self, record: Any) -> bool:
        return self.low <= getattr(record, self.field) <= self.high


class Equals(Predicate):
    """Exact equality against an identifier or enum value."""

    value: Any

    def matches(self, record: Any) -> bool:
        return getattr(record, self.field) == self.value


class ContainsIgnoreCase(Predicate):
    """Case-insensitive substring containment."""

    text: str

    def matches(self, record: Any) -> bool:
        value = getattr(record, self.field)
        return value is not None and self.text.lower() in value.lower()


def created_between(date_range: Optional[DateRange]) -> Optional[Predicate]:
    if date_range is None:
        return None
    return Between(field="created_at", low=date_range.start, high=date_range.end)


def owned_by(owner_id: Optional[UserId]) -> Optional[Predicate]:
    if not owner_id:
        return None
    return Equals(field="owner_id", value=owner_id)


def in_topic(topic_id: Optional[TopicId]) -> Optional[Predicate]:
    if not topic_id:
        return None
    return Equals(field="topic_id", value=topic_id)


def of_type(project_type: Optional[ProjectType]) -> Optional[Predicate]:
    if project_type is None:
        return None
    return Equals(field="type", value=project_type)


def title_contains(text: Optional[str]) -> Optional[Predicate]:
    if not text:
        return None
    return ContainsIgnoreCase(field="title", text=text)


def author_name_contains(text: Optional[str]) -> Optional[Predicate]:
    if not text:
        return None
    return ContainsIgnoreCase(field="author_name", text=text)
