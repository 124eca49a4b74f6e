"""Listing specifications and their composers.

A ``ListingSpecification`` describes which rows a listing returns and in
which order, independent of pagination. The composers translate a criteria
record (every field optional) into one specification: each present field
becomes one predicate, all predicates are ANDed, and exactly one ordering
clause is attached.
"""

from datetime import datetime
from typing import Any, Iterable, Optional

from pydantic import BaseModel

from learnhub.domain.error import InvalidArgumentError
from learnhub.domain.query.predicate import (
    Predicate,
    author_name_contains,
    created_between,
    in_topic,
    of_type,
    owned_by,
    title_contains,
)
from learnhub.domain.value import (
    ContentSortCategory,
    DateRange,
    ProjectSortCategory,
    ProjectType,
    SortDirection,
    TopicId,
    UserId,
)
from learnhub.domain.value.common import ValueObject

CONTENT_SORT_FIELDS: dict[ContentSortCategory, str] = {
    ContentSortCategory.CREATED_AT: "created_at",
    ContentSortCategory.VOTES: "upvote_count",
}

PROJECT_SORT_FIELDS: dict[ProjectSortCategory, str] = {
    ProjectSortCategory.CREATED_AT: "created_at",
    ProjectSortCategory.PRIORITY: "priority",
}

# Appended after the caller's ordering so equal sort values paginate stably
TIE_BREAK_FIELD = "id"


class Ordering(ValueObject):
    """Single ordering clause."""

    field: str
    direction: SortDirection = SortDirection.DESC

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC


class ListingSpecification(ValueObject):
    """Active predicates plus one ordering rule."""

    predicates: tuple[Predicate, ...] = ()
    ordering: Ordering

    def matches(self, record: Any) -> bool:
        return all(predicate.matches(record) for predicate in self.predicates)

    def apply(self, records: Iterable[Any]) -> list[Any]:
        """Filter and order records in memory.

        Sorting by the tie-break first and relying on sort stability keeps
        rows with equal sort values in ascending id order in both directions.
        """
        matching = [record for record in records if self.matches(record)]
        matching.sort(key=lambda record: str(getattr(record, TIE_BREAK_FIELD)))
        matching.sort(
            key=lambda record: getattr(record, self.ordering.field),
            reverse=self.ordering.descending,
        )
        return matching


class ContentCriteria(BaseModel):
    """Optional filters and sort for a content listing."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    author_id: Optional[UserId] = None
    title: Optional[str] = None
    author_name: Optional[str] = None
    topic_id: Optional[TopicId] = None
    sort: ContentSortCategory = ContentSortCategory.VOTES
    direction: SortDirection = SortDirection.DESC


class ProjectCriteria(BaseModel):
    """Optional filters and sort for a project listing."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    author_id: Optional[UserId] = None
    type: Optional[ProjectType] = None
    title: Optional[str] = None
    author_name: Optional[str] = None
    sort: ProjectSortCategory = ProjectSortCategory.PRIORITY
    direction: SortDirection = SortDirection.DESC


def to_date_range(
    start: Optional[datetime], end: Optional[datetime]
) -> Optional[DateRange]:
    """Build a date range from optional bounds.

    Raises:
        InvalidArgumentError: If only one bound is given or start is after end
    """
    if start is None and end is None:
        return None
    if start is None or end is None:
        raise InvalidArgumentError("A date range needs both a start and an end")
    if start > end:
        raise InvalidArgumentError("Date range start must not be after its end")
    return DateRange(start=start, end=end)


def _collect(*predicates: Optional[Predicate]) -> tuple[Predicate, ...]:
    return tuple(p for p in predicates if p is not None)


def compose_content_spec(criteria: ContentCriteria) -> ListingSpecification:
    """Compose the specification for a content listing.

    Args:
        criteria: Content filters and sort

    Returns:
        Specification with one predicate per present filter

    Raises:
        InvalidArgumentError: If the date range is one-sided or inverted
    """
    return ListingSpecification(
        predicates=_collect(
            created_between(to_date_range(criteria.start, criteria.end)),
            title_contains(criteria.title),
            owned_by(criteria.author_id),
            author_name_contains(criteria.author_name),
            in_topic(criteria.topic_id),
        ),
        ordering=Ordering(
            field=CONTENT_SORT_FIELDS[criteria.sort], direction=criteria.direction
        ),
    )


def compose_project_spec(criteria: ProjectCriteria) -> ListingSpecification:
    """Compose the specification for a project listing.

    Args:
        criteria: Project filters and sort

    Returns:
        Specification with one predicate per present filter

    Raises:
        InvalidArgumentError: If the date range is one-sided or inverted
    """
    return ListingSpecification(
        predicates=_collect(
            created_between(to_date_range(criteria.start, criteria.end)),
            title_contains(criteria.title),
            owned_by(criteria.author_id),
            of_type(criteria.type),
            author_name_contains(criteria.author_name),
        ),
        ordering=Ordering(
            field=PROJECT_SORT_FIELDS[criteria.sort], direction=criteria.direction
        ),
    )
