"""Unit tests for listing predicates and specification composers."""

from datetime import datetime, timedelta, timezone

import pytest

from learnhub.domain.error import InvalidArgumentError
from learnhub.domain.query import (
    Between,
    ContainsIgnoreCase,
    ContentCriteria,
    Equals,
    ProjectCriteria,
    compose_content_spec,
    compose_project_spec,
)
from learnhub.domain.value import (
    ContentSortCategory,
    ProjectSortCategory,
    ProjectType,
    SortDirection,
    TopicId,
    UserId,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestComposeContentSpec:
    """Tests for compose_content_spec."""

    def test_empty_criteria_has_no_predicates_and_default_ordering(self):
        """No filters means no constraint, sorted by votes descending."""
        # Act
        spec = compose_content_spec(ContentCriteria())

        # Assert
        assert spec.predicates == ()
        assert spec.ordering.field == "upvote_count"
        assert spec.ordering.descending

    def test_each_present_field_adds_one_predicate(self):
        """Every given filter becomes exactly one predicate."""
        # Arrange
        criteria = ContentCriteria(
            start=NOW - timedelta(days=1),
            end=NOW,
            author_id=UserId("alice"),
            title="entropy",
            author_name="ali",
            topic_id=TopicId("physics"),
        )

        # Act
        spec = compose_content_spec(criteria)

        # Assert
        fields = {p.field for p in spec.predicates}
        assert len(spec.predicates) == 5
        assert fields == {"created_at", "owner_id", "title", "author_name", "topic_id"}

    def test_blank_text_filters_are_ignored(self):
        """Empty strings do not constrain the listing."""
        # Act
        spec = compose_content_spec(ContentCriteria(title="", author_name=""))

        # Assert
        assert spec.predicates == ()

    def test_sort_by_created_at_ascending(self):
        # Act
        spec = compose_content_spec(
            ContentCriteria(
                sort=ContentSortCategory.CREATED_AT, direction=SortDirection.ASC
            )
        )

        # Assert
        assert spec.ordering.field == "created_at"
        assert not spec.ordering.descending

    def test_one_sided_date_range_is_rejected(self):
        """A start without an end cannot form a range."""
        with pytest.raises(InvalidArgumentError, match="both a start and an end"):
            compose_content_spec(ContentCriteria(start=NOW))

    def test_inverted_date_range_is_rejected(self):
        with pytest.raises(InvalidArgumentError, match="must not be after"):
            compose_content_spec(
                ContentCriteria(start=NOW, end=NOW - timedelta(seconds=1))
            )


class TestComposeProjectSpec:
    """Tests for compose_project_spec."""

    def test_default_ordering_is_priority_descending(self):
        # Act
        spec = compose_project_spec(ProjectCriteria())

        # Assert
        assert spec.ordering.field == "priority"
        assert spec.ordering.descending

    def test_type_filter_is_exact_match(self):
        # Act
        spec = compose_project_spec(ProjectCriteria(type=ProjectType.PAID))

        # Assert
        assert spec.predicates == (Equals(field="type", value=ProjectType.PAID),)

    def test_sort_by_created_at(self):
        # Act
        spec = compose_project_spec(
            ProjectCriteria(sort=ProjectSortCategory.CREATED_AT)
        )

        # Assert
        assert spec.ordering.field == "created_at"


class _Record:
    def __init__(self, **fields):
        self.__dict__.update(fields)


class TestPredicates:
    """Tests for in-memory predicate evaluation."""

    def test_between_is_inclusive_at_both_ends(self):
        # Arrange
        predicate = Between(field="created_at", low=NOW, high=NOW + timedelta(hours=1))

        # Assert
        assert predicate.matches(_Record(created_at=NOW))
        assert predicate.matches(_Record(created_at=NOW + timedelta(hours=1)))
        assert not predicate.matches(_Record(created_at=NOW - timedelta(microseconds=1)))

    def test_contains_ignores_case(self):
        # Arrange
        predicate = ContainsIgnoreCase(field="title", text="ENTRO")

        # Assert
        assert predicate.matches(_Record(title="Entropy for beginners"))
        assert not predicate.matches(_Record(title="Enthalpy"))

    def test_specification_orders_ties_by_id_ascending(self):
        """Rows with equal sort values keep ascending id order in both directions."""
        # Arrange
        records = [
            _Record(id="c", upvote_count=5),
            _Record(id="a", upvote_count=5),
            _Record(id="b", upvote_count=9),
        ]
        desc = compose_content_spec(ContentCriteria())
        asc = compose_content_spec(ContentCriteria(direction=SortDirection.ASC))

        # Act
        desc_ids = [r.id for r in desc.apply(records)]
        asc_ids = [r.id for r in asc.apply(records)]

        # Assert
        assert desc_ids == ["b", "a", "c"]
        assert asc_ids == ["a", "c", "b"]
