"""Unit tests for translating listing specifications into SQL."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from learnhub.domain.query import (
    ContentCriteria,
    ProjectCriteria,
    compose_content_spec,
    compose_project_spec,
)
from learnhub.domain.value import ProjectType, SortDirection, TopicId, UserId
from learnhub.persistence.query import apply_filters, apply_ordering
from learnhub.persistence.repository.content import CONTENT_COLUMNS, page_statement
from learnhub.persistence.repository.project import PROJECT_COLUMNS
from learnhub.persistence.tables import contents_table, projects_table


def _compile(stmt):
    return stmt.compile(dialect=postgresql.dialect())


class TestContentListingSQL:
    """Tests for content listing clauses."""

    def test_filters_are_anded_into_where_clause(self):
        # Arrange
        spec = compose_content_spec(
            ContentCriteria(
                start=datetime(2026, 1, 1, tzinfo=timezone.utc),
                end=datetime(2026, 1, 31, tzinfo=timezone.utc),
                topic_id=TopicId("physics"),
                title="50%",
            )
        )

        # Act
        compiled = _compile(
            apply_filters(select(contents_table.c.id), spec, CONTENT_COLUMNS)
        )
        sql = str(compiled)

        # Assert
        assert "contents.created_at BETWEEN" in sql
        assert "contents.topic_id =" in sql
        assert "ILIKE" in sql
        assert sql.count(" AND ") >= 2
        assert "physics" in compiled.params.values()
        # User-typed wildcards are escaped
        assert "50/%" in compiled.params.values()

    def test_ordering_appends_id_tie_break(self):
        # Arrange
        spec = compose_content_spec(ContentCriteria(direction=SortDirection.ASC))

        # Act
        sql = str(
            _compile(apply_ordering(select(contents_table.c.id), spec, CONTENT_COLUMNS))
        )

        # Assert
        assert "ORDER BY contents.upvote_count ASC, contents.id ASC" in sql

    def test_no_criteria_means_no_where_clause(self):
        # Arrange
        spec = compose_content_spec(ContentCriteria())

        # Act
        sql = str(
            _compile(apply_filters(select(contents_table.c.id), spec, CONTENT_COLUMNS))
        )

        # Assert
        assert "WHERE" not in sql


class TestContentPageSQL:
    """Tests for the statement behind a page of content rows."""

    def test_viewer_vote_is_a_correlated_subquery(self):
        # Arrange
        spec = compose_content_spec(ContentCriteria(topic_id=TopicId("physics")))

        # Act
        compiled = _compile(page_statement(spec, UserId("ada"), limit=20, offset=40))
        sql = str(compiled)

        # Assert
        assert sql.count("(SELECT content_votes.id") == 1
        assert "content_votes.content_id = contents.id" in sql
        assert sql.count("FROM content_votes") == 1
        assert "FROM contents JOIN users ON contents.user_id = users.id" in sql
        assert "AS voted_by_viewer" in sql
        assert "ada" in compiled.params.values()
        assert "LIMIT" in sql and "OFFSET" in sql

    def test_anonymous_viewer_selects_null(self):
        # Arrange
        spec = compose_content_spec(ContentCriteria())

        # Act
        sql = str(_compile(page_statement(spec, None, limit=20, offset=0)))

        # Assert
        assert "NULL AS voted_by_viewer" in sql
        assert "content_votes" not in sql


class TestProjectListingSQL:
    """Tests for project listing clauses."""

    def test_enum_filter_compares_stored_value(self):
        # Arrange
        spec = compose_project_spec(ProjectCriteria(type=ProjectType.PAID))

        # Act
        stmt = apply_ordering(
            apply_filters(select(projects_table.c.id), spec, PROJECT_COLUMNS),
            spec,
            PROJECT_COLUMNS,
        )
        compiled = _compile(stmt)

        # Assert
        assert "projects.type =" in str(compiled)
        assert "PAID" in compiled.params.values()
        assert "ORDER BY projects.priority DESC, projects.id ASC" in str(compiled)
