"""PostgreSQL implementation of Project repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.model import Project, ProjectFullRow, ProjectShortRow
from learnhub.domain.query import ListingSpecification
from learnhub.domain.repository import ProjectRepository
from learnhub.domain.value import ProjectId
from learnhub.persistence.mappers import (
    project_to_dict,
    row_to_project,
    row_to_project_full,
    row_to_project_short,
)
from learnhub.persistence.query import ColumnMap, apply_filters, apply_ordering
from learnhub.persistence.tables import projects_table, users_table

PROJECT_COLUMNS: ColumnMap = {
    "id": projects_table.c.id,
    "created_at": projects_table.c.created_at,
    "priority": projects_table.c.priority,
    "title": projects_table.c.title,
    "owner_id": projects_table.c.user_id,
    "type": projects_table.c.type,
    "author_name": users_table.c.full_name,
}

_PROJECT_WITH_AUTHOR = projects_table.join(
    users_table, projects_table.c.user_id == users_table.c.id
)

_ROW_COLUMNS = [
    projects_table.c.id,
    projects_table.c.title,
    projects_table.c.user_id.label("owner_id"),
    users_table.c.full_name.label("author_name"),
    users_table.c.profile_picture.label("author_profile_picture"),
    projects_table.c.created_at,
    projects_table.c.type,
    projects_table.c.priority,
]


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        stmt = select(projects_table).where(projects_table.c.id == project_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_project(row._asdict()) if row else None

    async def find_full(self, project_id: ProjectId) -> Optional[ProjectFullRow]:
        """Find a project detail row."""
        stmt = (
            select(*_ROW_COLUMNS, projects_table.c.body)
            .select_from(_PROJECT_WITH_AUTHOR)
            .where(projects_table.c.id == project_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project_full(dict(row)) if row else None

    async def find_page(
        self, spec: ListingSpecification, limit: int, offset: int
    ) -> list[ProjectShortRow]:
        """Find one page of project rows."""
        with logfire.span(
            "project_repository.find_page",
            predicates=[p.field for p in spec.predicates],
            order_by=spec.ordering.field,
            direction=spec.ordering.direction.value,
            limit=limit,
            offset=offset,
        ):
            stmt = select(*_ROW_COLUMNS).select_from(_PROJECT_WITH_AUTHOR)
            stmt = apply_filters(stmt, spec, PROJECT_COLUMNS)
            stmt = apply_ordering(stmt, spec, PROJECT_COLUMNS)
            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            rows = [row_to_project_short(dict(row)) for row in result.mappings().all()]
            logfire.info("Found projects", count=len(rows))
            return rows

    async def count(self, spec: ListingSpecification) -> int:
        """Count projects matching the specification's filters."""
        stmt = select(func.count()).select_from(_PROJECT_WITH_AUTHOR)
        stmt = apply_filters(stmt, spec, PROJECT_COLUMNS)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, project: Project) -> Project:
        """Save a project (create or update)."""
        existing = await self.find_by_id(project.id)

        project_dict = project_to_dict(project)

        if existing:
            values = {
                k: v for k, v in project_dict.items() if k not in ("id", "created_at")
            }
            stmt = (
                update(projects_table)
                .where(projects_table.c.id == project.id)
                .values(**values)
            )
            await self.session.execute(stmt)
        else:
            await self.session.execute(insert(projects_table).values(**project_dict))

        await self.session.flush()
        return project

    async def delete(self, project_id: ProjectId) -> None:
        """Delete a project (responses cascade in the schema)."""
        await self.session.execute(
            delete(projects_table).where(projects_table.c.id == project_id)
        )
        await self.session.flush()
