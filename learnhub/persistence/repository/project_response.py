"""PostgreSQL implementation of ProjectResponse repository."""

from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.model import ProjectResponse, ProjectResponseRow
from learnhub.domain.repository import ProjectResponseRepository
from learnhub.domain.value import ProjectId, ProjectResponseId, SortDirection
from learnhub.persistence.mappers import (
    project_response_to_dict,
    row_to_project_response,
    row_to_project_response_row,
)
from learnhub.persistence.tables import project_responses_table, users_table

_RESPONSE_WITH_RESPONDER = project_responses_table.join(
    users_table, project_responses_table.c.user_id == users_table.c.id
)

_ROW_COLUMNS = [
    project_responses_table.c.id,
    project_responses_table.c.project_id,
    project_responses_table.c.user_id.label("responder_id"),
    users_table.c.full_name.label("responder_name"),
    users_table.c.profile_picture.label("responder_profile_picture"),
    project_responses_table.c.body,
    project_responses_table.c.payment_number,
    project_responses_table.c.is_verified,
    project_responses_table.c.created_at,
]


def _filters(project_id: ProjectId, is_verified: Optional[bool]) -> list:
    clauses = [project_responses_table.c.project_id == project_id]
    if is_verified is not None:
        clauses.append(project_responses_table.c.is_verified.is_(is_verified))
    return clauses


class PostgresProjectResponseRepository(ProjectResponseRepository):
    """PostgreSQL implementation of ProjectResponseRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, response_id: ProjectResponseId
    ) -> Optional[ProjectResponse]:
        """Find a response by ID."""
        stmt = select(project_responses_table).where(
            project_responses_table.c.id == response_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_project_response(row._asdict()) if row else None

    async def find_row(
        self, response_id: ProjectResponseId
    ) -> Optional[ProjectResponseRow]:
        """Find a response joined with its responder."""
        stmt = (
            select(*_ROW_COLUMNS)
            .select_from(_RESPONSE_WITH_RESPONDER)
            .where(project_responses_table.c.id == response_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project_response_row(dict(row)) if row else None

    async def find_page(
        self,
        project_id: ProjectId,
        is_verified: Optional[bool],
        direction: SortDirection,
        limit: int,
        offset: int,
    ) -> list[ProjectResponseRow]:
        """Find one page of responses to a project."""
        created_at = project_responses_table.c.created_at
        stmt = (
            select(*_ROW_COLUMNS)
            .select_from(_RESPONSE_WITH_RESPONDER)
            .where(*_filters(project_id, is_verified))
            .order_by(
                created_at.desc() if direction == SortDirection.DESC else created_at.asc(),
                project_responses_table.c.id.asc(),
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [
            row_to_project_response_row(dict(row)) for row in result.mappings().all()
        ]

    async def count(self, project_id: ProjectId, is_verified: Optional[bool]) -> int:
        """Count responses to a project."""
        stmt = (
            select(func.count())
            .select_from(project_responses_table)
            .where(*_filters(project_id, is_verified))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, response: ProjectResponse) -> ProjectResponse:
        """Save a response (create or update)."""
        existing = await self.find_by_id(response.id)

        response_dict = project_response_to_dict(response)

        if existing:
            stmt = (
                update(project_responses_table)
                .where(project_responses_table.c.id == response.id)
                .values(body=response.body, is_verified=response.is_verified)
            )
            await self.session.execute(stmt)
        else:
            await self.session.execute(
                insert(project_responses_table).values(**response_dict)
            )

        await self.session.flush()
        return response
