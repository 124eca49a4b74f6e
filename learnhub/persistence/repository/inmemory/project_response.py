"""In-memory project response repository for testing."""

from typing import Optional

from learnhub.domain.model import ProjectResponse, ProjectResponseRow
from learnhub.domain.repository.project_response import ProjectResponseRepository
from learnhub.domain.value import ProjectId, ProjectResponseId, SortDirection

from .store import InMemoryStore


class InMemoryProjectResponseRepository(ProjectResponseRepository):
    """In-memory implementation of ProjectResponseRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _to_row(self, response: ProjectResponse) -> ProjectResponseRow:
        responder = self._store.users[response.responder_id]
        return ProjectResponseRow(
            id=response.id,
            project_id=response.project_id,
            responder_id=response.responder_id,
            responder_name=responder.full_name,
            responder_profile_picture=responder.profile_picture,
            body=response.body,
            payment_number=response.payment_number,
            is_verified=response.is_verified,
            created_at=response.created_at,
        )

    def _matching(
        self, project_id: ProjectId, is_verified: Optional[bool]
    ) -> list[ProjectResponse]:
        return [
            r
            for r in self._store.responses.values()
            if r.project_id == project_id
            and (is_verified is None or r.is_verified == is_verified)
        ]

    async def find_by_id(
        self, response_id: ProjectResponseId
    ) -> Optional[ProjectResponse]:
        return self._store.responses.get(response_id)

    async def find_row(
        self, response_id: ProjectResponseId
    ) -> Optional[ProjectResponseRow]:
        response = self._store.responses.get(response_id)
        return self._to_row(response) if response else None

    async def find_page(
        self,
        project_id: ProjectId,
        is_verified: Optional[bool],
        direction: SortDirection,
        limit: int,
        offset: int,
    ) -> list[ProjectResponseRow]:
        responses = sorted(self._matching(project_id, is_verified), key=lambda r: str(r.id))
        responses.sort(
            key=lambda r: r.created_at, reverse=direction == SortDirection.DESC
        )
        return [self._to_row(r) for r in responses[offset : offset + limit]]

    async def count(self, project_id: ProjectId, is_verified: Optional[bool]) -> int:
        return len(self._matching(project_id, is_verified))

    async def save(self, response: ProjectResponse) -> ProjectResponse:
        self._store.responses[response.id] = response
        return response
