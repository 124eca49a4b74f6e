"""In-memory project repository for testing."""

from typing import Optional

from learnhub.domain.model import Project, ProjectFullRow, ProjectShortRow
from learnhub.domain.query import ListingSpecification
from learnhub.domain.repository.project import ProjectRepository
from learnhub.domain.value import ProjectId

from .store import InMemoryStore


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _to_row(self, project: Project) -> ProjectFullRow:
        author = self._store.users[project.owner_id]
        return ProjectFullRow(
            id=project.id,
            title=project.title,
            owner_id=project.owner_id,
            author_name=author.full_name,
            author_profile_picture=author.profile_picture,
            created_at=project.created_at,
            type=project.type,
            priority=project.priority,
            body=project.body,
        )

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        return self._store.projects.get(project_id)

    async def find_full(self, project_id: ProjectId) -> Optional[ProjectFullRow]:
        project = self._store.projects.get(project_id)
        return self._to_row(project) if project else None

    async def find_page(
        self, spec: ListingSpecification, limit: int, offset: int
    ) -> list[ProjectShortRow]:
        rows = spec.apply(self._to_row(p) for p in self._store.projects.values())
        return [
            ProjectShortRow.model_validate(row.model_dump(exclude={"body"}))
            for row in rows[offset : offset + limit]
        ]

    async def count(self, spec: ListingSpecification) -> int:
        return sum(
            1 for p in self._store.projects.values() if spec.matches(self._to_row(p))
        )

    async def save(self, project: Project) -> Project:
        self._store.projects[project.id] = project
        return project

    async def delete(self, project_id: ProjectId) -> None:
        self._store.delete_project(project_id)
