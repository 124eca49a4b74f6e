"""Project response repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from learnhub.domain.model.project import ProjectResponse
from learnhub.domain.model.row import ProjectResponseRow
from learnhub.domain.value import ProjectId, ProjectResponseId, SortDirection


class ProjectResponseRepository(ABC):
    """Repository for ProjectResponse entity."""

    @abstractmethod
    async def find_by_id(
        self, response_id: ProjectResponseId
    ) -> Optional[ProjectResponse]:
        """Find a response by ID.

        Args:
            response_id: The response's unique identifier

        Returns:
            The response if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_row(
        self, response_id: ProjectResponseId
    ) -> Optional[ProjectResponseRow]:
        """Find a response joined with its responder's display data."""
        pass

    @abstractmethod
    async def find_page(
        self,
        project_id: ProjectId,
        is_verified: Optional[bool],
        direction: SortDirection,
        limit: int,
        offset: int,
    ) -> list[ProjectResponseRow]:
        """Find one page of responses to a project.

        Args:
            project_id: The project's ID
            is_verified: Only responses in this verification state (None for all)
            direction: Direction of the created_at ordering
            limit: Maximum number of rows to return
            offset: Number of rows to skip

        Returns:
            Response rows ordered by created_at, then by ID ascending
        """
        pass

    @abstractmethod
    async def count(self, project_id: ProjectId, is_verified: Optional[bool]) -> int:
        """Count responses to a project with the same filters as ``find_page``."""
        pass

    @abstractmethod
    async def save(self, response: ProjectResponse) -> ProjectResponse:
        """Save a response (create or update).

        Args:
            response: The response to save

        Returns:
            The saved response
        """
        pass
