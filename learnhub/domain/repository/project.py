"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from learnhub.domain.model.project import Project
from learnhub.domain.model.row import ProjectFullRow, ProjectShortRow
from learnhub.domain.query import ListingSpecification
from learnhub.domain.value import ProjectId


class ProjectRepository(ABC):
    """Repository for Project aggregate."""

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID.

        Args:
            project_id: The project's unique identifier

        Returns:
            The project if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_full(self, project_id: ProjectId) -> Optional[ProjectFullRow]:
        """Find a project joined with its author's display data.

        Args:
            project_id: The project's unique identifier

        Returns:
            The project detail row if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page(
        self, spec: ListingSpecification, limit: int, offset: int
    ) -> list[ProjectShortRow]:
        """Find one page of project rows matching a specification.

        Args:
            spec: Filters and ordering
            limit: Maximum number of rows to return
            offset: Number of rows to skip

        Returns:
            Project rows ordered by the specification, then by ID ascending
        """
        pass

    @abstractmethod
    async def count(self, spec: ListingSpecification) -> int:
        """Count projects matching a specification's filters."""
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Save a project (create or update).

        Args:
            project: The project to save

        Returns:
            The saved project
        """
        pass

    @abstractmethod
    async def delete(self, project_id: ProjectId) -> None:
        """Delete a project and its responses."""
        pass
