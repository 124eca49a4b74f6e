"""Project domain service."""

from uuid import uuid4

import logfire

from learnhub.domain.error import NotFoundError
from learnhub.domain.model.project import Project
from learnhub.domain.model.row import ProjectFullRow, ProjectShortRow
from learnhub.domain.query import ListingSpecification, Page, PageRequest
from learnhub.domain.repository import ProjectRepository
from learnhub.domain.value import Caller, ProjectId, ProjectType

from .authorization import require_admin, require_owner_or_admin
from .base import Service
from .user_service import UserService


class ProjectService(Service):
    """Domain service for project operations and project listings."""

    def __init__(
        self, project_repository: ProjectRepository, user_service: UserService
    ) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
            user_service: User domain service
        """
        self.project_repository = project_repository
        self.user_service = user_service

    async def get_project(self, project_id: ProjectId) -> Project:
        """Get a project by ID.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.project_repository.find_by_id(project_id)
        if not project:
            logfire.warn("Project not found", project_id=str(project_id))
            raise NotFoundError("Project", str(project_id))
        return project

    async def get_project_detail(self, project_id: ProjectId) -> ProjectFullRow:
        """Get a project with its author's display data.

        Raises:
            NotFoundError: If the project does not exist
        """
        with logfire.span(
            "project_service.get_project_detail", project_id=str(project_id)
        ):
            row = await self.project_repository.find_full(project_id)
            if not row:
                logfire.warn("Project not found", project_id=str(project_id))
                raise NotFoundError("Project", str(project_id))
            return row

    async def create_project(
        self, caller: Caller, title: str, body: str, type: ProjectType
    ) -> Project:
        """Create a project owned by the caller.

        Raises:
            ForbiddenError: If the caller is not an admin
            NotFoundError: If the caller is not registered
        """
        with logfire.span("project_service.create_project", user_id=caller.user_id):
            require_admin(caller, "create", "project")
            await self.user_service.get_user(caller.user_id)

            project = Project(
                id=ProjectId(uuid4()),
                owner_id=caller.user_id,
                title=title,
                body=body,
                type=type,
            )
            saved = await self.project_repository.save(project)
            logfire.info("Project created", project_id=str(saved.id))
            return saved

    async def update_project(
        self,
        caller: Caller,
        project_id: ProjectId,
        title: str,
        body: str,
        type: ProjectType,
    ) -> Project:
        """Replace the editable fields of a project. Priority is kept.

        Raises:
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller is neither owner nor admin
        """
        with logfire.span(
            "project_service.update_project",
            project_id=str(project_id),
            user_id=caller.user_id,
        ):
            project = await self.get_project(project_id)
            require_owner_or_admin(project.owner_id, caller, "update", "project")

            updated = Project.model_validate(
                {**project.model_dump(), "title": title, "body": body, "type": type}
            )
            saved = await self.project_repository.save(updated)
            logfire.info("Project updated", project_id=str(project_id))
            return saved

    async def delete_project(self, caller: Caller, project_id: ProjectId) -> None:
        """Delete a project.

        Raises:
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller is neither owner nor admin
        """
        with logfire.span(
            "project_service.delete_project",
            project_id=str(project_id),
            user_id=caller.user_id,
        ):
            project = await self.get_project(project_id)
            require_owner_or_admin(project.owner_id, caller, "delete", "project")
            await self.project_repository.delete(project_id)
            logfire.info("Project deleted", project_id=str(project_id))

    async def update_priority(
        self, caller: Caller, project_id: ProjectId, priority: int
    ) -> Project:
        """Reprioritize a project.

        Raises:
            ForbiddenError: If the caller is not an admin
            NotFoundError: If the project does not exist
        """
        with logfire.span(
            "project_service.update_priority",
            project_id=str(project_id),
            priority=priority,
        ):
            require_admin(caller, "reprioritize", "project")
            project = await self.get_project(project_id)

            saved = await self.project_repository.save(
                project.model_copy(update={"priority": priority})
            )
            logfire.info(
                "Project priority updated", project_id=str(project_id), priority=priority
            )
            return saved

    async def list_projects(
        self, spec: ListingSpecification, page: int, size: int
    ) -> Page[ProjectShortRow]:
        """Execute a project listing.

        Raises:
            InvalidArgumentError: If page < 0 or size <= 0
        """
        request = PageRequest.of(page, size)
        with logfire.span(
            "project_service.list_projects",
            page=request.page,
            size=request.size,
            predicates=len(spec.predicates),
            order_by=spec.ordering.field,
        ):
            items = await self.project_repository.find_page(
                spec, limit=request.size, offset=request.offset
            )
            total = await self.project_repository.count(spec)
            logfire.info("Projects listed", returned=len(items), total=total)
            return Page(
                items=items, total=total, page=request.page, size=request.size
            )
