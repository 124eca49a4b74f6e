"""Project response domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from learnhub.domain.error import NotFoundError
from learnhub.domain.model.project import ProjectResponse
from learnhub.domain.model.row import ProjectResponseRow
from learnhub.domain.query import Page, PageRequest
from learnhub.domain.repository import ProjectResponseRepository
from learnhub.domain.value import (
    Caller,
    ProjectId,
    ProjectResponseId,
    SortDirection,
)

from .authorization import require_owner_or_admin
from .base import Service
from .project_service import ProjectService
from .user_service import UserService


class ProjectResponseService(Service):
    """Domain service for responses to projects."""

    def __init__(
        self,
        response_repository: ProjectResponseRepository,
        project_service: ProjectService,
        user_service: UserService,
    ) -> None:
        self.response_repository = response_repository
        self.project_service = project_service
        self.user_service = user_service

    async def create_response(
        self,
        caller: Caller,
        project_id: ProjectId,
        body: str,
        payment_number: Optional[str] = None,
    ) -> ProjectResponse:
        """Respond to a project.

        Any registered user may respond. The response starts unverified.

        Raises:
            NotFoundError: If the caller is not registered or the project is unknown
        """
        with logfire.span(
            "project_response_service.create_response",
            project_id=str(project_id),
            user_id=caller.user_id,
        ):
            await self.user_service.get_user(caller.user_id)
            await self.project_service.get_project(project_id)

            response = ProjectResponse(
                id=ProjectResponseId(uuid4()),
                project_id=project_id,
                responder_id=caller.user_id,
                body=body,
                payment_number=payment_number,
            )
            saved = await self.response_repository.save(response)
            logfire.info(
                "Project response created",
                response_id=str(saved.id),
                project_id=str(project_id),
            )
            return saved

    async def get_response(self, response_id: ProjectResponseId) -> ProjectResponseRow:
        """Get a response with its responder's display data.

        Raises:
            NotFoundError: If the response does not exist
        """
        row = await self.response_repository.find_row(response_id)
        if not row:
            logfire.warn("Project response not found", response_id=str(response_id))
            raise NotFoundError("Project response", str(response_id))
        return row

    async def list_responses(
        self,
        project_id: ProjectId,
        is_verified: Optional[bool],
        direction: SortDirection,
        page: int,
        size: int,
    ) -> Page[ProjectResponseRow]:
        """List responses to a project, oldest first by default.

        Raises:
            InvalidArgumentError: If page < 0 or size <= 0
            NotFoundError: If the project does not exist
        """
        request = PageRequest.of(page, size)
        with logfire.span(
            "project_response_service.list_responses",
            project_id=str(project_id),
            is_verified=is_verified,
        ):
            await self.project_service.get_project(project_id)
            items = await self.response_repository.find_page(
                project_id,
                is_verified,
                direction,
                limit=request.size,
                offset=request.offset,
            )
            total = await self.response_repository.count(project_id, is_verified)
            return Page(
                items=items, total=total, page=request.page, size=request.size
            )

    async def verify_response(
        self, caller: Caller, response_id: ProjectResponseId, verified: bool
    ) -> ProjectResponse:
        """Set a response's verification state.

        Requesting the state the response is already in changes nothing.

        Raises:
            NotFoundError: If the response does not exist
            ForbiddenError: If the caller neither owns the project nor is an admin
        """
        with logfire.span(
            "project_response_service.verify_response",
            response_id=str(response_id),
            verified=verified,
        ):
            response = await self.response_repository.find_by_id(response_id)
            if not response:
                logfire.warn(
                    "Project response not found", response_id=str(response_id)
                )
                raise NotFoundError("Project response", str(response_id))

            project = await self.project_service.get_project(response.project_id)
            require_owner_or_admin(
                project.owner_id, caller, "verify", "project response"
            )
            if response.is_verified == verified:
                return response

            saved = await self.response_repository.save(
                response.model_copy(update={"is_verified": verified})
            )
            logfire.info(
                "Project response verification changed",
                response_id=str(response_id),
                verified=verified,
            )
            return saved
