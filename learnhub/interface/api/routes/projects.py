"""Project and project response routes."""

from datetime import date
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from learnhub.application.usecase.auth import ResolveCallerUseCase
from learnhub.application.usecase.project import (
    CreateProjectRequest,
    CreateProjectResponse,
    CreateProjectUseCase,
    DeleteProjectRequest,
    DeleteProjectUseCase,
    GetProjectRequest,
    GetProjectUseCase,
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
    UpdatePriorityRequest,
    UpdatePriorityUseCase,
    UpdateProjectRequest,
    UpdateProjectUseCase,
)
from learnhub.application.usecase.project_response import (
    CreateResponseRequest,
    CreateResponseResponse,
    CreateResponseUseCase,
    GetResponseRequest,
    GetResponseUseCase,
    ListResponsesRequest,
    ListResponsesResponse,
    ListResponsesUseCase,
    VerifyResponseRequest,
    VerifyResponseResponse,
    VerifyResponseUseCase,
)
from learnhub.domain.model import ProjectFullRow, ProjectResponseRow
from learnhub.domain.value import (
    ProjectId,
    ProjectResponseId,
    ProjectSortCategory,
    ProjectType,
    SortDirection,
)
from learnhub.interface.api.auth import require_caller

router = APIRouter(prefix="/v1/projects", tags=["projects"], route_class=DishkaRoute)


class ProjectAPIRequest(BaseModel):
    """API request for creating or replacing a project."""

    title: str = Field(min_length=1, max_length=255)
    body: str = Field(min_length=1)
    type: ProjectType


class PriorityAPIRequest(BaseModel):
    """API request for reprioritizing a project."""

    priority: int


class ResponseAPIRequest(BaseModel):
    """API request for responding to a project."""

    body: str = Field(min_length=1)
    payment_number: str | None = Field(default=None, max_length=20)


# Response routes come first so "/responses/{id}" is never read as a project ID


@router.get("/responses/{response_id}", response_model=ProjectResponseRow)
async def get_response(
    response_id: UUID,
    get_response_use_case: FromDishka[GetResponseUseCase],
) -> ProjectResponseRow:
    """Get one response to a project."""
    return await get_response_use_case.execute(
        GetResponseRequest(response_id=ProjectResponseId(response_id))
    )


@router.put("/responses/{response_id}", response_model=VerifyResponseResponse)
async def verify_response(
    response_id: UUID,
    verify_response_use_case: FromDishka[VerifyResponseUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    verify: bool = Query(),
    authorization: str | None = Header(default=None),
) -> VerifyResponseResponse:
    """Set whether a response is verified. Project owner or admin only.

    Example:
        PUT /v1/projects/responses/123e4567-e89b-12d3-a456-426614174000?verify=true
    """
    caller = await require_caller(authorization, resolve_caller)
    return await verify_response_use_case.execute(
        VerifyResponseRequest(
            caller=caller,
            response_id=ProjectResponseId(response_id),
            verified=verify,
        )
    )


@router.get("", response_model=ListProjectsResponse)
async def list_projects(
    list_projects_use_case: FromDishka[ListProjectsUseCase],
    start_date: date | None = Query(default=None),
    end_date: date | None = Query(default=None),
    zone_id: str | None = Query(default=None),
    author_id: str | None = Query(default=None),
    type: ProjectType | None = Query(default=None),
    title: str | None = Query(default=None),
    author_name: str | None = Query(default=None),
    sort_type: ProjectSortCategory = Query(default=ProjectSortCategory.PRIORITY),
    sort_direction: SortDirection = Query(default=SortDirection.DESC),
    page: int = Query(default=0),
    size: int = Query(default=10),
) -> ListProjectsResponse:
    """List projects, highest priority first by default."""
    return await list_projects_use_case.execute(
        ListProjectsRequest(
            start_date=start_date,
            end_date=end_date,
            zone_id=zone_id,
            author_id=author_id,
            type=type,
            title=title,
            author_name=author_name,
            sort_type=sort_type,
            sort_direction=sort_direction,
            page=page,
            size=size,
        )
    )


@router.post(
    "", response_model=CreateProjectResponse, status_code=status.HTTP_201_CREATED
)
async def create_project(
    request: ProjectAPIRequest,
    create_project_use_case: FromDishka[CreateProjectUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> CreateProjectResponse:
    """Post a project. Requires the admin scope."""
    caller = await require_caller(authorization, resolve_caller)
    return await create_project_use_case.execute(
        CreateProjectRequest(
            caller=caller, title=request.title, body=request.body, type=request.type
        )
    )


@router.get("/{project_id}", response_model=ProjectFullRow)
async def get_project(
    project_id: UUID,
    get_project_use_case: FromDishka[GetProjectUseCase],
) -> ProjectFullRow:
    """Get a project with its body."""
    return await get_project_use_case.execute(
        GetProjectRequest(project_id=ProjectId(project_id))
    )


@router.put("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_project(
    project_id: UUID,
    request: ProjectAPIRequest,
    update_project_use_case: FromDishka[UpdateProjectUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """Replace a project. Owner or admin only."""
    caller = await require_caller(authorization, resolve_caller)
    await update_project_use_case.execute(
        UpdateProjectRequest(
            caller=caller,
            project_id=ProjectId(project_id),
            title=request.title,
            body=request.body,
            type=request.type,
        )
    )


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: UUID,
    delete_project_use_case: FromDishka[DeleteProjectUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """Delete a project and its responses. Owner or admin only."""
    caller = await require_caller(authorization, resolve_caller)
    await delete_project_use_case.execute(
        DeleteProjectRequest(caller=caller, project_id=ProjectId(project_id))
    )


@router.put("/{project_id}/priority", status_code=status.HTTP_204_NO_CONTENT)
async def update_priority(
    project_id: UUID,
    request: PriorityAPIRequest,
    update_priority_use_case: FromDishka[UpdatePriorityUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """Reprioritize a project. Requires the admin scope."""
    caller = await require_caller(authorization, resolve_caller)
    await update_priority_use_case.execute(
        UpdatePriorityRequest(
            caller=caller, project_id=ProjectId(project_id), priority=request.priority
        )
    )


@router.get("/{project_id}/responses", response_model=ListResponsesResponse)
async def list_responses(
    project_id: UUID,
    list_responses_use_case: FromDishka[ListResponsesUseCase],
    is_verified: bool | None = Query(default=None),
    sort_direction: SortDirection = Query(default=SortDirection.ASC),
    page: int = Query(default=0),
    size: int = Query(default=10),
) -> ListResponsesResponse:
    """List responses to a project, oldest first by default."""
    return await list_responses_use_case.execute(
        ListResponsesRequest(
            project_id=ProjectId(project_id),
            is_verified=is_verified,
            sort_direction=sort_direction,
            page=page,
            size=size,
        )
    )


@router.post(
    "/{project_id}/responses",
    response_model=CreateResponseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_response(
    project_id: UUID,
    request: ResponseAPIRequest,
    create_response_use_case: FromDishka[CreateResponseUseCase],
    resolve_caller: FromDishka[ResolveCallerUseCase],
    authorization: str | None = Header(default=None),
) -> CreateResponseResponse:
    """Respond to a project. Any registered user may respond."""
    caller = await require_caller(authorization, resolve_caller)
    return await create_response_use_case.execute(
        CreateResponseRequest(
            caller=caller,
            project_id=ProjectId(project_id),
            body=request.body,
            payment_number=request.payment_number,
        )
    )
