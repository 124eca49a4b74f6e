"""Project use cases."""

from .create_project import (
    CreateProjectRequest,
    CreateProjectResponse,
    CreateProjectUseCase,
)
from .delete_project import DeleteProjectRequest, DeleteProjectUseCase
from .get_project import GetProjectRequest, GetProjectUseCase
from .list_projects import (
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
)
from .update_priority import UpdatePriorityRequest, UpdatePriorityUseCase
from .update_project import UpdateProjectRequest, UpdateProjectUseCase

__all__ = [
    "CreateProjectRequest",
    "CreateProjectResponse",
    "CreateProjectUseCase",
    "DeleteProjectRequest",
    "DeleteProjectUseCase",
    "GetProjectRequest",
    "GetProjectUseCase",
    "ListProjectsRequest",
    "ListProjectsResponse",
    "ListProjectsUseCase",
    "UpdatePriorityRequest",
    "UpdatePriorityUseCase",
    "UpdateProjectRequest",
    "UpdateProjectUseCase",
]
