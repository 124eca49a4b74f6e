"""Content use cases."""

from .create_content import (
    CreateContentRequest,
    CreateContentResponse,
    CreateContentUseCase,
)
from .delete_content import DeleteContentRequest, DeleteContentUseCase
from .get_content import GetContentRequest, GetContentUseCase
from .list_contents import (
    ListContentsRequest,
    ListContentsResponse,
    ListContentsUseCase,
)
from .update_content import UpdateContentRequest, UpdateContentUseCase

__all__ = [
    "CreateContentRequest",
    "CreateContentResponse",
    "CreateContentUseCase",
    "DeleteContentRequest",
    "DeleteContentUseCase",
    "GetContentRequest",
    "GetContentUseCase",
    "ListContentsRequest",
    "ListContentsResponse",
    "ListContentsUseCase",
    "UpdateContentRequest",
    "UpdateContentUseCase",
]
