"""Project response use cases."""

from .create_response import (
    CreateResponseRequest,
    CreateResponseResponse,
    CreateResponseUseCase,
)
from .get_response import GetResponseRequest, GetResponseUseCase
from .list_responses import (
    ListResponsesRequest,
    ListResponsesResponse,
    ListResponsesUseCase,
)
from .verify_response import (
    VerifyResponseRequest,
    VerifyResponseResponse,
    VerifyResponseUseCase,
)

__all__ = [
    "CreateResponseRequest",
    "CreateResponseResponse",
    "CreateResponseUseCase",
    "GetResponseRequest",
    "GetResponseUseCase",
    "ListResponsesRequest",
    "ListResponsesResponse",
    "ListResponsesUseCase",
    "VerifyResponseRequest",
    "VerifyResponseResponse",
    "VerifyResponseUseCase",
]
