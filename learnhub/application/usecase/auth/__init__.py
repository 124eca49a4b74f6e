"""Authentication use cases."""

from .register import RegisterRequest, RegisterResponse, RegisterUseCase
from .resolve_caller import ResolveCallerRequest, ResolveCallerUseCase

__all__ = [
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
    "ResolveCallerRequest",
    "ResolveCallerUseCase",
]
