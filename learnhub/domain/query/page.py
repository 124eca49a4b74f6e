"""Paginated results."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field

from learnhub.domain.error import InvalidArgumentError

T = TypeVar("T")


class PageRequest(BaseModel):
    """Zero-based page number and page size."""

    page: int = 0
    size: int = 10

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(cls, page: int, size: int) -> "PageRequest":
        """Build a page request, rejecting negative pages and empty sizes.

        Raises:
            InvalidArgumentError: If page < 0 or size <= 0
        """
        if page < 0:
            raise InvalidArgumentError("Page number must be non-negative")
        if size <= 0:
            raise InvalidArgumentError("Page size must be positive")
        return cls(page=page, size=size)


class Page(BaseModel, Generic[T]):
    """One page of an ordered result plus the total number of matches.

    ``total`` depends only on the filters, never on ``page`` or ``size``.
    """

    items: list[T] = Field(default_factory=list)
    total: int
    page: int
    size: int

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0
