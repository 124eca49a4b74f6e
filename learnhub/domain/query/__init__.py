"""Listing query building blocks: predicates, specifications and pages."""

from learnhub.domain.query.page import Page, PageRequest
from learnhub.domain.query.predicate import (
    Between,
    ContainsIgnoreCase,
    Equals,
    Predicate,
)
from learnhub.domain.query.specification import (
    TIE_BREAK_FIELD,
    ContentCriteria,
    ListingSpecification,
    Ordering,
    ProjectCriteria,
    compose_content_spec,
    compose_project_spec,
)

__all__ = [
    "Page",
    "PageRequest",
    "Predicate",
    "Between",
    "Equals",
    "ContainsIgnoreCase",
    "ListingSpecification",
    "Ordering",
    "ContentCriteria",
    "ProjectCriteria",
    "TIE_BREAK_FIELD",
    "compose_content_spec",
    "compose_project_spec",
]
