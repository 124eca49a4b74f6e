"""Translation of listing specifications into SQL clauses.

Each listing query declares which column (or joined expression) backs each
record attribute a predicate may name. The same specification that filters
in-memory records then filters and orders the SQL statement.
"""

from enum import Enum
from typing import Any, Mapping

from sqlalchemy import ColumnElement, Select

from learnhub.domain.query import (
    TIE_BREAK_FIELD,
    Between,
    ContainsIgnoreCase,
    Equals,
    ListingSpecification,
    Predicate,
)

ColumnMap = Mapping[str, ColumnElement[Any]]


def predicate_clause(predicate: Predicate, columns: ColumnMap) -> ColumnElement[bool]:
    """Build the WHERE clause for a single predicate.

    Args:
        predicate: Predicate to translate
        columns: Record attribute name to SQL expression

    Returns:
        Boolean SQL expression

    Raises:
        KeyError: If the listing has no column for the predicate's field
        TypeError: If the predicate kind has no SQL translation
    """
    column = columns[predicate.field]

    if isinstance(predicate, Between):
        return column.between(predicate.low, predicate.high)
    if isinstance(predicate, Equals):
        value = predicate.value
        if isinstance(value, Enum):
            value = value.value
        return column == value
    if isinstance(predicate, ContainsIgnoreCase):
        # Escapes % and _ typed by the user
        return column.icontains(predicate.text, autoescape=True)

    raise TypeError(f"Unsupported predicate: {type(predicate).__name__}")


def apply_filters(stmt: Select, spec: ListingSpecification, columns: ColumnMap) -> Select:
    """AND every predicate of the specification onto a statement."""
    clauses = [predicate_clause(p, columns) for p in spec.predicates]
    if clauses:
        stmt = stmt.where(*clauses)
    return stmt


def apply_ordering(
    stmt: Select, spec: ListingSpecification, columns: ColumnMap
) -> Select:
    """Order by the specification's field, then by id ascending."""
    column = columns[spec.ordering.field]
    primary = column.desc() if spec.ordering.descending else column.asc()
    return stmt.order_by(primary, columns[TIE_BREAK_FIELD].asc())
