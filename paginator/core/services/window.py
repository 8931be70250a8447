"""Offset/limit windows over composable queries.

A page is turned into ``OFFSET (page_number - 1) * page_size LIMIT page_size``
and composed onto the caller's query. Filtering and ordering already present
on the query are kept; the query is never executed here.
"""

import logging
from typing import Any, Optional, Protocol, TypeVar, runtime_checkable

import sqlglot
from sqlglot import exp
from sqlalchemy.orm import Query as OrmQuery
from sqlalchemy.sql.selectable import GenerativeSelect

from paginator.core.exceptions import InvalidArgument
from paginator.core.services.validation import require_positive_integer

logger = logging.getLogger(__name__)

Q = TypeVar("Q")


@runtime_checkable
class Windowable(Protocol):
    """A query value that accepts offset and limit directives.

    Both methods return a new value of the same interface and leave the
    receiver untouched.
    """

    def with_offset(self, offset: int) -> "Windowable": ...

    def with_limit(self, limit: int) -> "Windowable": ...


def window_bounds(page_number: int, page_size: int) -> tuple[int, int]:
    """Return ``(offset, limit)`` for a 1-based page."""
    require_positive_integer("page_number", page_number)
    require_positive_integer("page_size", page_size)
    return (page_number - 1) * page_size, page_size


def parse_sql(sql: str, dialect: Optional[str] = None) -> exp.Query:
    parsed = sqlglot.parse_one(sql, read=dialect)
    if not isinstance(parsed, exp.Query):
        raise InvalidArgument(f"SQL is not a query: {sql!r}")
    return parsed


def apply_window(query: Q, page_number: int, page_size: int, *, dialect: Optional[str] = None) -> Q:
    """Paginate a query by adding offset and limit expressions.

    Example:

        stmt = select(User).order_by(User.created_at)
        users = session.scalars(apply_window(stmt, page_number, 20)).all()

    SQL strings are parsed with sqlglot and rendered back in ``dialect``.
    """
    offset_value, limit_value = window_bounds(page_number, page_size)
    logger.debug(
        f"Windowing {type(query).__name__} for page {page_number}: "
        f"offset={offset_value} limit={limit_value}"
    )
    return _compose(query, offset_value, limit_value, dialect)


def _compose(query: Any, offset_value: int, limit_value: int, dialect: Optional[str]) -> Any:
    if isinstance(query, Windowable):
        return query.with_offset(offset_value).with_limit(limit_value)
    if isinstance(query, (GenerativeSelect, OrmQuery)):
        return query.offset(offset_value).limit(limit_value)
    if isinstance(query, exp.Query):
        # sqlglot builders copy by default
        return query.offset(offset_value).limit(limit_value)
    if isinstance(query, str):
        windowed = _compose(parse_sql(query, dialect), offset_value, limit_value, dialect)
        return windowed.sql(dialect=dialect)
    raise InvalidArgument(f"Cannot paginate a {type(query).__name__}")
