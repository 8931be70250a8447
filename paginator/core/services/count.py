from typing import Any, Optional

from sqlglot import exp
from sqlalchemy import Select, func, select
from sqlalchemy.orm import Query as OrmQuery
from sqlalchemy.sql.selectable import CompoundSelect

from paginator.core.exceptions import InvalidArgument
from paginator.core.services.window import parse_sql


def count_query(query: Any, *, dialect: Optional[str] = None) -> Any:
    """Build the total-count query for the same logical, unpaginated query.

    Ordering is dropped; filters, joins and grouping are kept.
    """
    if isinstance(query, (Select, CompoundSelect)):
        inner = query.order_by(None).subquery("paginated")
        return select(func.count()).select_from(inner)
    if isinstance(query, OrmQuery):
        return count_query(query.order_by(None).statement)
    if isinstance(query, exp.Query):
        inner = query.copy()
        inner.set("order", None)
        return exp.select(exp.Count(this=exp.Star())).from_(inner.subquery("paginated"))
    if isinstance(query, str):
        return count_query(parse_sql(query, dialect)).sql(dialect=dialect)
    raise InvalidArgument(f"Cannot count a {type(query).__name__}")
