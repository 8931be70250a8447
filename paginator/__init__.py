"""Pagination library for SQLAlchemy and sqlglot queries."""

import logging

from .core.exceptions import InvalidArgument
from .core.models.common.pagination import Page, PaginationMetadata
from .core.services.count import count_query
from .core.services.pagination import build_metadata, parse_page_number
from .core.services.paginator import Paginator
from .core.services.window import Windowable, apply_window
from .core.settings import MetaSettings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidArgument",
    "MetaSettings",
    "Page",
    "PaginationMetadata",
    "Paginator",
    "Windowable",
    "apply_window",
    "build_metadata",
    "count_query",
    "parse_page_number",
]
