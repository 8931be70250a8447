"""Navigation metadata for rendering "previous"/"next" links.

Example template usage:

    {% if paginator.previous_page_number %}
      <a href="?page=1">First</a>
      <a href="?page={{ paginator.previous_page_number }}">Previous</a>
    {% endif %}

    Page {{ paginator.current_page_number }} of {{ paginator.num_pages }}.

    {% if paginator.next_page_number %}
      <a href="?page={{ paginator.next_page_number }}">Next</a>
      <a href="?page={{ paginator.num_pages }}">Last</a>
    {% endif %}
"""

import logging
from typing import Any

from paginator.core.exceptions import InvalidArgument
from paginator.core.models.common.pagination import PaginationMetadata
from paginator.core.services.validation import require_positive_integer

logger = logging.getLogger(__name__)


def build_metadata(
    page_number: int,
    page_size: int,
    total_items: int,
    *,
    allow_empty: bool = False,
) -> PaginationMetadata:
    """Build the pagination struct for a page of ``total_items`` rows.

    ``num_pages`` counts full pages only. A page beyond the last one is not an
    error: it simply has no next page.
    """
    require_positive_integer("page_number", page_number)
    require_positive_integer("page_size", page_size)
    empty = allow_empty and type(total_items) is int and total_items == 0
    if not empty:
        require_positive_integer("total_items", total_items)

    num_pages = total_items // page_size
    next_page_number = page_number + 1
    previous_page_number = page_number - 1

    if page_number > num_pages:
        logger.debug(f"Page {page_number} requested but only {num_pages} pages exist")

    return PaginationMetadata(
        current_page_number=page_number,
        next_page_number=next_page_number if next_page_number <= num_pages else None,
        previous_page_number=previous_page_number if previous_page_number >= 1 else None,
        num_pages=num_pages,
    )


def parse_page_number(raw: Any, default: int = 1) -> int:
    """Parse a page request parameter, falling back to ``default`` when missing."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return require_positive_integer("default", default)
    if isinstance(raw, str):
        try:
            raw = int(raw.strip(), 10)
        except ValueError:
            raise InvalidArgument(f"page must be an integer, got {raw!r}") from None
    return require_positive_integer("page", raw)
