import logging
from typing import Any, Iterable, Mapping, Optional, TypeVar

from paginator.core.exceptions import InvalidArgument
from paginator.core.models.common.pagination import Page, PaginationMetadata
from paginator.core.services.count import count_query
from paginator.core.services.pagination import build_metadata, parse_page_number
from paginator.core.services.validation import require_positive_integer
from paginator.core.services.window import apply_window
from paginator.core.settings import MetaSettings

logger = logging.getLogger(__name__)

Q = TypeVar("Q")
T = TypeVar("T")


class Paginator:
    """Window and metadata helpers bound to configured page sizes"""

    def __init__(self, settings: Optional[MetaSettings] = None):
        self.settings = settings or MetaSettings()

    def resolve_page_size(self, page_size: Optional[int] = None) -> int:
        if page_size is None:
            return self.settings.default_page_size

        require_positive_integer("page_size", page_size)
        max_page_size = self.settings.max_page_size
        if max_page_size is not None and page_size > max_page_size:
            raise InvalidArgument(
                f"page_size must be at most {max_page_size}, got {page_size}"
            )
        return page_size

    def paginate(self, query: Q, page_number: int, page_size: Optional[int] = None) -> Q:
        """Attach the page's offset and limit to ``query``"""
        return apply_window(
            query,
            page_number,
            self.resolve_page_size(page_size),
            dialect=self.settings.sql_dialect,
        )

    def paginate_helper(
        self, page_number: int, total_items: int, page_size: Optional[int] = None
    ) -> PaginationMetadata:
        """Build navigation metadata for ``page_number`` out of ``total_items`` rows"""
        return build_metadata(
            page_number,
            self.resolve_page_size(page_size),
            total_items,
            allow_empty=self.settings.allow_empty_total,
        )

    def count(self, query: Any) -> Any:
        return count_query(query, dialect=self.settings.sql_dialect)

    def page_number_from(self, params: Mapping[str, Any]) -> int:
        """Read the page number from request parameters, defaulting to the first page"""
        return parse_page_number(params.get(self.settings.page_param))

    def page(
        self,
        items: Iterable[T],
        page_number: int,
        total_items: int,
        page_size: Optional[int] = None,
    ) -> Page[T]:
        items = list(items)
        pagination = self.paginate_helper(page_number, total_items, page_size)
        logger.debug(
            f"Built page {pagination.current_page_number}/{pagination.num_pages} "
            f"with {len(items)} items"
        )
        return Page(items=items, pagination=pagination)
