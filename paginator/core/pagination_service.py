# paginator/core/pagination_service.py

import logging
from typing import Iterable, Iterator, List, Optional, TypeVar

from ..interfaces.pagination import PaginationServiceInterface, PaginationOptions
from ..models.page import Page
from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")

class PaginationService(PaginationServiceInterface):
    """
    Paginates in-memory collections.

    Every operation turns its source into a list once before looking at it, so
    generators and other one-shot iterables are only consumed a single time.
    """

    def __init__(self, options: Optional[PaginationOptions] = None):
        self.options = options or PaginationOptions()
        logger.debug(f"PaginationService initialized with default page size {self.options.default_page_size}")

    def get_page(self, source: Iterable[T], page_number: int, page_size: int) -> List[T]:
        try:
            items = list(source)
            logger.debug(f"Materialized {len(items)} items for page {page_number} (size {page_size})")
            return self._slice(items, page_number, page_size)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.error(f"Failed to paginate data: {e}", exc_info=True)
            raise InvalidArgumentError(f"Failed to paginate data. Exception given: {e!r}") from e

    def get_page_total(self, source: Iterable[T], page_size: int) -> int:
        try:
            items = list(source)
            logger.debug(f"Materialized {len(items)} items for page total (size {page_size})")
            return self._count_pages(len(items), page_size)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.error(f"Failed to calculate page total: {e}", exc_info=True)
            raise InvalidArgumentError(f"Failed to calculate page total from data. Exception given: {e!r}") from e

    def paginate(self, source: Iterable[T], page_number: int = 1, page_size: Optional[int] = None) -> Page[T]:
        if page_size is None:
            page_size = self.options.default_page_size

        try:
            items = list(source)
            if not items:
                return Page(items=[], total=0, pages=0, page=page_number, per_page=page_size)
            page_items = self._slice(items, page_number, page_size)
            pages = self._count_pages(len(items), page_size)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.error(f"Failed to paginate data: {e}", exc_info=True)
            raise InvalidArgumentError(f"Failed to paginate data. Exception given: {e!r}") from e

        return Page(items=page_items, total=len(items), pages=pages, page=page_number, per_page=page_size)

    def iter_pages(self, source: Iterable[T], page_size: Optional[int] = None) -> Iterator[Page[T]]:
        if page_size is None:
            page_size = self.options.default_page_size

        try:
            items = list(source)
            pages = self._count_pages(len(items), page_size)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.error(f"Failed to paginate data: {e}", exc_info=True)
            raise InvalidArgumentError(f"Failed to paginate data. Exception given: {e!r}") from e

        logger.debug(f"Walking {pages} pages over {len(items)} items")
        return self._walk_pages(items, pages, page_size)

    def _walk_pages(self, items: List[T], pages: int, page_size: int) -> Iterator[Page[T]]:
        """Yield each page of an already materialized and validated list."""
        for page_number in range(1, pages + 1):
            yield Page(
                items=self._slice(items, page_number, page_size),
                total=len(items),
                pages=pages,
                page=page_number,
                per_page=page_size,
            )

    def _slice(self, items: List[T], page_number: int, page_size: int) -> List[T]:
        """Return one page of an already materialized list."""
        # An empty collection has no pages to validate against
        if not items:
            return []

        if page_number < 1 or page_size < 1:
            raise InvalidArgumentError("Page number and page size must be greater than zero.")

        skip = (page_number - 1) * page_size
        return items[skip:skip + page_size]

    def _count_pages(self, count: int, page_size: int) -> int:
        """Ceiling division of count by page_size."""
        if page_size < 1:
            raise InvalidArgumentError("Page size must be greater than zero.")
        return (count + page_size - 1) // page_size
