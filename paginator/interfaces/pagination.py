# paginator/interfaces/pagination.py

from typing import Iterable, Iterator, List, Optional, TypeVar
from dataclasses import dataclass

from ..models.page import Page

T = TypeVar("T")

@dataclass
class PaginationOptions:
    """Configuration options for pagination."""
    default_page_size: int = 10

class PaginationServiceInterface:
    """Interface for paginating in-memory collections."""

    def get_page(self, source: Iterable[T], page_number: int, page_size: int) -> List[T]:
        """
        Retrieve a single page of items from a collection.

        Args:
            source: The items to paginate. Consumed exactly once.
            page_number: The page to retrieve, 1 being the first page.
            page_size: The number of items per page.

        Returns:
            The items on the requested page. Empty if the page is out of range
            or the source is empty.

        Raises:
            InvalidArgumentError: If page_number or page_size is less than 1 for a
                                  non-empty source, or if paginating fails.
        """
        raise NotImplementedError("Subclasses must implement this method")

    def get_page_total(self, source: Iterable[T], page_size: int) -> int:
        """
        Calculate how many pages are needed to hold every item in a collection.

        Args:
            source: The items to paginate. Consumed exactly once.
            page_size: The number of items per page.

        Returns:
            The total number of pages, 0 for an empty source.

        Raises:
            InvalidArgumentError: If page_size is less than 1, or if counting fails.
        """
        raise NotImplementedError("Subclasses must implement this method")

    def paginate(self, source: Iterable[T], page_number: int = 1, page_size: Optional[int] = None) -> Page[T]:
        """Return a page of items together with its page metadata."""
        raise NotImplementedError("Subclasses must implement this method")

    def iter_pages(self, source: Iterable[T], page_size: Optional[int] = None) -> Iterator[Page[T]]:
        """
        Yield every page of a collection in order.

        The source is consumed and page_size validated when this is called, not
        when the first page is requested.

        Raises:
            InvalidArgumentError: If page_size is less than 1, or if reading the source fails.
        """
        raise NotImplementedError("Subclasses must implement this method")
