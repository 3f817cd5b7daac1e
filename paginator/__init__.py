"""
In-memory pagination for arbitrary iterables.
"""

from .core.pagination_service import PaginationService
from .interfaces.pagination import PaginationOptions, PaginationServiceInterface
from .models.page import Page
from .errors import PaginatorError, InvalidArgumentError, ConfigError

__version__ = "0.1.0"

_default_service = PaginationService()

get_page = _default_service.get_page
get_page_total = _default_service.get_page_total
paginate = _default_service.paginate
iter_pages = _default_service.iter_pages

__all__ = [
    "PaginationService",
    "PaginationOptions",
    "PaginationServiceInterface",
    "Page",
    "PaginatorError",
    "InvalidArgumentError",
    "ConfigError",
    "get_page",
    "get_page_total",
    "paginate",
    "iter_pages",
]
