# paginator/interfaces/__init__.py
from .pagination import PaginationOptions, PaginationServiceInterface

__all__ = [
    "PaginationOptions",
    "PaginationServiceInterface",
]
