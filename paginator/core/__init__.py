# paginator/core/__init__.py
from .pagination_service import PaginationService

__all__ = [
    "PaginationService",
]

"""
Core components for the paginator package.
"""
