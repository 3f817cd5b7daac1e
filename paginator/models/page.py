"""Page value object returned by the pagination service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """
    Items of one page along with the numbers needed to navigate around it.

    `page` is the number that was asked for, so it can exceed `pages` when a
    caller requests a page past the end; `items` is then empty.
    """

    items: Sequence[T]
    total: int
    pages: int
    page: int
    per_page: int

    def has_next(self) -> bool:
        return self.page < self.pages

    def has_prev(self) -> bool:
        return self.page > 1

    def is_empty(self) -> bool:
        return not self.items

    def start_index(self) -> int:
        """1-based position of the first item in the whole collection."""
        return (self.page - 1) * self.per_page + 1
