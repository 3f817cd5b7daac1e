# File: paginator/ui/components.py

"""
Rich renderables for displaying a page of items.
"""

import json
import logging
from typing import Any, List

from rich.table import Table
from rich.text import Text

from ..models.page import Page

logger = logging.getLogger(__name__)

def format_page_caption(page: Page[Any]) -> str:
    """
    Format the "Page X of Y" line shown under a page table.

    Args:
        page: The page being displayed

    Returns:
        Caption string
    """
    noun = "item" if page.total == 1 else "items"
    return f"Page {page.page} of {page.pages} ({page.total} {noun})"

def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)

def create_page_table(page: Page[Any]) -> Table:
    """
    Create a table showing the items of a page.

    Mapping items get one column per key, in first-seen order. Any other item
    is shown in a single "Value" column. The leftmost column holds the item's
    position in the whole collection.

    Args:
        page: Page to render

    Returns:
        Rich Table object
    """
    table = Table(show_lines=False)
    table.add_column("#", style="dim", justify="right")

    columns: List[str] = []
    if page.items and all(isinstance(item, dict) for item in page.items):
        for item in page.items:
            for key in item:
                if key not in columns:
                    columns.append(key)

    if columns:
        for column in columns:
            table.add_column(str(column), overflow="ellipsis")
        for index, item in enumerate(page.items, start=page.start_index()):
            table.add_row(str(index), *[_format_value(item.get(column, "")) for column in columns])
    else:
        table.add_column("Value", overflow="ellipsis")
        for index, item in enumerate(page.items, start=page.start_index()):
            table.add_row(str(index), Text(_format_value(item)))

    logger.debug(f"Created page table with {len(page.items)} rows and {len(columns) or 1} value columns")
    return table
