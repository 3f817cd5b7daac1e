#!/usr/bin/env python3
# File: paginator/main.py

"""
Command-line front end: page through a JSON array.
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence

from rich.console import Console

from .config import LOG_FORMAT, load_config, options_from_config
from .core.pagination_service import PaginationService
from .ui.components import create_page_table, format_page_caption
from .errors import ConfigError, InvalidArgumentError

logger = logging.getLogger("paginator.main")

def configure_file_logging(level_name: str, log_file: Path) -> logging.FileHandler:
    """
    Send all log records to a single file so the rich console output stays clean.

    Any handlers already on the root logger are replaced. Unknown level names
    fall back to INFO.

    Returns:
        The file handler now attached to the root logger.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)

    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(file_handler)
    root.setLevel(level)
    logger.info(f"Writing {logging.getLevelName(level)} and above to {log_file}")
    return file_handler


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show one page of a JSON array")
    parser.add_argument("file", nargs="?", default="-", help="JSON file containing an array. Default: read from stdin")
    parser.add_argument("--page", type=int, default=1, help="Page number to show, starting at 1. Default: 1")
    parser.add_argument("--page-size", type=int, help="Items per page. Default: taken from configuration")
    parser.add_argument("--total-only", action="store_true", help="Only print the number of pages")
    parser.add_argument("--json", action="store_true", help="Print the page items as JSON instead of a table")
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--log-file", type=Path, help="Log file path. Default: taken from configuration")
    parser.add_argument("--log-level", choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], help="Logging level. Default: taken from configuration")
    return parser


def read_items(file_arg: str) -> List[Any]:
    """
    Read a JSON array from a file path, or from stdin when file_arg is "-".

    Raises:
        InvalidArgumentError: If the input cannot be read or is not a JSON array.
    """
    try:
        if file_arg == "-":
            data = json.load(sys.stdin)
        else:
            with open(file_arg, 'r', encoding='utf-8') as f:
                data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidArgumentError(f"Could not read JSON input from {file_arg}: {e}") from e

    if not isinstance(data, list):
        raise InvalidArgumentError(f"Expected a JSON array in {file_arg}, got {type(data).__name__}")
    return data


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"ERROR: Configuration problem - {e}", file=sys.stderr)
        return 1

    log_level = args.log_level or config["logging"]["level"]
    log_file = args.log_file or Path(config["logging"]["file"])
    configure_file_logging(log_level, log_file)
    logger.info(f"Application starting with arguments: {args}")

    service = PaginationService(options_from_config(config))
    page_size = args.page_size if args.page_size is not None else service.options.default_page_size

    try:
        items = read_items(args.file)
        if args.total_only:
            console.print(service.get_page_total(items, page_size))
            return 0

        page = service.paginate(items, page_number=args.page, page_size=page_size)
    except InvalidArgumentError as e:
        logger.error(f"Pagination failed: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info(f"Showing page {page.page} of {page.pages} ({len(page.items)} of {page.total} items)")
    if args.json:
        console.print_json(data=list(page.items))
    else:
        console.print(create_page_table(page))
        console.print(format_page_caption(page), style="dim")
    return 0


if __name__ == "__main__":
    sys.exit(main())
