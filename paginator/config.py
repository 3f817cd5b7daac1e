# paginator/config.py

"""
Configuration settings for the paginator.
"""

import os
import copy
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import dotenv

from .interfaces.pagination import PaginationOptions
from .errors import ConfigError

logger = logging.getLogger(__name__)

# Per-user state directory, outside the installed package
DEFAULT_STATE_DIR = Path(os.path.expanduser("~")) / ".paginator"
DEFAULT_LOGS_DIR = DEFAULT_STATE_DIR / "logs"

# Pagination settings
DEFAULT_PAGE_SIZE = 10

# Logging configuration
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL = 'INFO'  # DEBUG, INFO, WARNING, ERROR, CRITICAL

DEFAULT_CONFIG = {
    "pagination": {
        "page_size": DEFAULT_PAGE_SIZE,
    },
    "logging": {
        "level": LOG_LEVEL,
        "file": str(DEFAULT_LOGS_DIR / "paginator.log"),
    },
}

CONFIG_FILE = os.path.expanduser("~/.paginator_config.json")


def _parse_page_size(value: Any, source: str) -> int:
    try:
        page_size = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid page size {value!r} in {source}: {e}") from e
    if page_size < 1:
        raise ConfigError(f"Page size in {source} must be greater than zero, got {page_size}")
    return page_size


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file or environment variables.

    Values from the JSON config file are merged over the defaults section by
    section; PAGINATOR_PAGE_SIZE and PAGINATOR_LOG_LEVEL (also read from a
    .env file) take precedence over both.

    Args:
        config_file: Path to a JSON config file. Defaults to CONFIG_FILE.

    Returns:
        The effective configuration dictionary.

    Raises:
        ConfigError: If the config file is unreadable or a value is invalid.
    """
    dotenv.load_dotenv()
    config = copy.deepcopy(DEFAULT_CONFIG)

    path = Path(config_file) if config_file else Path(CONFIG_FILE)
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.error(f"Error loading config file {path}: {e}")
            raise ConfigError(f"Could not load config file {path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        for section, values in file_config.items():
            if section in DEFAULT_CONFIG:
                if not isinstance(values, dict):
                    raise ConfigError(f"Section '{section}' in {path} must be a JSON object, got {type(values).__name__}")
                config[section].update(values)
            else:
                config[section] = values
        logger.info(f"Loaded configuration from {path}")
    elif config_file:
        logger.warning(f"Config file not found: {path}. Using defaults.")

    config["pagination"]["page_size"] = _parse_page_size(config["pagination"].get("page_size"), str(path))
    for key in ("level", "file"):
        if not isinstance(config["logging"].get(key), str):
            raise ConfigError(f"Logging {key} in {path} must be a string, got {config['logging'].get(key)!r}")

    # Override with environment variables
    if os.environ.get("PAGINATOR_PAGE_SIZE"):
        config["pagination"]["page_size"] = _parse_page_size(os.environ["PAGINATOR_PAGE_SIZE"], "PAGINATOR_PAGE_SIZE")

    if os.environ.get("PAGINATOR_LOG_LEVEL"):
        config["logging"]["level"] = os.environ["PAGINATOR_LOG_LEVEL"].upper()

    return config


def options_from_config(config: Dict[str, Any]) -> PaginationOptions:
    """Build PaginationOptions from a loaded configuration dictionary."""
    return PaginationOptions(default_page_size=config["pagination"]["page_size"])
