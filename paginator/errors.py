# paginator/errors.py

class PaginatorError(Exception):
    """Base class for all paginator errors."""
    pass

class InvalidArgumentError(PaginatorError, ValueError):
    """Error raised for bad pagination input or a failure while paginating."""
    pass

class ConfigError(PaginatorError):
    """Error related to configuration."""
    pass
