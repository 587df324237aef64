"""Core module exports."""

from newsorder.core.errors import (
    ConfigError,
    ErrorCode,
    ExtractionError,
    NewsOrderError,
    OrderingError,
)
from newsorder.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from newsorder.core.progress import pluralize, progress, status

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "ExtractionError",
    "NewsOrderError",
    "OrderingError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "pluralize",
    "progress",
    "status",
]
