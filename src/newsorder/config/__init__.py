"""Config module exports."""

from newsorder.config.loader import load_config
from newsorder.config.models import (
    CheckConfig,
    LoggingConfig,
    LogOutputConfig,
    NewsOrderConfig,
)

__all__ = [
    "load_config",
    "CheckConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "NewsOrderConfig",
]
