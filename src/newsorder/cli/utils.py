"""CLI utilities."""

from pathlib import Path
from typing import Any

import click

from newsorder.config.loader import load_config
from newsorder.config.models import NewsOrderConfig
from newsorder.core.errors import ConfigError
from newsorder.core.logging import configure_logging


def load_cli_config(
    ctx: click.Context,
    root: Path,
    config_file: Path | None = None,
    **overrides: Any,
) -> NewsOrderConfig:
    """Load config for a command and apply its logging section.

    --verbose on the group forces DEBUG regardless of the configured level.

    Raises:
        click.ClickException: On any configuration error.
    """
    try:
        config = load_config(root, config_file=config_file, **overrides)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if ctx.obj and ctx.obj.get("verbose"):
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    return config
