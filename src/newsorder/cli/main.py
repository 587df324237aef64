"""newsorder CLI - newsorder command."""

import click

from newsorder import __version__
from newsorder.cli.check import check_command
from newsorder.cli.order import order_command
from newsorder.core.logging import configure_logging, set_run_id


@click.group()
@click.version_option(version=__version__, prog_name="newsorder")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """newsorder - check that callers are declared before the functions they call."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    set_run_id()
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(check_command, name="check")
cli.add_command(order_command, name="order")


if __name__ == "__main__":
    cli()
