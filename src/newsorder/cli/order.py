"""newsorder order command - show the canonical order of every scope in a file."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from newsorder.cli.utils import load_cli_config
from newsorder.core.errors import ExtractionError
from newsorder.lint.ops import LintOps
from newsorder.order.ops import ScopeReport, explain_scope


def _render(report: ScopeReport) -> Table:
    scope = report.scope
    verdict = "[green]in order[/green]" if report.in_order else "[red]out of order[/red]"
    table = Table(
        title=f"{scope.kind.value} {scope.name} ({scope.position}) - {verdict}",
        title_justify="left",
        show_edge=False,
    )
    table.add_column("#", justify="right")
    table.add_column("")
    table.add_column("member")
    table.add_column("declared", justify="right")
    table.add_column("kind")

    for slot, entry in enumerate(report.entries, 1):
        member = entry.member
        mark = f"[green]{entry.mark}[/green]" if entry.matches else f"[red]{entry.mark}[/red]"
        name = member.name
        if member.index in report.recursive:
            name += " [dim](recursive)[/dim]"
        table.add_row(str(slot), mark, name, str(member.index + 1), member.kind.value)
    return table


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: .newsorder.yaml in the current directory)",
)
@click.pass_context
def order_command(ctx: click.Context, path: Path, config_file: Path | None) -> None:
    """Show the canonical declaration order of each scope in PATH.

    Members in a recursive group are exempt from ordering and are tagged.
    """
    root = Path.cwd()
    config = load_cli_config(ctx, root, config_file)
    ops = LintOps(root, config)

    try:
        scopes = ops.scopes(path)
    except ExtractionError as e:
        raise click.ClickException(str(e)) from e

    console = Console()
    shown = 0
    for scope in scopes:
        if scope.size == 0:
            continue
        console.print(_render(explain_scope(scope)))
        console.print()
        shown += 1

    if not shown:
        console.print(f"[yellow]No classes or functions found[/yellow] in {path}")
