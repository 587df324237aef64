"""newsorder check command - report scopes that are not in newspaper order."""

import json
from pathlib import Path
from typing import Any

import click

from newsorder.cli.utils import load_cli_config
from newsorder.core.progress import pluralize, status
from newsorder.lint.models import LintResult
from newsorder.lint.ops import LintOps

EXIT_CLEAN = 0
EXIT_VIOLATIONS = 1
EXIT_ERRORS = 2


def _exit_code(result: LintResult) -> int:
    if result.total_diagnostics:
        return EXIT_VIOLATIONS
    if result.errored_files:
        return EXIT_ERRORS
    return EXIT_CLEAN


def _print_json(result: LintResult) -> None:
    payload: dict[str, Any] = {
        "status": result.status,
        "files_checked": result.files_checked,
        "diagnostics": [d.to_dict() for d in result.diagnostics],
        "errors": [{"path": f.path, "detail": f.error_detail} for f in result.errored_files],
    }
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _print_text(result: LintResult) -> None:
    for diag in result.diagnostics:
        click.echo(f"{diag.path}:{diag.line}:{diag.column}: {diag.code} {diag.message}\n")

    for failed in result.errored_files:
        status(f"{failed.path}: {failed.error_detail}", style="error")

    checked = pluralize(result.files_checked, "file")
    if result.total_diagnostics:
        dirty = pluralize(len(result.dirty_files), "file")
        status(
            f"{pluralize(result.total_diagnostics, 'violation')} in {dirty} ({checked} checked)",
            style="error",
        )
    elif result.errored_files:
        status(f"{checked} checked, {pluralize(len(result.errored_files), 'error')}", style="warning")
    else:
        status(f"{checked} checked, no violations", style="success")


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--no-classes", is_flag=True, help="Skip method order inside classes")
@click.option("--no-functions", is_flag=True, help="Skip top-level function order")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: .newsorder.yaml in the current directory)",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    paths: tuple[Path, ...],
    as_json: bool,
    no_classes: bool,
    no_functions: bool,
    config_file: Path | None,
) -> None:
    """Check that callers are declared before the functions they call.

    PATHS are files or directories (default: current directory).
    """
    root = Path.cwd()
    overrides: dict[str, Any] = {}
    if no_classes:
        overrides["check_classes"] = False
    if no_functions:
        overrides["check_functions"] = False

    if overrides:
        config = load_cli_config(ctx, root, config_file, check=overrides)
    else:
        config = load_cli_config(ctx, root, config_file)

    result = LintOps(root, config).check(list(paths) or None)

    if as_json:
        _print_json(result)
    else:
        _print_text(result)

    ctx.exit(_exit_code(result))
