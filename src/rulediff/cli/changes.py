"""rulediff changes command - list files a branch changes."""

from __future__ import annotations

import json
from pathlib import Path

import click

from rulediff.cli.utils import cli_errors, load_cli_config, make_extractor, require_directory
from rulediff.core.progress import pluralize, status


def _format_lines(lines: tuple[int, ...]) -> str:
    return ",".join(str(n) for n in lines) if lines else "-"


@click.command()
@click.argument("repo", default=".", type=click.Path(path_type=Path))
@click.option("-p", "--branch", required=True, help="Branch to compare against trunk")
@click.option("-b", "--trunk", default=None, help="Trunk branch (default from config)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def changes_command(
    ctx: click.Context, repo: Path, branch: str, trunk: str | None, as_json: bool
) -> None:
    """Show files BRANCH changes since it left trunk, with line numbers.

    REPO is the repository root (default: current directory).
    """
    repo_path = require_directory(repo, "local git repo")
    with cli_errors():
        config = load_cli_config(ctx, repo_path)
        result = make_extractor(repo_path, config, trunk).extract(branch)

    if as_json:
        click.echo(json.dumps([change.to_dict() for change in result], indent=2))
        return

    status(f"{pluralize(len(result), 'changed file')} on {branch}", style="success")
    for change in result:
        click.echo(
            f"{change.path}\t+{_format_lines(change.added_lines)}"
            f"\t-{_format_lines(change.deleted_lines)}"
        )
