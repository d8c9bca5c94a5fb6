"""rulediff run command - generate a regression config and diff report."""

from __future__ import annotations

from pathlib import Path

import click

from rulediff.cli.utils import cli_errors, load_cli_config, make_extractor, require_directory
from rulediff.configuration import config_file_name, generate_config
from rulediff.core.logging import set_request_id
from rulediff.core.progress import pluralize, status
from rulediff.module import ModuleTable, collect_modules
from rulediff.report import generate_report


@click.command()
@click.option(
    "-r",
    "--repo",
    "repo",
    required=True,
    type=click.Path(path_type=Path),
    help="Path of the rule engine repository",
)
@click.option("-p", "--branch", required=True, help="Name of the PR branch")
@click.option("-b", "--trunk", default=None, help="Trunk branch (default from config)")
@click.option(
    "-m",
    "--module-table",
    required=True,
    type=click.Path(path_type=Path),
    help="JSON module metadata produced by the extraction step",
)
@click.option(
    "-t",
    "--tester",
    "tester",
    default=None,
    type=click.Path(path_type=Path),
    help="Path of the tester directory holding the report script",
)
@click.option(
    "-o",
    "--output-dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the generated config (default from config)",
)
@click.option(
    "--stop-after-config",
    is_flag=True,
    help="Stop after generating the config; no report is produced",
)
@click.pass_context
def run_command(
    ctx: click.Context,
    repo: Path,
    branch: str,
    trunk: str | None,
    module_table: Path,
    tester: Path | None,
    output_dir: Path | None,
    stop_after_config: bool,
) -> None:
    """Generate a config covering the modules BRANCH touches, then a diff report."""
    repo_path = require_directory(repo, "local git repo")
    tester_path: Path | None = None
    if not stop_after_config:
        if tester is None:
            raise click.UsageError(
                "missing --tester, which is required unless --stop-after-config is given"
            )
        tester_path = require_directory(tester, "tester")

    set_request_id()
    with cli_errors():
        config = load_cli_config(ctx, repo_path)
        extractor = make_extractor(repo_path, config, trunk)
        changes = extractor.extract(branch)
        status(f"{pluralize(len(changes), 'changed file')} on {branch}")

        table = ModuleTable.from_json_file(module_table)
        modules = collect_modules(changes, table)
        status(f"{pluralize(len(modules), 'module')} selected")

        target_dir = output_dir or Path(config.output.config_dir)
        config_path = target_dir / config_file_name(branch, config.output.config_name_template)
        generate_config(config_path, modules)
        status(f"config generated at {config_path.resolve()}", style="success")

        if tester_path is not None:
            report = generate_report(
                tester_path,
                repo_path,
                branch,
                config_path,
                trunk=extractor.trunk,
                config=config.report,
            )
            status(f"report generated at {report.resolve()}", style="success")
