"""rulediff CLI."""

from pathlib import Path

import click

from rulediff import __version__
from rulediff.cli.changes import changes_command
from rulediff.cli.run import run_command
from rulediff.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="rulediff")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "-c",
    "--config",
    "config_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file (default: <repo>/.rulediff/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_file: Path | None) -> None:
    """rulediff - regression configs for the rule modules a branch touches."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_file"] = config_file
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(changes_command, name="changes")
cli.add_command(run_command, name="run")


if __name__ == "__main__":
    cli()
