"""CLI utilities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click
import structlog

from rulediff.config import RuleDiffConfig, load_config
from rulediff.core.errors import InternalError, RuleDiffError
from rulediff.core.logging import configure_logging
from rulediff.git import ChangeExtractor, GitError

log = structlog.get_logger()


def require_directory(path: Path, what: str) -> Path:
    """Resolve path, failing unless it is an existing directory."""
    if not path.is_dir():
        raise click.BadParameter(f"path of {what} must exist and be a directory: {path}")
    return path.resolve()


def load_cli_config(ctx: click.Context, repo_root: Path) -> RuleDiffConfig:
    """Load config for a repository, honouring the group-level options.

    Logging is reconfigured from the loaded config unless --verbose was given.
    """
    obj = ctx.obj or {}
    config = load_config(repo_root, config_file=obj.get("config_file"))
    if not obj.get("verbose"):
        configure_logging(config=config.logging)
    return config


def make_extractor(repo_path: Path, config: RuleDiffConfig, trunk: str | None) -> ChangeExtractor:
    git = config.git
    return ChangeExtractor(
        repo_path,
        trunk=trunk or git.trunk_branch,
        rename_threshold=git.rename_threshold,
        rename_limit=git.rename_limit,
        detect_copies=git.detect_copies,
        max_walk_depth=git.max_walk_depth,
    )


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn failures into a ClickException (exit status 1).

    Anything that is not a domain error is reported as an InternalError.
    """
    try:
        yield
    except (GitError, RuleDiffError) as e:
        raise click.ClickException(str(e)) from e
    except (click.ClickException, click.Abort, click.exceptions.Exit):
        raise
    except Exception as e:
        error = InternalError.unexpected(f"{type(e).__name__}: {e}", exception=type(e).__name__)
        log.exception("cli.unexpected_error", code=error.error_name)
        raise click.ClickException(str(error)) from e
