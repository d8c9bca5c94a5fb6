"""Diff report generation through the external tester script."""

from __future__ import annotations

import subprocess
from pathlib import Path

import structlog

from rulediff.config.models import ReportConfig
from rulediff.core.errors import ReportError

log = structlog.get_logger()


def build_command(
    config: ReportConfig,
    *,
    repo_path: Path,
    trunk: str,
    branch: str,
    config_file: Path,
) -> list[str]:
    return [
        config.command,
        config.script,
        "-r",
        str(repo_path),
        "-b",
        trunk,
        "-p",
        branch,
        "-c",
        str(config_file.resolve()),
        "-l",
        config.projects_file,
    ]


def generate_report(
    tester_path: Path,
    repo_path: Path,
    branch: str,
    config_file: Path,
    *,
    trunk: str = "master",
    config: ReportConfig | None = None,
) -> Path:
    """Run the tester's diff script and return the report directory.

    The script inherits this process's stdout/stderr.

    Raises:
        ReportError: Non-zero exit, timeout, or no report directory afterwards.
    """
    config = config or ReportConfig()
    cmd = build_command(
        config, repo_path=repo_path, trunk=trunk, branch=branch, config_file=config_file
    )
    log.info("report.start", cwd=str(tester_path), command=cmd)
    try:
        result = subprocess.run(cmd, cwd=str(tester_path), timeout=config.timeout_sec)
    except subprocess.TimeoutExpired as e:
        raise ReportError.timeout(cmd, config.timeout_sec or 0) from e
    except FileNotFoundError as e:
        raise ReportError.command_failed(cmd, 127) from e
    if result.returncode != 0:
        raise ReportError.command_failed(cmd, result.returncode)

    report_dir = tester_path / config.report_dir
    if not report_dir.is_dir():
        raise ReportError.missing_output(str(report_dir))
    log.info("report.done", path=str(report_dir))
    return report_dir
