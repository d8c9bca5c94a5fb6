"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (RULEDIFF__SECTION__KEY)
3. Repo YAML (<repo>/.rulediff/config.yaml)
4. Global YAML (~/.config/rulediff/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    RULEDIFF__<SECTION>__<KEY>=<VALUE>

Examples:
    RULEDIFF__LOGGING__LEVEL=DEBUG
    RULEDIFF__GIT__TRUNK_BRANCH=main
    RULEDIFF__GIT__RENAME_THRESHOLD=60
    RULEDIFF__REPORT__COMMAND=groovy
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from rulediff.git.constants import DEFAULT_RENAME_LIMIT, DEFAULT_RENAME_THRESHOLD

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        RULEDIFF__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO shows one line per extraction step.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class GitConfig(BaseModel):
    """Change extraction configuration.

    Env vars:
        RULEDIFF__GIT__TRUNK_BRANCH: Branch the candidate is compared against
        RULEDIFF__GIT__RENAME_THRESHOLD: Similarity percentage for rename/copy pairing
        RULEDIFF__GIT__RENAME_LIMIT: Max adds/sources for inexact pairing
        RULEDIFF__GIT__DETECT_COPIES: Pair added files with modified sources
        RULEDIFF__GIT__MAX_WALK_DEPTH: Generations walked when searching the merge base
    """

    trunk_branch: str = Field(
        default="master",
        description="Trunk branch name. Commonly 'master' or 'main'.",
    )
    rename_threshold: int = Field(
        default=DEFAULT_RENAME_THRESHOLD,
        description="Minimum shared content (percent) for a rename or copy.",
    )
    rename_limit: int = Field(
        default=DEFAULT_RENAME_LIMIT,
        description="Inexact rename search is skipped above limit**2 candidate pairs.",
    )
    detect_copies: bool = Field(
        default=True,
        description="Label added files that match a modified or renamed source as copies.",
    )
    max_walk_depth: int | None = Field(
        default=None,
        description="Merge-base search bound in generations. None walks full history.",
    )

    @field_validator("trunk_branch")
    @classmethod
    def validate_trunk_branch(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("trunk_branch must not be empty")
        return v.strip()

    @field_validator("rename_threshold")
    @classmethod
    def validate_rename_threshold(cls, v: int) -> int:
        if not (1 <= v <= 100):
            raise ValueError(f"rename_threshold must be 1-100, got {v}")
        return v

    @field_validator("rename_limit")
    @classmethod
    def validate_rename_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"rename_limit must be positive, got {v}")
        return v

    @field_validator("max_walk_depth")
    @classmethod
    def validate_max_walk_depth(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError(f"max_walk_depth must be positive, got {v}")
        return v


class ReportConfig(BaseModel):
    """External diff report configuration.

    Env vars:
        RULEDIFF__REPORT__COMMAND: Interpreter used to run the report script
        RULEDIFF__REPORT__SCRIPT: Script name inside the tester directory
        RULEDIFF__REPORT__PROJECTS_FILE: Project list passed to the script
        RULEDIFF__REPORT__REPORT_DIR: Report directory relative to the tester
        RULEDIFF__REPORT__TIMEOUT_SEC: Kill the script after this many seconds
    """

    command: str = Field(default="groovy", description="Interpreter for the report script.")
    script: str = Field(default="diff.groovy", description="Report script name.")
    projects_file: str = Field(
        default="projects-to-test-on.properties",
        description="Project list consumed by the report script.",
    )
    report_dir: str = Field(
        default="reports/diff",
        description="Directory the script writes its report to, relative to the tester.",
    )
    timeout_sec: float | None = Field(
        default=None,
        description="Abort the report script after this many seconds. None waits forever.",
    )


class OutputConfig(BaseModel):
    """Generated configuration file placement.

    Env vars:
        RULEDIFF__OUTPUT__CONFIG_DIR: Directory the generated config is written to
        RULEDIFF__OUTPUT__CONFIG_NAME_TEMPLATE: File name template
    """

    config_dir: str = Field(default=".", description="Directory for generated configs.")
    config_name_template: str = Field(
        default="config-{branch}-{timestamp}.xml",
        description="Placeholders: {branch}, {timestamp} (yyyyMMddHHmmss).",
    )

    @field_validator("config_name_template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        if "/" in v:
            raise ValueError("config_name_template must be a file name, not a path")
        return v


class RuleDiffConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
