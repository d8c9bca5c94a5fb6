"""Config module exports."""

from rulediff.config.loader import RuleDiffSettings, load_config
from rulediff.config.models import (
    GitConfig,
    LoggingConfig,
    LogOutputConfig,
    OutputConfig,
    ReportConfig,
    RuleDiffConfig,
)

__all__ = [
    "load_config",
    "RuleDiffConfig",
    "RuleDiffSettings",
    "GitConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "OutputConfig",
    "ReportConfig",
]
