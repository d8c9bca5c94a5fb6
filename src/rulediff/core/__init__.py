"""Core module exports."""

from rulediff.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    ModuleTableError,
    ReportError,
    RuleDiffError,
)
from rulediff.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)
from rulediff.core.progress import status

__all__ = [
    # Errors
    "RuleDiffError",
    "ErrorCode",
    "ConfigError",
    "ModuleTableError",
    "ReportError",
    "InternalError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
    # Progress
    "status",
]
