"""rulediff error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Module table
- 4xxx: Report
- 9xxx: Internal

Change-extraction failures live in rulediff.git.errors.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Module table (3xxx)
    MODULE_TABLE_NOT_FOUND = 3001
    MODULE_TABLE_INVALID = 3002

    # Report (4xxx)
    REPORT_COMMAND_FAILED = 4001
    REPORT_MISSING_OUTPUT = 4002
    REPORT_TIMEOUT = 4003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class RuleDiffError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(RuleDiffError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ModuleTableError(RuleDiffError):
    """Module metadata table could not be loaded."""

    @classmethod
    def not_found(cls, path: str) -> "ModuleTableError":
        return cls(
            code=ErrorCode.MODULE_TABLE_NOT_FOUND,
            message=f"Module table not found: {path}",
            details={"path": path},
        )

    @classmethod
    def invalid(cls, path: str, reason: str) -> "ModuleTableError":
        return cls(
            code=ErrorCode.MODULE_TABLE_INVALID,
            message=f"Invalid module table at {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class ReportError(RuleDiffError):
    """External report generation failed."""

    @classmethod
    def command_failed(cls, command: list[str], returncode: int) -> "ReportError":
        return cls(
            code=ErrorCode.REPORT_COMMAND_FAILED,
            message=f"Report command exited with status {returncode}: {' '.join(command)}",
            details={"command": command, "returncode": returncode},
        )

    @classmethod
    def missing_output(cls, path: str) -> "ReportError":
        return cls(
            code=ErrorCode.REPORT_MISSING_OUTPUT,
            message=f"Report does not exist or is not a directory: {path}",
            details={"path": path},
        )

    @classmethod
    def timeout(cls, command: list[str], timeout_sec: float) -> "ReportError":
        return cls(
            code=ErrorCode.REPORT_TIMEOUT,
            message=f"Report command timed out after {timeout_sec}s: {' '.join(command)}",
            retryable=True,
            details={"command": command, "timeout_sec": timeout_sec},
        )


class InternalError(RuleDiffError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
