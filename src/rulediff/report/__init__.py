"""External diff report generation."""

from rulediff.report.generator import build_command, generate_report

__all__ = ["build_command", "generate_report"]
