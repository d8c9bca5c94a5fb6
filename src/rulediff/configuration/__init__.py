"""Regression configuration generation."""

from rulediff.configuration.generator import (
    config_file_name,
    generate_config,
    generate_config_text,
)

__all__ = [
    "config_file_name",
    "generate_config",
    "generate_config_text",
]
