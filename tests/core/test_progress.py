"""Tests for core/progress.py module."""

from __future__ import annotations

from unittest.mock import patch

from rich.console import Console

from rulediff.core.progress import _STYLES, get_console, pluralize, status


class TestStyles:
    """Tests for the style prefix table."""

    def test_known_styles(self) -> None:
        """All styles used by the CLI are defined."""
        assert set(_STYLES) == {"success", "error", "warning", "info", "none"}

    def test_none_has_no_prefix(self) -> None:
        assert _STYLES["none"] == ""


class TestStatus:
    """Tests for status function."""

    def test_prints_message(self) -> None:
        """Prints a message to console."""
        with patch("rulediff.core.progress._console") as mock_console:
            status("Extracting changes")
            mock_console.print.assert_called_once()

    def test_success_style(self) -> None:
        """Applies success style."""
        with patch("rulediff.core.progress._console") as mock_console:
            status("Config written", style="success")
            assert "✓" in mock_console.print.call_args[0][0]

    def test_error_style(self) -> None:
        """Applies error style."""
        with patch("rulediff.core.progress._console") as mock_console:
            status("Report failed", style="error")
            assert "✗" in mock_console.print.call_args[0][0]

    def test_unknown_style_has_no_prefix(self) -> None:
        with patch("rulediff.core.progress._console") as mock_console:
            status("Plain", style="bogus")
            assert mock_console.print.call_args[0][0] == "Plain"

    def test_with_indent(self) -> None:
        """Applies indentation."""
        with patch("rulediff.core.progress._console") as mock_console:
            status("Indented", indent=4, style="none")
            assert mock_console.print.call_args[0][0] == "    Indented"

    def test_highlighting_disabled(self) -> None:
        """Paths and numbers are not auto-highlighted."""
        with patch("rulediff.core.progress._console") as mock_console:
            status("3 changes in src/a.java")
            assert mock_console.print.call_args.kwargs["highlight"] is False


class TestGetConsole:
    def test_returns_stderr_console(self) -> None:
        console = get_console()
        assert isinstance(console, Console)
        assert console.stderr


class TestPluralize:
    """Tests for pluralize function."""

    def test_singular(self) -> None:
        assert pluralize(1, "change") == "1 change"

    def test_plural(self) -> None:
        assert pluralize(3, "change") == "3 changes"

    def test_zero_is_plural(self) -> None:
        assert pluralize(0, "module") == "0 modules"

    def test_irregular_plural(self) -> None:
        assert pluralize(2, "entry", "entries") == "2 entries"
