"""Test fixtures for CLI commands."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from tests.git.repo_builder import RepoBuilder

MAIN_PREFIX = "src/main/java/com/puppycrawl/tools/checkstyle/"


@pytest.fixture(autouse=True)
def _isolated_cli(tmp_path: Path) -> Iterator[None]:
    """No user config is read; handlers bound to runner streams are dropped after."""
    with patch("rulediff.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def checkstyle_repo(tmp_path: Path) -> RepoBuilder:
    """Trunk with two checks; 'feature' edits one check and one utility."""
    builder = RepoBuilder(tmp_path / "checkstyle")
    builder.commit(
        "master",
        {
            MAIN_PREFIX + "checks/coding/EmptyStatementCheck.java": b"class A {\n}\n",
            MAIN_PREFIX + "checks/NewlineAtEndOfFileCheck.java": b"class B {\n}\n",
            MAIN_PREFIX + "utils/CheckUtils.java": b"class U {\n}\n",
        },
    )
    builder.branch("feature")
    builder.commit(
        "feature",
        {
            MAIN_PREFIX + "checks/coding/EmptyStatementCheck.java": b"class A {\n  int x;\n}\n",
            MAIN_PREFIX + "utils/CheckUtils.java": b"class U {\n  int y;\n}\n",
        },
    )
    return builder


@pytest.fixture
def module_table(tmp_path: Path) -> Path:
    path = tmp_path / "modules.json"
    path.write_text(
        json.dumps(
            [
                {
                    "packageName": "com.puppycrawl.tools.checkstyle.checks.coding",
                    "name": "EmptyStatementCheck",
                    "parent": "TreeWalker",
                },
                {
                    "packageName": "com.puppycrawl.tools.checkstyle.checks",
                    "name": "NewlineAtEndOfFileCheck",
                    "parent": "Checker",
                },
            ]
        )
    )
    return path
