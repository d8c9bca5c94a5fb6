"""Test fixtures for module classification."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from rulediff.module.table import ModuleTable

BASE_PACKAGE = "com.puppycrawl.tools.checkstyle"
MAIN_PREFIX = "src/main/java/com/puppycrawl/tools/checkstyle/"
TEST_PREFIX = "src/test/java/com/puppycrawl/tools/checkstyle/"

MODULES = [
    {
        "packageName": f"{BASE_PACKAGE}.checks.coding",
        "name": "EmptyStatementCheck",
        "parent": "TreeWalker",
        "properties": [],
    },
    {
        "packageName": f"{BASE_PACKAGE}.checks.naming",
        "name": "AbstractClassNameCheck",
        "parent": "TreeWalker",
        "properties": [
            {"name": "format", "type": "Pattern"},
            {"name": "ignoreModifier", "type": "boolean"},
        ],
    },
    {
        "packageName": f"{BASE_PACKAGE}.checks",
        "name": "NewlineAtEndOfFileCheck",
        "parent": "Checker",
        "properties": [{"name": "lineSeparator", "type": "LineSeparatorOption"}],
    },
]


@pytest.fixture
def modules_json() -> str:
    return json.dumps(MODULES)


@pytest.fixture
def table(modules_json: str) -> ModuleTable:
    return ModuleTable.from_json(modules_json)


@pytest.fixture
def table_file(tmp_path: Path, modules_json: str) -> Path:
    path = tmp_path / "checkstyle_modules.json"
    path.write_text(modules_json, encoding="utf-8")
    return path
