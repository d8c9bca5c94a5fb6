"""Tests for changed path classification."""

from __future__ import annotations

import pytest

from rulediff.git.models import GitChange
from rulediff.module.classifier import (
    classify,
    full_name,
    module_name,
    source_set,
)
from rulediff.module.models import ModuleKind
from rulediff.module.table import ModuleTable
from tests.module.conftest import MAIN_PREFIX, TEST_PREFIX


def change(path: str) -> GitChange:
    return GitChange(path=path)


class TestPathHelpers:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("src/main/java/a/B.java", "main"),
            ("src/test/java/a/BTest.java", "test"),
            ("src/main/resources/a/b.xml", None),
            ("backup/test/java/foo/Foo.java", None),
            ("README.md", None),
        ],
    )
    def test_source_set(self, path: str, expected: str | None) -> None:
        assert source_set(path) == expected

    def test_full_name(self) -> None:
        assert full_name("src/main/java/com/foo/Bar.java") == "com.foo.Bar"


class TestClassify:
    def test_module(self, table: ModuleTable) -> None:
        path = MAIN_PREFIX + "checks/coding/EmptyStatementCheck.java"
        assert classify(change(path), table) is ModuleKind.MODULE

    def test_utility(self, table: ModuleTable) -> None:
        """Main sources that are not modules are utility code."""
        path = MAIN_PREFIX + "utils/CheckUtils.java"
        assert classify(change(path), table) is ModuleKind.UTILITY

    def test_module_test(self, table: ModuleTable) -> None:
        path = TEST_PREFIX + "checks/coding/EmptyStatementCheckTest.java"
        assert classify(change(path), table) is ModuleKind.MODULE_TEST

    def test_test_without_suffix(self, table: ModuleTable) -> None:
        path = TEST_PREFIX + "checks/coding/EmptyStatementCheckInput.java"
        assert classify(change(path), table) is ModuleKind.UNRECOGNIZED

    def test_test_of_unknown_class(self, table: ModuleTable) -> None:
        path = TEST_PREFIX + "utils/CheckUtilsTest.java"
        assert classify(change(path), table) is ModuleKind.UNRECOGNIZED

    @pytest.mark.parametrize(
        "path",
        ["backup/test/java/foo/Foo.java", "pom.xml", "src/main/resources/messages.properties"],
    )
    def test_unrecognized(self, table: ModuleTable, path: str) -> None:
        assert classify(change(path), table) is ModuleKind.UNRECOGNIZED

    def test_empty_table_makes_everything_utility(self) -> None:
        path = MAIN_PREFIX + "checks/coding/EmptyStatementCheck.java"
        assert classify(change(path), ModuleTable()) is ModuleKind.UTILITY


class TestModuleName:
    def test_module(self) -> None:
        assert module_name("src/main/java/a/B.java", ModuleKind.MODULE) == "a.B"

    def test_module_test_strips_suffix(self) -> None:
        assert module_name("src/test/java/a/BTest.java", ModuleKind.MODULE_TEST) == "a.B"

    @pytest.mark.parametrize("kind", [ModuleKind.UTILITY, ModuleKind.UNRECOGNIZED])
    def test_no_module(self, kind: ModuleKind) -> None:
        assert module_name("src/main/java/a/B.java", kind) is None
