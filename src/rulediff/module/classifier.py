"""Classification of changed paths against the module table."""

from __future__ import annotations

import re

from rulediff.git.models import GitChange
from rulediff.module.models import ModuleKind
from rulediff.module.table import ModuleTable

JAVA_SOURCE_PATTERN = re.compile(r"src/(main|test)/java/(.+)\.java")
TEST_SUFFIX = "Test"


def source_set(path: str) -> str | None:
    """'main' or 'test' for Java sources, None for anything else."""
    match = JAVA_SOURCE_PATTERN.search(path)
    return match.group(1) if match else None


def full_name(path: str) -> str:
    """Dotted class name of a Java source path.

    'src/main/java/com/foo/Bar.java' -> 'com.foo.Bar'. Paths that are not
    Java sources are returned with slashes turned into dots.
    """
    return JAVA_SOURCE_PATTERN.sub(r"\2", path).replace("/", ".")


def classify(change: GitChange, table: ModuleTable) -> ModuleKind:
    """Decide whether a change touches a module, a module's test, or utility code."""
    kind = source_set(change.path)
    if kind == "main":
        if full_name(change.path) in table:
            return ModuleKind.MODULE
        return ModuleKind.UTILITY
    if kind == "test":
        name = full_name(change.path)
        if name.endswith(TEST_SUFFIX) and name.removesuffix(TEST_SUFFIX) in table:
            return ModuleKind.MODULE_TEST
    return ModuleKind.UNRECOGNIZED


def module_name(path: str, kind: ModuleKind) -> str | None:
    """Full name of the module behind a classified path, if any."""
    if kind is ModuleKind.MODULE:
        return full_name(path)
    if kind is ModuleKind.MODULE_TEST:
        return full_name(path).removesuffix(TEST_SUFFIX)
    return None
