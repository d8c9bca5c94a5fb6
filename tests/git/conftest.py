"""Test fixtures for git module."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from tests.git.repo_builder import RepoBuilder


@pytest.fixture
def builder(tmp_path: Path) -> Generator[RepoBuilder, None, None]:
    """Empty repository on trunk 'master'."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    yield RepoBuilder(repo_path)


@pytest.fixture
def diverged(builder: RepoBuilder) -> RepoBuilder:
    """Trunk C0 -> T1 -> T2; feature branched at C0 with one commit F1."""
    builder.commit("master", {"README.md": b"# Test\n", "core.txt": b"1\n2\n3\n"}, message="C0")
    builder.branch("feature")
    builder.commit("master", {"trunk1.txt": b"t1\n"}, message="T1")
    builder.commit("master", {"core.txt": b"1\n2\n3\n4\n"}, message="T2")
    builder.commit("feature", {"feature.txt": b"f1\n"}, message="F1")
    return builder


@pytest.fixture
def side_merged(builder: RepoBuilder) -> str:
    """Trunk merges an old side branch after feature forked; returns the fork sha.

    C0 -> O1 on 'old'; trunk C0 -> T1 -> T2 -> T3 -> T4..T8 -> merge(old);
    feature branched at T3 with one commit adding f.txt.
    """
    builder.commit("master", {"a.txt": b"a\n"}, message="C0")
    builder.branch("old")
    builder.commit("old", {"o1.txt": b"o1\n"}, message="O1")
    for i in range(1, 4):
        fork = builder.commit("master", {f"t{i}.txt": f"t{i}\n".encode()}, message=f"T{i}")
    builder.branch("feature")
    builder.commit("feature", {"f.txt": b"f\n"}, message="F1")
    for i in range(4, 9):
        builder.commit("master", {f"t{i}.txt": f"t{i}\n".encode()}, message=f"T{i}")
    builder.merge("master", "old")
    return fork
