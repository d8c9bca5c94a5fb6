"""Tests for pygit2 error translation."""

from __future__ import annotations

import pygit2
import pytest

from rulediff.git._internal.errors import ErrorMapper, object_read
from rulediff.git.errors import ObjectStoreCorruptionError


class TestErrorMapper:
    @pytest.mark.parametrize(
        "error",
        [pygit2.GitError("bad header"), KeyError("abc"), ValueError("odd"), OSError("io")],
    )
    def test_translates_read_failures(self, error: Exception) -> None:
        with (
            pytest.raises(ObjectStoreCorruptionError) as exc_info,
            ErrorMapper.guard("f" * 40, "tree"),
        ):
            raise error
        assert exc_info.value.sha == "f" * 40
        assert exc_info.value.kind == "tree"
        assert exc_info.value.__cause__ is error

    def test_empty_message_uses_type_name(self) -> None:
        with (
            pytest.raises(ObjectStoreCorruptionError, match="ValueError"),
            object_read("a", "blob"),
        ):
            raise ValueError()

    def test_other_errors_pass_through(self) -> None:
        with pytest.raises(RuntimeError), object_read("a", "blob"):
            raise RuntimeError("not a read failure")

    def test_no_error(self) -> None:
        with object_read("a", "blob"):
            pass
