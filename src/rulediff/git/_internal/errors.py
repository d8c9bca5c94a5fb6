"""Centralized error mapping for pygit2 exceptions."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager

import pygit2

from rulediff.git.errors import ObjectStoreCorruptionError


class ErrorMapper:
    """Maps pygit2 read failures to domain errors."""

    @staticmethod
    @contextmanager
    def guard(sha: str, kind: str) -> Iterator[None]:
        """Context manager translating object-store failures for one object."""
        try:
            yield
        except (pygit2.GitError, KeyError, ValueError, OSError) as e:
            raise ObjectStoreCorruptionError(sha, kind, str(e) or type(e).__name__) from e


def object_read(sha: str, kind: str) -> AbstractContextManager[None]:
    """Guard a single object read."""
    return ErrorMapper.guard(sha, kind)
