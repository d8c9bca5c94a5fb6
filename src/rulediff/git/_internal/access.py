"""Repository access layer - owns pygit2.Repository and decodes objects."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

import pygit2
from pygit2.enums import RepositoryOpenFlag

from rulediff.git._internal.errors import object_read
from rulediff.git.constants import HEADS_PREFIX
from rulediff.git.errors import (
    NotARepositoryError,
    ObjectStoreCorruptionError,
    RefNotFoundError,
)
from rulediff.git.models import Commit, Tree, TreeEntry


class RepoAccess:
    """Owns one pygit2.Repository handle for the duration of an extraction.

    Read-only: nothing here writes objects, references or the working tree.
    Use as a context manager so the handle is released on every exit path.
    """

    def __init__(self, repo_path: Path | str) -> None:
        self._path = Path(repo_path)
        if not self._path.exists():
            raise NotARepositoryError(str(self._path))
        try:
            self._repo: pygit2.Repository | None = pygit2.Repository(
                str(self._path), flags=RepositoryOpenFlag.NO_SEARCH
            )
        except pygit2.GitError as e:
            raise NotARepositoryError(str(self._path)) from e

    def __enter__(self) -> RepoAccess:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._repo is not None:
            self._repo.free()
            self._repo = None

    @property
    def closed(self) -> bool:
        return self._repo is None

    @property
    def repo(self) -> pygit2.Repository:
        if self._repo is None:
            raise ValueError("Repository handle is closed")
        return self._repo

    @property
    def path(self) -> Path:
        return self._path

    # =========================================================================
    # References
    # =========================================================================

    def branch_target(self, name: str) -> str:
        """Return the commit id a local branch points at."""
        refname = name if name.startswith(HEADS_PREFIX) else HEADS_PREFIX + name
        try:
            ref = self.repo.references.get(refname)
        except (pygit2.GitError, ValueError) as e:
            raise RefNotFoundError(name) from e
        if ref is None:
            raise RefNotFoundError(name)
        try:
            target = ref.resolve().target
        except (pygit2.GitError, KeyError) as e:
            raise RefNotFoundError(name) from e
        if not isinstance(target, pygit2.Oid):
            raise RefNotFoundError(name)
        return str(target)

    # =========================================================================
    # Objects
    # =========================================================================

    def _get(self, sha: str, kind: str) -> pygit2.Object:
        with object_read(sha, kind):
            obj = self.repo.get(pygit2.Oid(hex=sha))
        if obj is None:
            raise ObjectStoreCorruptionError(sha, kind, "object not found")
        return obj

    def read_commit(self, sha: str) -> Commit:
        obj = self._get(sha, "commit")
        if isinstance(obj, pygit2.Tag):
            with object_read(sha, "commit"):
                obj = obj.peel(pygit2.Commit)
        if not isinstance(obj, pygit2.Commit):
            raise ObjectStoreCorruptionError(sha, "commit", f"object is a {obj.type_str}")
        with object_read(sha, "commit"):
            return Commit(
                sha=str(obj.id),
                tree_sha=str(obj.tree_id),
                parent_shas=tuple(str(p) for p in obj.parent_ids),
            )

    def read_tree(self, sha: str) -> Tree:
        obj = self._get(sha, "tree")
        if not isinstance(obj, pygit2.Tree):
            raise ObjectStoreCorruptionError(sha, "tree", f"object is a {obj.type_str}")
        with object_read(sha, "tree"):
            entries = tuple(
                TreeEntry(name=entry.name, mode=int(entry.filemode), sha=str(entry.id))
                for entry in obj
            )
        return Tree(sha=sha, entries=entries)

    def read_blob(self, sha: str) -> bytes:
        obj = self._get(sha, "blob")
        if not isinstance(obj, pygit2.Blob):
            raise ObjectStoreCorruptionError(sha, "blob", f"object is a {obj.type_str}")
        with object_read(sha, "blob"):
            return bytes(obj.data)
