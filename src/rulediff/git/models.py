"""Immutable data models for change extraction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from rulediff.git.constants import MODE_GITLINK, MODE_TREE


@dataclass(frozen=True, slots=True)
class Commit:
    """A commit as read from the object store."""

    sha: str
    tree_sha: str
    parent_shas: tuple[str, ...]

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @property
    def is_root(self) -> bool:
        return not self.parent_shas

    @property
    def is_merge(self) -> bool:
        return len(self.parent_shas) > 1


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """Single entry of a tree: one path segment."""

    name: str
    mode: int
    sha: str

    @property
    def is_tree(self) -> bool:
        return self.mode == MODE_TREE

    @property
    def is_gitlink(self) -> bool:
        return self.mode == MODE_GITLINK


@dataclass(frozen=True, slots=True)
class Tree:
    """Tree snapshot; entries kept in object-store order."""

    sha: str
    entries: tuple[TreeEntry, ...]


class ChangeType(StrEnum):
    """Path-level change classification."""

    ADD = "add"
    MODIFY = "modify"
    RENAME = "rename"
    COPY = "copy"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """One path-level difference between two trees."""

    old_path: str | None
    new_path: str | None
    change_type: ChangeType
    old_sha: str | None
    new_sha: str | None
    old_mode: int | None = None
    new_mode: int | None = None
    score: int | None = None  # similarity percentage for renames/copies

    @property
    def path(self) -> str:
        """Path reported for this entry (new side unless deleted)."""
        path = self.old_path if self.change_type is ChangeType.DELETE else self.new_path
        assert path is not None
        return path

    @property
    def content_changed(self) -> bool:
        return self.old_sha != self.new_sha


@dataclass(frozen=True, slots=True)
class Edit:
    """Contiguous replaced region, half-open on both sides.

    old_start == old_end is a pure insertion, new_start == new_end a pure
    deletion, otherwise a replacement.
    """

    old_start: int
    old_end: int
    new_start: int
    new_end: int

    @property
    def is_insert(self) -> bool:
        return self.old_start == self.old_end and self.new_start < self.new_end

    @property
    def is_delete(self) -> bool:
        return self.new_start == self.new_end and self.old_start < self.old_end

    @property
    def is_replace(self) -> bool:
        return self.old_start < self.old_end and self.new_start < self.new_end

    @property
    def deleted_lines(self) -> range:
        return range(self.old_start, self.old_end)

    @property
    def added_lines(self) -> range:
        return range(self.new_start, self.new_end)


@dataclass(frozen=True, slots=True)
class GitChange:
    """A changed file with zero-indexed added and deleted line numbers."""

    path: str
    added_lines: tuple[int, ...] = ()
    deleted_lines: tuple[int, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.path,
            "added_lines": list(self.added_lines),
            "deleted_lines": list(self.deleted_lines),
        }
