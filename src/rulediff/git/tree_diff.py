"""Recursive tree comparison with rename and copy detection."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, replace

import structlog

from rulediff.git._internal.access import RepoAccess
from rulediff.git.constants import (
    ADMIN_NAMES,
    DEFAULT_RENAME_LIMIT,
    DEFAULT_RENAME_THRESHOLD,
    EMPTY_BLOB_SHA,
    MODE_GITLINK,
    MODE_TREE,
)
from rulediff.git.edits import split_lines
from rulediff.git.models import ChangeType, DiffEntry, TreeEntry

log = structlog.get_logger()


def similarity(old: bytes, new: bytes) -> int:
    """Percentage of content shared by two blobs, counted in bytes over lines."""
    if old == new:
        return 100
    larger = max(len(old), len(new))
    if larger == 0:
        return 100
    old_lines = Counter(split_lines(old))
    new_lines = Counter(split_lines(new))
    shared = sum(len(line) * min(count, new_lines[line]) for line, count in old_lines.items())
    return shared * 100 // larger


def _sort_key(entry: TreeEntry) -> bytes:
    # Object-store order: trees compare as if their name ended with "/"
    name = entry.name.encode("utf-8", "surrogateescape")
    return name + b"/" if entry.mode == MODE_TREE else name


def _join(prefix: str, name: str) -> str:
    return f"{prefix}/{name}" if prefix else name


def _pairable(sha: str | None, mode: int | None) -> bool:
    return sha is not None and sha != EMPTY_BLOB_SHA and mode != MODE_GITLINK


@dataclass
class _Slot:
    """Raw walk result with the position it sorts at."""

    position: int
    entry: DiffEntry


class TreeDiffer:
    """Compares two trees and yields path-level change entries.

    Subtrees with identical ids are skipped without being read. Entries
    that exist only on one side are expanded recursively into per-file
    adds or deletes.
    """

    def __init__(
        self,
        access: RepoAccess,
        *,
        rename_threshold: int = DEFAULT_RENAME_THRESHOLD,
        rename_limit: int = DEFAULT_RENAME_LIMIT,
        detect_renames: bool = True,
        detect_copies: bool = True,
    ) -> None:
        if not 1 <= rename_threshold <= 100:
            raise ValueError(f"rename_threshold must be 1-100, got {rename_threshold}")
        self._access = access
        self._threshold = rename_threshold
        self._limit = rename_limit
        self._detect_renames = detect_renames
        self._detect_copies = detect_copies
        self._blob_cache: dict[str, bytes] = {}

    def diff(self, old_tree_sha: str | None, new_tree_sha: str | None) -> list[DiffEntry]:
        """Compare two trees. Either side may be None for an empty tree."""
        self._blob_cache.clear()
        raw: list[DiffEntry] = []
        self._walk("", old_tree_sha, new_tree_sha, raw)
        if not self._detect_renames:
            return raw
        return self._pair(raw)

    # =========================================================================
    # Walk
    # =========================================================================

    def _entries(self, tree_sha: str | None) -> list[TreeEntry]:
        if tree_sha is None:
            return []
        tree = self._access.read_tree(tree_sha)
        entries = [e for e in tree.entries if e.name not in ADMIN_NAMES]
        entries.sort(key=_sort_key)
        return entries

    def _walk(
        self,
        prefix: str,
        old_tree_sha: str | None,
        new_tree_sha: str | None,
        out: list[DiffEntry],
    ) -> None:
        if old_tree_sha is not None and old_tree_sha == new_tree_sha:
            return
        old_entries = self._entries(old_tree_sha)
        new_entries = self._entries(new_tree_sha)
        i = j = 0
        while i < len(old_entries) or j < len(new_entries):
            old = old_entries[i] if i < len(old_entries) else None
            new = new_entries[j] if j < len(new_entries) else None
            if old is not None and new is not None:
                old_key, new_key = _sort_key(old), _sort_key(new)
                if old_key < new_key:
                    new = None
                elif new_key < old_key:
                    old = None
            if old is not None:
                i += 1
            if new is not None:
                j += 1
            self._compare(prefix, old, new, out)

    def _compare(
        self,
        prefix: str,
        old: TreeEntry | None,
        new: TreeEntry | None,
        out: list[DiffEntry],
    ) -> None:
        if old is not None and new is not None:
            path = _join(prefix, new.name)
            if old.sha == new.sha and old.mode == new.mode:
                return
            if old.is_tree:
                self._walk(path, old.sha, new.sha, out)
                return
            out.append(
                DiffEntry(
                    old_path=path,
                    new_path=path,
                    change_type=ChangeType.MODIFY,
                    old_sha=old.sha,
                    new_sha=new.sha,
                    old_mode=old.mode,
                    new_mode=new.mode,
                )
            )
        elif old is not None:
            path = _join(prefix, old.name)
            if old.is_tree:
                self._walk(path, old.sha, None, out)
                return
            out.append(
                DiffEntry(
                    old_path=path,
                    new_path=None,
                    change_type=ChangeType.DELETE,
                    old_sha=old.sha,
                    new_sha=None,
                    old_mode=old.mode,
                )
            )
        elif new is not None:
            path = _join(prefix, new.name)
            if new.is_tree:
                self._walk(path, None, new.sha, out)
                return
            out.append(
                DiffEntry(
                    old_path=None,
                    new_path=path,
                    change_type=ChangeType.ADD,
                    old_sha=None,
                    new_sha=new.sha,
                    new_mode=new.mode,
                )
            )

    # =========================================================================
    # Rename / copy pairing
    # =========================================================================

    def _blob(self, sha: str) -> bytes:
        data = self._blob_cache.get(sha)
        if data is None:
            data = self._access.read_blob(sha)
            self._blob_cache[sha] = data
        return data

    def _pair(self, raw: list[DiffEntry]) -> list[DiffEntry]:
        slots = [_Slot(i, e) for i, e in enumerate(raw)]
        adds = [
            s
            for s in slots
            if s.entry.change_type is ChangeType.ADD
            and _pairable(s.entry.new_sha, s.entry.new_mode)
        ]
        deletes = [
            s
            for s in slots
            if s.entry.change_type is ChangeType.DELETE
            and _pairable(s.entry.old_sha, s.entry.old_mode)
        ]
        if not adds:
            return raw

        renamed_sources: list[DiffEntry] = []
        consumed: set[int] = set()  # positions of deletes turned into renames
        paired: set[int] = set()  # positions of adds already paired

        if deletes:
            matches = self._match(adds, deletes)
            for add, delete, score in matches:
                add.entry = replace(
                    add.entry,
                    old_path=delete.entry.old_path,
                    change_type=ChangeType.RENAME,
                    old_sha=delete.entry.old_sha,
                    old_mode=delete.entry.old_mode,
                    score=score,
                )
                consumed.add(delete.position)
                paired.add(add.position)
                renamed_sources.append(delete.entry)

        if self._detect_copies:
            remaining = [s for s in adds if s.position not in paired]
            sources = [
                s
                for s in slots
                if s.entry.change_type is ChangeType.MODIFY
                and _pairable(s.entry.old_sha, s.entry.old_mode)
            ]
            sources += [_Slot(-1, e) for e in renamed_sources]
            if remaining and sources:
                for add, source, score in self._match(remaining, sources, exclusive=False):
                    add.entry = replace(
                        add.entry,
                        old_path=source.entry.old_path,
                        change_type=ChangeType.COPY,
                        old_sha=source.entry.old_sha,
                        old_mode=source.entry.old_mode,
                        score=score,
                    )
                    paired.add(add.position)

        if paired:
            log.debug("tree_diff.paired", renames=len(consumed), copies=len(paired) - len(consumed))
        return [s.entry for s in slots if s.position not in consumed]

    def _match(
        self,
        targets: list[_Slot],
        sources: list[_Slot],
        *,
        exclusive: bool = True,
    ) -> list[tuple[_Slot, _Slot, int]]:
        """Pair targets with sources: exact ids first, then best similarity.

        With exclusive=True each source is used at most once (renames);
        otherwise a source may feed several targets (copies).
        """
        result: list[tuple[_Slot, _Slot, int]] = []
        used_targets: set[int] = set()
        used_sources: set[int] = set()

        by_sha: dict[str, list[int]] = {}
        for idx, source in enumerate(sources):
            by_sha.setdefault(source.entry.old_sha or "", []).append(idx)
        for t_idx, target in enumerate(targets):
            for s_idx in by_sha.get(target.entry.new_sha or "", []):
                if exclusive and s_idx in used_sources:
                    continue
                result.append((target, sources[s_idx], 100))
                used_targets.add(t_idx)
                used_sources.add(s_idx)
                break

        open_targets = [t for t in range(len(targets)) if t not in used_targets]
        open_sources = [s for s in range(len(sources)) if not (exclusive and s in used_sources)]
        if not open_targets or not open_sources:
            return result
        if len(open_targets) * len(open_sources) > self._limit * self._limit:
            log.info(
                "tree_diff.rename_limit_exceeded",
                targets=len(open_targets),
                sources=len(open_sources),
                limit=self._limit,
            )
            return result

        scored: list[tuple[int, int, int]] = []
        for t_idx in open_targets:
            new_data = self._blob(targets[t_idx].entry.new_sha or "")
            for s_idx in open_sources:
                old_data = self._blob(sources[s_idx].entry.old_sha or "")
                score = similarity(old_data, new_data)
                if score >= self._threshold:
                    scored.append((score, t_idx, s_idx))
        # Best score first; ties keep walk order of target then source
        scored.sort(key=lambda item: (-item[0], item[1], item[2]))
        for score, t_idx, s_idx in scored:
            if t_idx in used_targets or (exclusive and s_idx in used_sources):
                continue
            result.append((targets[t_idx], sources[s_idx], score))
            used_targets.add(t_idx)
            used_sources.add(s_idx)
        return result
