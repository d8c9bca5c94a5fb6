"""Change extraction between a candidate branch and its trunk."""

from __future__ import annotations

from pathlib import Path

import structlog

from rulediff.git._internal.access import RepoAccess
from rulediff.git.aggregate import aggregate
from rulediff.git.constants import (
    DEFAULT_RENAME_LIMIT,
    DEFAULT_RENAME_THRESHOLD,
    MODE_GITLINK,
)
from rulediff.git.edits import compute_line_edits
from rulediff.git.errors import NoCommonAncestorError
from rulediff.git.graph import CommitGraph
from rulediff.git.merge_base import find_merge_base
from rulediff.git.models import ChangeType, DiffEntry, Edit, GitChange
from rulediff.git.tree_diff import TreeDiffer

log = structlog.get_logger()

DEFAULT_TRUNK = "master"


class ChangeExtractor:
    """Computes the changes a branch introduces relative to its trunk.

    Each call to extract() opens its own repository handle and releases it
    before returning, on success or failure. Instances hold no state shared
    between calls beyond configuration.
    """

    def __init__(
        self,
        repo_path: Path | str,
        *,
        trunk: str = DEFAULT_TRUNK,
        rename_threshold: int = DEFAULT_RENAME_THRESHOLD,
        rename_limit: int = DEFAULT_RENAME_LIMIT,
        detect_copies: bool = True,
        max_walk_depth: int | None = None,
    ) -> None:
        self._repo_path = Path(repo_path)
        self._trunk = trunk
        self._rename_threshold = rename_threshold
        self._rename_limit = rename_limit
        self._detect_copies = detect_copies
        self._max_walk_depth = max_walk_depth

    @property
    def trunk(self) -> str:
        return self._trunk

    def extract(self, branch: str, trunk: str | None = None) -> list[GitChange]:
        """Changed files of branch since its merge base with trunk.

        Raises:
            NotARepositoryError: Repository path cannot be opened.
            RefNotFoundError: Either branch does not exist.
            NoCommonAncestorError: The branches share no history.
            ObjectStoreCorruptionError: Any object cannot be read.
        """
        trunk = trunk or self._trunk
        with RepoAccess(self._repo_path) as access:
            graph = CommitGraph(access)
            candidate = graph.resolve_branch_tip(branch)
            trunk_tip = graph.resolve_branch_tip(trunk)
            try:
                base = find_merge_base(graph, candidate, trunk_tip, max_depth=self._max_walk_depth)
            except NoCommonAncestorError as e:
                raise NoCommonAncestorError(
                    candidate.sha,
                    trunk_tip.sha,
                    left_ref=branch,
                    right_ref=trunk,
                    limit=e.limit,
                ) from e
            log.info(
                "extract.merge_base",
                branch=branch,
                trunk=trunk,
                candidate=candidate.short_sha,
                base=base.short_sha,
            )

            differ = TreeDiffer(
                access,
                rename_threshold=self._rename_threshold,
                rename_limit=self._rename_limit,
                detect_copies=self._detect_copies,
            )
            entries = differ.diff(base.tree_sha, candidate.tree_sha)
            edits = {
                entry: self._line_edits(access, entry)
                for entry in entries
                if entry.change_type is not ChangeType.DELETE
            }

        changes = aggregate(entries, edits)
        log.info("extract.done", branch=branch, entries=len(entries), changes=len(changes))
        return changes

    @staticmethod
    def _line_edits(access: RepoAccess, entry: DiffEntry) -> list[Edit]:
        if not entry.content_changed:
            return []
        if MODE_GITLINK in (entry.old_mode, entry.new_mode):
            return []
        old = access.read_blob(entry.old_sha) if entry.old_sha else b""
        new = access.read_blob(entry.new_sha) if entry.new_sha else b""
        return compute_line_edits(old, new)


def extract_changes(
    repo_path: Path | str,
    branch: str,
    trunk: str = DEFAULT_TRUNK,
    **options: object,
) -> list[GitChange]:
    """Convenience wrapper: ChangeExtractor(repo_path, trunk=trunk, ...).extract(branch)."""
    extractor = ChangeExtractor(repo_path, trunk=trunk, **options)  # type: ignore[arg-type]
    return extractor.extract(branch)
