"""Commit graph access: branch tips and one-generation ancestry."""

from __future__ import annotations

import structlog

from rulediff.git._internal.access import RepoAccess
from rulediff.git.models import Commit

log = structlog.get_logger()


class CommitGraph:
    """Reads commits from the object store; no caching beyond one invocation."""

    def __init__(self, access: RepoAccess) -> None:
        self._access = access

    def resolve_branch_tip(self, branch: str) -> Commit:
        """Resolve a branch name to its tip commit.

        Raises:
            RefNotFoundError: If the branch does not exist.
            ObjectStoreCorruptionError: If the tip commit cannot be read.
        """
        sha = self._access.branch_target(branch)
        commit = self._access.read_commit(sha)
        log.debug("graph.branch_tip", branch=branch, sha=commit.sha)
        return commit

    def commit(self, sha: str) -> Commit:
        return self._access.read_commit(sha)

    def parents(self, commit: Commit) -> list[Commit]:
        """Parents in stored order (first parent first). Empty for root commits."""
        return [self._access.read_commit(sha) for sha in commit.parent_shas]
