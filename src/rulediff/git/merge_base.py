"""Best common ancestor search over the commit graph.

Both commits are walked breadth-first in lock step. Every commit reached is
flagged with the side(s) it was reached from. A commit that carries both
flags becomes a candidate and paints its ancestors STALE, since an ancestor
of a common ancestor is never the best one. The walk goes on until every
commit left on the frontier is stale, so a stale candidate met early (for
example an old side branch merged into trunk) is dropped once the real fork
point is reached.

Commits are re-expanded whenever they gain a flag. Within one generation the
candidate side is expanded before the trunk side and parents are taken in
stored order. Among the surviving candidates the one the walk saw first
wins, which favours the first-parent line of the candidate branch.
"""

from __future__ import annotations

import structlog

from rulediff.git.errors import NoCommonAncestorError
from rulediff.git.graph import CommitGraph
from rulediff.git.models import Commit

log = structlog.get_logger()

_LEFT = 1
_RIGHT = 2
_BOTH = _LEFT | _RIGHT
_STALE = 4


def _is_common(state: int) -> bool:
    return state & _BOTH == _BOTH


def find_merge_base(
    graph: CommitGraph,
    left: Commit,
    right: Commit,
    *,
    max_depth: int | None = None,
) -> Commit:
    """Find the best common ancestor of two commits.

    Args:
        graph: Commit graph used to read parents.
        left: First commit (conventionally the candidate branch tip).
        right: Second commit (conventionally the trunk tip).
        max_depth: Maximum number of generations to walk. None walks until
            the search settles. When the bound is hit after a candidate was
            found, the best candidate painted so far is returned.

    Returns:
        A common ancestor that is not an ancestor of any other common
        ancestor found by the walk.

    Raises:
        NoCommonAncestorError: If the histories are disjoint (or do not meet
            within max_depth generations).
    """
    if left.sha == right.sha:
        return left

    commits: dict[str, Commit] = {left.sha: left, right.sha: right}
    flags: dict[str, int] = {left.sha: _LEFT, right.sha: _RIGHT}
    expanded: dict[str, int] = {}
    candidates: set[str] = set()

    frontier = [left.sha, right.sha]
    depth = 0

    while any(not flags[sha] & _STALE for sha in frontier):
        if max_depth is not None and depth >= max_depth:
            log.warning(
                "merge_base.depth_exhausted",
                left=left.sha,
                right=right.sha,
                depth=depth,
                candidates=len(candidates),
            )
            if not candidates:
                raise NoCommonAncestorError(left.sha, right.sha, limit=max_depth)
            break
        depth += 1

        next_frontier: dict[str, None] = {}
        for sha in frontier:
            state = flags[sha]
            if expanded.get(sha) == state:
                continue
            expanded[sha] = state
            inherited = state | _STALE if _is_common(state) else state

            for parent in graph.parents(commits[sha]):
                current = flags.get(parent.sha, 0)
                updated = current | inherited
                if updated == current:
                    continue
                commits.setdefault(parent.sha, parent)
                flags[parent.sha] = updated
                if _is_common(updated) and not _is_common(current) and not updated & _STALE:
                    candidates.add(parent.sha)
                next_frontier[parent.sha] = None
        frontier = list(next_frontier)

    survivors = [sha for sha in commits if sha in candidates and not flags[sha] & _STALE]
    if not survivors:
        raise NoCommonAncestorError(left.sha, right.sha)

    base = commits[survivors[0]]
    log.debug(
        "merge_base.found",
        base=base.sha,
        depth=depth,
        candidates=len(candidates),
        survivors=len(survivors),
    )
    return base
