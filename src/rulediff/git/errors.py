"""Git module error types."""


class GitError(Exception):
    """Base error for change extraction."""

    pass


class NotARepositoryError(GitError):
    """Path is not a git repository."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class RefNotFoundError(GitError):
    """Branch name does not resolve to a commit."""

    def __init__(self, ref: str) -> None:
        super().__init__(f"Reference not found: {ref}")
        self.ref = ref


class NoCommonAncestorError(GitError):
    """Two histories share no commit."""

    def __init__(
        self,
        left_sha: str,
        right_sha: str,
        *,
        left_ref: str | None = None,
        right_ref: str | None = None,
        limit: int | None = None,
    ) -> None:
        left = f"{left_ref} ({left_sha[:12]})" if left_ref else left_sha
        right = f"{right_ref} ({right_sha[:12]})" if right_ref else right_sha
        limit_part = f" within {limit} generations" if limit is not None else ""
        super().__init__(f"No common ancestor between {left} and {right}{limit_part}")
        self.left_sha = left_sha
        self.right_sha = right_sha
        self.left_ref = left_ref
        self.right_ref = right_ref
        self.limit = limit


class ObjectStoreCorruptionError(GitError):
    """A referenced commit, tree or blob cannot be read."""

    def __init__(self, sha: str, kind: str, reason: str | None = None) -> None:
        reason_part = f": {reason}" if reason else ""
        super().__init__(f"Cannot read {kind} {sha}{reason_part}")
        self.sha = sha
        self.kind = kind
        self.reason = reason
