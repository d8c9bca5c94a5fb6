"""Object-store constants shared by the extraction components."""

from __future__ import annotations

# Tree entry modes
MODE_TREE = 0o040000
MODE_BLOB = 0o100644
MODE_BLOB_EXECUTABLE = 0o100755
MODE_SYMLINK = 0o120000
MODE_GITLINK = 0o160000

# Well-known object ids
EMPTY_BLOB_SHA = "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391"

# Administrative path segments never reported as changes
ADMIN_NAMES = frozenset({".git"})

# Branch reference namespace
HEADS_PREFIX = "refs/heads/"

# Bytes inspected by the NUL-byte binary heuristic (same window as git)
BINARY_SNIFF_BYTES = 8000

DEFAULT_RENAME_THRESHOLD = 50
DEFAULT_RENAME_LIMIT = 1000
