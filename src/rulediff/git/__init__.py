"""Git change extraction module."""

from rulediff.git.aggregate import aggregate
from rulediff.git.edits import compute_line_edits, is_binary, split_lines
from rulediff.git.errors import (
    GitError,
    NoCommonAncestorError,
    NotARepositoryError,
    ObjectStoreCorruptionError,
    RefNotFoundError,
)
from rulediff.git.extract import ChangeExtractor, extract_changes
from rulediff.git.graph import CommitGraph
from rulediff.git.merge_base import find_merge_base
from rulediff.git.models import (
    ChangeType,
    Commit,
    DiffEntry,
    Edit,
    GitChange,
    Tree,
    TreeEntry,
)
from rulediff.git.tree_diff import TreeDiffer, similarity

__all__ = [
    # Entry points
    "ChangeExtractor",
    "extract_changes",
    # Components
    "CommitGraph",
    "find_merge_base",
    "TreeDiffer",
    "similarity",
    "compute_line_edits",
    "is_binary",
    "split_lines",
    "aggregate",
    # Models
    "Commit",
    "Tree",
    "TreeEntry",
    "ChangeType",
    "DiffEntry",
    "Edit",
    "GitChange",
    # Errors
    "GitError",
    "NotARepositoryError",
    "RefNotFoundError",
    "NoCommonAncestorError",
    "ObjectStoreCorruptionError",
]
