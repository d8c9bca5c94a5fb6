"""Internal components for change extraction - not part of public API."""

from rulediff.git._internal.access import RepoAccess
from rulediff.git._internal.errors import ErrorMapper, object_read

__all__ = [
    "ErrorMapper",
    "RepoAccess",
    "object_read",
]
