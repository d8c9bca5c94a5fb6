"""Assembly of final change records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from rulediff.git.models import ChangeType, DiffEntry, Edit, GitChange


def aggregate(
    entries: Sequence[DiffEntry],
    edits_by_entry: Mapping[DiffEntry, Iterable[Edit]],
) -> list[GitChange]:
    """Build one GitChange per surviving entry, in entry order.

    Deletions are dropped. Each edit contributes its old range to the
    deleted lines and its new range to the added lines.
    """
    changes: list[GitChange] = []
    for entry in entries:
        if entry.change_type is ChangeType.DELETE:
            continue
        added: set[int] = set()
        deleted: set[int] = set()
        for edit in edits_by_entry.get(entry, ()):
            deleted.update(edit.deleted_lines)
            added.update(edit.added_lines)
        changes.append(
            GitChange(
                path=entry.path,
                added_lines=tuple(sorted(added)),
                deleted_lines=tuple(sorted(deleted)),
            )
        )
    return changes
