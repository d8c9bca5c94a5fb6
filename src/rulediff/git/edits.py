"""Line-level edit scripts between two blob versions (Myers O(ND) diff)."""

from __future__ import annotations

from collections.abc import Sequence

from rulediff.git.constants import BINARY_SNIFF_BYTES
from rulediff.git.models import Edit


def is_binary(data: bytes) -> bool:
    """NUL byte within the sniff window marks content as binary."""
    return b"\x00" in data[:BINARY_SNIFF_BYTES]


def split_lines(data: bytes) -> list[bytes]:
    """Split on LF, keeping terminators. An unterminated tail is a line."""
    if not data:
        return []
    lines = data.split(b"\n")
    tail = lines.pop()
    result = [line + b"\n" for line in lines]
    if tail:
        result.append(tail)
    return result


def compute_line_edits(old: bytes, new: bytes) -> list[Edit]:
    """Minimal contiguous edits turning old into new.

    Edits come back in ascending order and never overlap. Binary content on
    either side yields no edits.
    """
    if old == new or is_binary(old) or is_binary(new):
        return []
    return diff_sequences(split_lines(old), split_lines(new))


def _intern(a: Sequence[bytes], b: Sequence[bytes]) -> tuple[list[int], list[int]]:
    ids: dict[bytes, int] = {}
    a_ids = [ids.setdefault(line, len(ids)) for line in a]
    b_ids = [ids.setdefault(line, len(ids)) for line in b]
    return a_ids, b_ids


def diff_sequences(a: Sequence[bytes], b: Sequence[bytes]) -> list[Edit]:
    """Edit list between two line sequences."""
    n, m = len(a), len(b)

    prefix = 0
    while prefix < n and prefix < m and a[prefix] == b[prefix]:
        prefix += 1
    suffix = 0
    while suffix < n - prefix and suffix < m - prefix and a[n - 1 - suffix] == b[m - 1 - suffix]:
        suffix += 1

    a_mid, b_mid = _intern(a[prefix : n - suffix], b[prefix : m - suffix])
    edits = []
    for old_start, old_end, new_start, new_end in _myers(a_mid, b_mid):
        edits.append(
            Edit(old_start + prefix, old_end + prefix, new_start + prefix, new_end + prefix)
        )
    return edits


def _myers(a: list[int], b: list[int]) -> list[tuple[int, int, int, int]]:
    n, m = len(a), len(b)
    if n == 0 and m == 0:
        return []
    if n == 0:
        return [(0, 0, 0, m)]
    if m == 0:
        return [(0, n, 0, 0)]

    # v[k] is the furthest x reached on diagonal k; trace keeps v per round
    v: dict[int, int] = {1: 0}
    trace: list[dict[int, int]] = []
    for d in range(n + m + 1):
        trace.append(dict(v))
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[k - 1] < v[k + 1]):
                x = v[k + 1]
            else:
                x = v[k - 1] + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            v[k] = x
            if x >= n and y >= m:
                return _collect(_backtrack(trace, n, m))
    raise AssertionError("edit script longer than n + m")


def _backtrack(trace: list[dict[int, int]], n: int, m: int) -> list[tuple[int, int, int, int]]:
    """Walk the trace back from (n, m); returns moves as (x0, y0, x1, y1)."""
    moves: list[tuple[int, int, int, int]] = []
    x, y = n, m
    for d in range(len(trace) - 1, -1, -1):
        v = trace[d]
        k = x - y
        if k == -d or (k != d and v[k - 1] < v[k + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = v[prev_k]
        prev_y = prev_x - prev_k
        while x > prev_x and y > prev_y:
            moves.append((x - 1, y - 1, x, y))
            x -= 1
            y -= 1
        if d > 0:
            moves.append((prev_x, prev_y, x, y))
        x, y = prev_x, prev_y
    moves.reverse()
    return moves


def _collect(moves: list[tuple[int, int, int, int]]) -> list[tuple[int, int, int, int]]:
    """Merge consecutive non-diagonal moves into half-open edit ranges."""
    edits: list[tuple[int, int, int, int]] = []
    start: tuple[int, int] | None = None
    end: tuple[int, int] = (0, 0)
    for x0, y0, x1, y1 in moves:
        diagonal = x1 - x0 == 1 and y1 - y0 == 1
        if diagonal:
            if start is not None:
                edits.append((start[0], end[0], start[1], end[1]))
                start = None
            continue
        if start is None:
            start = (x0, y0)
        end = (x1, y1)
    if start is not None:
        edits.append((start[0], end[0], start[1], end[1]))
    return edits
