"""Line-level diff engine.

Aligns two line sequences along a longest common subsequence and emits a
flat, forward-ordered edit script of kept, added, and removed lines.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from scriptdiff.models import DiffResult, DiffStats, EditOp, EditOpType

from .lcs_table import LCSTable


def diff_lines(original: Sequence[str], updated: Sequence[str]) -> DiffResult:
    """Compute the line edit script that turns *original* into *updated*.

    The number of ``KEPT`` operations equals the LCS length of the two
    sequences.  Filtering the result to ``KEPT`` and ``REMOVED`` payloads
    reproduces *original*; filtering to ``KEPT`` and ``ADDED`` reproduces
    *updated*.

    When several alignments share the maximal length, the one chosen is
    fixed by the backtracking order: walking back from the end, a match is
    kept immediately, otherwise the line from *updated* is emitted as
    ``ADDED`` whenever ``M[i][j-1] >= M[i-1][j]`` and only then is the
    line from *original* emitted as ``REMOVED``.

    Parameters
    ----------
    original:
        Lines of the text before editing.  May be empty.
    updated:
        Lines of the text after editing.  May be empty.

    Returns
    -------
    DiffResult
        Operations in forward order.  The function is pure and never
        raises for string input.

    Examples
    --------
    >>> [(op.op_type.value, op.value) for op in diff_lines(["a", "b"], ["a", "c"])]
    [('kept', 'a'), ('removed', 'b'), ('added', 'c')]
    """
    table = LCSTable(original, updated)

    # Backtrack from the bottom-right cell; ops are collected in reverse.
    ops: DiffResult = []
    i, j = len(original), len(updated)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and original[i - 1] == updated[j - 1]:
            ops.append(EditOp(EditOpType.KEPT, original[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i, j - 1] >= table[i - 1, j]):
            ops.append(EditOp(EditOpType.ADDED, updated[j - 1]))
            j -= 1
        else:
            ops.append(EditOp(EditOpType.REMOVED, original[i - 1]))
            i -= 1

    ops.reverse()
    return ops


def original_lines(ops: Iterable[EditOp]) -> list[str]:
    """Rebuild the original line sequence from an edit script."""
    return [op.value for op in ops if op.op_type != EditOpType.ADDED]


def updated_lines(ops: Iterable[EditOp]) -> list[str]:
    """Rebuild the updated line sequence from an edit script."""
    return [op.value for op in ops if op.op_type != EditOpType.REMOVED]


def summarize(ops: Iterable[EditOp]) -> DiffStats:
    """Count the operations of each kind in *ops*."""
    kept = added = removed = 0
    for op in ops:
        if op.op_type == EditOpType.KEPT:
            kept += 1
        elif op.op_type == EditOpType.ADDED:
            added += 1
        else:
            removed += 1
    return DiffStats(kept=kept, added=added, removed=removed)
