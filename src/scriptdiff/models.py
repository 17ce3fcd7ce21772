"""Public data models for scriptdiff.

All types are plain dataclasses with no behaviour beyond what is needed
for structural equality and hashing (where frozen).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class EditOpType(str, Enum):
    """Line classifications emitted by the diff engine."""

    KEPT = "kept"
    """The line is present, unchanged, on both sides."""

    ADDED = "added"
    """The line exists only in the updated text."""

    REMOVED = "removed"
    """The line exists only in the original text."""


# ---------------------------------------------------------------------------
# Diff engine types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EditOp:
    """One line of a rendered diff, in output order.

    Attributes
    ----------
    op_type:
        Whether the line was kept, added, or removed.
    value:
        The full line content, without its line break.
    """

    op_type: EditOpType
    value: str


DiffResult = list[EditOp]
"""An ordered edit script covering both inputs from first line to last."""


@dataclass(frozen=True)
class DiffStats:
    """Operation counts for a :data:`DiffResult`.

    Attributes
    ----------
    kept:
        Number of ``KEPT`` operations (the LCS length).
    added:
        Number of ``ADDED`` operations.
    removed:
        Number of ``REMOVED`` operations.
    """

    kept: int = 0
    added: int = 0
    removed: int = 0

    @property
    def changed(self) -> int:
        return self.added + self.removed

    @property
    def is_identical(self) -> bool:
        return self.changed == 0

    @property
    def similarity(self) -> float:
        """Ratio ``2 * kept / (original lines + updated lines)``.

        Two empty sequences are considered fully similar (``1.0``).
        """
        total = 2 * self.kept + self.added + self.removed
        if total == 0:
            return 1.0
        return 2 * self.kept / total


# ---------------------------------------------------------------------------
# Facade result type
# ---------------------------------------------------------------------------

@dataclass
class TextComparison:
    """Result of :meth:`TextDiffer.compare`.

    Attributes
    ----------
    ops:
        The edit script.
    stats:
        Operation counts for *ops*.
    original:
        The original text split into lines.
    updated:
        The updated text split into lines.
    """

    ops: DiffResult = field(default_factory=list)
    stats: DiffStats = field(default_factory=DiffStats)
    original: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
