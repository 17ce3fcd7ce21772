"""Configuration for scriptdiff.

:class:`DiffConfig` is a plain dataclass that captures every tuneable knob
used by :class:`~scriptdiff.diff.compare.TextDiffer` and the renderers.
The pure engine function :func:`~scriptdiff.diff.engine.diff_lines` takes
no configuration at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_MAX_LINES: int = 5000
"""Per-side line bound applied by ``TextDiffer`` before the O(n*m) table
is allocated.  Scripts are expected to stay well below this."""


@dataclass
class DiffConfig:
    """Complete configuration for a text comparison.

    Every parameter has a default, so ``DiffConfig()`` is always valid.

    Parameters
    ----------
    max_lines:
        Maximum number of lines accepted on either side of a text
        comparison.  ``None`` disables the bound.
    normalize_newlines:
        Convert ``\\r\\n`` and lone ``\\r`` to ``\\n`` before splitting.
    kept_prefix:
        Marker written before unchanged lines in plain-text output.
    added_prefix:
        Marker written before added lines.
    removed_prefix:
        Marker written before removed lines.
    html_class_prefix:
        Prefix for every CSS class emitted by the HTML renderer.
    metrics:
        Optional :class:`~scriptdiff.observability.MetricsHook`.
    debug_dump_diff:
        Write the rendered plain-text diff to *stderr* on each comparison.
    """

    # ── Input bounds ────────────────────────────────────────────────────
    max_lines: int | None = DEFAULT_MAX_LINES

    normalize_newlines: bool = False

    # ── Presentation ────────────────────────────────────────────────────
    kept_prefix: str = "  "

    added_prefix: str = "+ "

    removed_prefix: str = "- "

    html_class_prefix: str = "scriptdiff"

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_diff: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_lines is not None and self.max_lines < 1:
            raise ValueError(f"max_lines must be >= 1 or None, got {self.max_lines}")
        if self.added_prefix == self.removed_prefix:
            raise ValueError(
                f"added_prefix and removed_prefix must differ, both are {self.added_prefix!r}"
            )
        if not self.html_class_prefix:
            raise ValueError("html_class_prefix must be a non-empty string")
