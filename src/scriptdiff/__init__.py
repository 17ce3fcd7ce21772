"""scriptdiff: line-level review diffs for edited scripts.

Public re-exports
-----------------

* **Engine:** :func:`diff_lines` and its reconstruction helpers
* **Facade:** :class:`TextDiffer`
* **Presentation:** :class:`DiffTextRenderer`, :class:`DiffHtmlRenderer`
* **Configuration:** :class:`DiffConfig`
* **Errors:** Every :class:`ScriptDiffError` subclass and :class:`ErrorCode`
* **Models:** :class:`EditOp`, :class:`EditOpType`, :class:`DiffStats`,
  :class:`TextComparison`

Usage::

    from scriptdiff import DiffTextRenderer, TextDiffer

    comparison = TextDiffer().compare(stored_script, edited_script)
    print(DiffTextRenderer().render(comparison.ops))
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from scriptdiff.config import DEFAULT_MAX_LINES, DiffConfig

# ── Engine and facade ──────────────────────────────────────────────────
from scriptdiff.diff import (
    TextDiffer,
    diff_lines,
    join_lines,
    original_lines,
    split_lines,
    summarize,
    updated_lines,
)

# ── Errors ──────────────────────────────────────────────────────────────
from scriptdiff.errors import (
    ErrorCode,
    ScriptDiffError,
    ScriptDiffInputTooLargeError,
    ScriptDiffRenderError,
)

# ── Models ──────────────────────────────────────────────────────────────
from scriptdiff.models import (
    DiffResult,
    DiffStats,
    EditOp,
    EditOpType,
    TextComparison,
)

# ── Presentation ────────────────────────────────────────────────────────
from scriptdiff.render import DiffHtmlRenderer, DiffTextRenderer

__all__ = [
    # Engine
    "diff_lines",
    "original_lines",
    "updated_lines",
    "summarize",
    "split_lines",
    "join_lines",
    # Facade
    "TextDiffer",
    # Presentation
    "DiffTextRenderer",
    "DiffHtmlRenderer",
    # Configuration
    "DiffConfig",
    "DEFAULT_MAX_LINES",
    # Errors
    "ScriptDiffError",
    "ErrorCode",
    "ScriptDiffInputTooLargeError",
    "ScriptDiffRenderError",
    # Models
    "DiffResult",
    "DiffStats",
    "EditOp",
    "EditOpType",
    "TextComparison",
]
