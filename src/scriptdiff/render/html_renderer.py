"""HTML rendering of an edit script.

Produces a self-contained ``<pre><code>`` fragment with one ``<div>`` per
line.  Every row carries a kind-specific CSS class so added and removed
lines can be styled distinctly (for instance green and red backgrounds);
no inline styles are emitted.

Output shape, with the default ``"scriptdiff"`` class prefix::

    <pre class="scriptdiff"><code>
    <div class="scriptdiff-line scriptdiff-added"><span class="scriptdiff-marker">+ </span><span class="scriptdiff-text">new line</span></div>
    ...
    </code></pre>
"""

from __future__ import annotations

import html
from collections.abc import Iterable

from scriptdiff.config import DiffConfig
from scriptdiff.models import EditOp, EditOpType

from .text_renderer import check_op


class DiffHtmlRenderer:
    """Render edit scripts as an escaped HTML fragment.

    Parameters
    ----------
    config:
        Supplies the marker prefixes and ``html_class_prefix``.
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config or DiffConfig()
        self._markers: dict[EditOpType, str] = {
            EditOpType.KEPT: html.escape(self._config.kept_prefix),
            EditOpType.ADDED: html.escape(self._config.added_prefix),
            EditOpType.REMOVED: html.escape(self._config.removed_prefix),
        }

    def css_class(self, suffix: str) -> str:
        """Return ``"<prefix>-<suffix>"``, or the bare prefix for ``""``."""
        prefix = self._config.html_class_prefix
        return f"{prefix}-{suffix}" if suffix else prefix

    def render_row(self, op: EditOp) -> str:
        """Render a single operation as one ``<div>`` row."""
        row_class = f"{self.css_class('line')} {self.css_class(op.op_type.value)}"
        return (
            f'<div class="{row_class}">'
            f'<span class="{self.css_class("marker")}">{self._markers[op.op_type]}</span>'
            f'<span class="{self.css_class("text")}">{html.escape(op.value)}</span>'
            "</div>"
        )

    def render(self, ops: Iterable[EditOp]) -> str:
        """Render the full fragment for *ops*."""
        rows = [
            self.render_row(check_op(op, index)) for index, op in enumerate(ops)
        ]
        body = "\n".join(rows)
        return f'<pre class="{self.css_class("")}"><code>\n{body}\n</code></pre>'
