"""Plain-text rendering of an edit script.

Each operation becomes one output line with a fixed-width marker gutter:
unchanged lines get ``config.kept_prefix``, added lines
``config.added_prefix`` and removed lines ``config.removed_prefix``.

Usage::

    from scriptdiff.render import DiffTextRenderer

    print(DiffTextRenderer().render(ops))
"""

from __future__ import annotations

from collections.abc import Iterable

from scriptdiff.config import DiffConfig
from scriptdiff.errors import ScriptDiffRenderError
from scriptdiff.models import EditOp, EditOpType


def check_op(op: object, index: int) -> EditOp:
    """Return *op* unchanged, or raise if it is not an :class:`EditOp`."""
    if not isinstance(op, EditOp):
        raise ScriptDiffRenderError(
            f"Expected EditOp at position {index}, got {type(op).__name__}",
            context={"index": index, "type": type(op).__name__},
        )
    return op


class DiffTextRenderer:
    """Render edit scripts as marker-prefixed text lines.

    Parameters
    ----------
    config:
        Supplies the three line prefixes.  Defaults to ``DiffConfig()``.
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config or DiffConfig()
        self._prefixes: dict[EditOpType, str] = {
            EditOpType.KEPT: self._config.kept_prefix,
            EditOpType.ADDED: self._config.added_prefix,
            EditOpType.REMOVED: self._config.removed_prefix,
        }

    def render_lines(self, ops: Iterable[EditOp]) -> list[str]:
        """Return one prefixed string per operation, in order."""
        lines: list[str] = []
        for index, op in enumerate(ops):
            op = check_op(op, index)
            lines.append(self._prefixes[op.op_type] + op.value)
        return lines

    def render(self, ops: Iterable[EditOp]) -> str:
        """Return the rendered lines joined with ``"\\n"``."""
        return "\n".join(self.render_lines(ops))
