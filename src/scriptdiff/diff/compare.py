"""Text-level comparison facade.

:class:`TextDiffer` wraps the pure :func:`~scriptdiff.diff.engine.diff_lines`
engine with the concerns a caller comparing whole documents needs: line
splitting, an input-size bound applied before the O(n*m) table is built,
structured logging, and metrics.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from scriptdiff.config import DiffConfig
from scriptdiff.errors import ScriptDiffInputTooLargeError
from scriptdiff.models import EditOpType, TextComparison
from scriptdiff.observability import NoopMetricsHook, get_logger
from scriptdiff.render.text_renderer import DiffTextRenderer

from .engine import diff_lines, summarize
from .lines import split_lines

log = get_logger("scriptdiff.compare")


class TextDiffer:
    """Compare an original script with an edited replacement.

    Parameters
    ----------
    config:
        Comparison settings.  Defaults to ``DiffConfig()``.
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config or DiffConfig()
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )

    def compare(self, original_text: str, updated_text: str) -> TextComparison:
        """Split both texts into lines and diff them.

        Raises
        ------
        ScriptDiffInputTooLargeError
            If either text has more lines than ``config.max_lines``.
        """
        normalize = self._config.normalize_newlines
        return self.compare_lines(
            split_lines(original_text, normalize_newlines=normalize),
            split_lines(updated_text, normalize_newlines=normalize),
        )

    def compare_lines(
        self,
        original: Sequence[str],
        updated: Sequence[str],
    ) -> TextComparison:
        """Diff two pre-split line sequences.

        Raises
        ------
        ScriptDiffInputTooLargeError
            If either sequence is longer than ``config.max_lines``.
        """
        self._check_size("original", len(original))
        self._check_size("updated", len(updated))

        start = time.monotonic()
        ops = diff_lines(original, updated)
        elapsed_ms = (time.monotonic() - start) * 1000

        stats = summarize(ops)
        cells = (len(original) + 1) * (len(updated) + 1)
        self._emit_metrics(stats.kept, stats.added, stats.removed, elapsed_ms, cells)

        log.debug(
            "diff computed",
            extra={"extra_fields": {
                "original_lines": len(original),
                "updated_lines": len(updated),
                "kept": stats.kept,
                "added": stats.added,
                "removed": stats.removed,
                "duration_ms": round(elapsed_ms, 3),
            }},
        )

        if self._config.debug_dump_diff:
            sys.stderr.write(DiffTextRenderer(self._config).render(ops) + "\n")

        return TextComparison(
            ops=ops,
            stats=stats,
            original=list(original),
            updated=list(updated),
        )

    def _check_size(self, side: str, lines: int) -> None:
        max_lines = self._config.max_lines
        if max_lines is None or lines <= max_lines:
            return
        self._metrics.increment(
            "scriptdiff.input_rejected_total", tags={"side": side},
        )
        log.warning(
            "diff input rejected",
            extra={"extra_fields": {"side": side, "lines": lines, "max_lines": max_lines}},
        )
        raise ScriptDiffInputTooLargeError(
            f"The {side} text has {lines} lines, more than the limit of {max_lines}",
            context={"side": side, "lines": lines, "max_lines": max_lines},
        )

    def _emit_metrics(
        self, kept: int, added: int, removed: int, elapsed_ms: float, cells: int,
    ) -> None:
        counts = {
            EditOpType.KEPT: kept,
            EditOpType.ADDED: added,
            EditOpType.REMOVED: removed,
        }
        for op_type, count in counts.items():
            if count:
                self._metrics.increment(
                    "scriptdiff.diff_ops_total", count, tags={"op": op_type.value},
                )
        self._metrics.timing("scriptdiff.diff_duration_ms", elapsed_ms)
        self._metrics.gauge("scriptdiff.lcs_cells", float(cells))
