"""Tests for the TextDiffer facade."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from scriptdiff.config import DiffConfig
from scriptdiff.diff.compare import TextDiffer
from scriptdiff.errors import ErrorCode, ScriptDiffInputTooLargeError
from scriptdiff.models import DiffStats, EditOp, EditOpType


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(self, name: str, value: int = 1, tags: dict[str, str] | None = None) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(self, name: str, ms: float, tags: dict[str, str] | None = None) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def compare_log():
    logger = logging.getLogger("scriptdiff.compare")
    handler = _ListHandler()
    old_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(old_level)


class TestCompare:

    def test_substitution(self, differ):
        result = differ.compare("a\nb\nc", "a\nx\nc")
        assert result.ops == [
            EditOp(EditOpType.KEPT, "a"),
            EditOp(EditOpType.REMOVED, "b"),
            EditOp(EditOpType.ADDED, "x"),
            EditOp(EditOpType.KEPT, "c"),
        ]
        assert result.stats == DiffStats(kept=2, added=1, removed=1)
        assert result.original == ["a", "b", "c"]
        assert result.updated == ["a", "x", "c"]

    def test_empty_texts(self, differ):
        result = differ.compare("", "")
        assert result.ops == [EditOp(EditOpType.KEPT, "")]
        assert result.stats.is_identical

    def test_empty_original_text(self, differ):
        # "" splits to [""], which matches the trailing empty line.
        result = differ.compare("", "a\n")
        assert result.ops == [
            EditOp(EditOpType.ADDED, "a"),
            EditOp(EditOpType.KEPT, ""),
        ]

    def test_crlf_differs_by_default(self, differ):
        result = differ.compare("a\r\nb", "a\nb")
        assert result.stats == DiffStats(kept=1, added=1, removed=1)

    def test_crlf_normalized(self):
        differ = TextDiffer(DiffConfig(normalize_newlines=True))
        result = differ.compare("a\r\nb", "a\nb")
        assert result.stats.is_identical

    def test_compare_lines(self, differ):
        result = differ.compare_lines(("a", "b"), ("b",))
        assert result.stats == DiffStats(kept=1, removed=1)
        assert result.original == ["a", "b"]

    def test_default_config(self):
        assert TextDiffer().compare("a", "a").stats.kept == 1


class TestInputBound:

    def test_original_too_large(self):
        differ = TextDiffer(DiffConfig(max_lines=2))
        with pytest.raises(ScriptDiffInputTooLargeError) as exc_info:
            differ.compare("a\nb\nc", "a")
        err = exc_info.value
        assert err.code == ErrorCode.INPUT_TOO_LARGE
        assert err.context == {"side": "original", "lines": 3, "max_lines": 2}

    def test_updated_too_large(self):
        differ = TextDiffer(DiffConfig(max_lines=2))
        with pytest.raises(ScriptDiffInputTooLargeError) as exc_info:
            differ.compare_lines(["a"], ["a", "b", "c"])
        assert exc_info.value.context["side"] == "updated"

    def test_at_limit_accepted(self):
        differ = TextDiffer(DiffConfig(max_lines=2))
        assert differ.compare("a\nb", "b\na").stats.kept == 1

    def test_limit_disabled(self):
        differ = TextDiffer(DiffConfig(max_lines=None))
        text = "\n".join(str(i) for i in range(DiffConfig().max_lines + 1))
        result = differ.compare(text, "0")
        assert result.stats.kept == 1
        assert result.stats.removed == DiffConfig().max_lines

    def test_rejection_is_logged(self, compare_log):
        differ = TextDiffer(DiffConfig(max_lines=1))
        with pytest.raises(ScriptDiffInputTooLargeError):
            differ.compare("a\nb", "a")
        warnings = [r for r in compare_log.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].extra_fields["side"] == "original"


class TestMetrics:

    def test_op_counters(self):
        hook = RecordingMetricsHook()
        TextDiffer(DiffConfig(metrics=hook)).compare("a\nb\nc", "a\nx\nc")
        counts = {
            rec["tags"]["op"]: rec["value"]
            for rec in hook.increments
            if rec["name"] == "scriptdiff.diff_ops_total"
        }
        assert counts == {"kept": 2, "added": 1, "removed": 1}

    def test_zero_counts_not_emitted(self):
        hook = RecordingMetricsHook()
        TextDiffer(DiffConfig(metrics=hook)).compare("a", "a")
        ops = [rec["tags"]["op"] for rec in hook.increments]
        assert ops == ["kept"]

    def test_timing_and_gauge(self):
        hook = RecordingMetricsHook()
        TextDiffer(DiffConfig(metrics=hook)).compare("a\nb", "a\nb\nc")
        assert [t["name"] for t in hook.timings] == ["scriptdiff.diff_duration_ms"]
        assert hook.timings[0]["ms"] >= 0
        assert hook.gauges == [
            {"name": "scriptdiff.lcs_cells", "value": 12.0, "tags": None},
        ]

    def test_rejection_counter(self):
        hook = RecordingMetricsHook()
        differ = TextDiffer(DiffConfig(max_lines=1, metrics=hook))
        with pytest.raises(ScriptDiffInputTooLargeError):
            differ.compare("a", "a\nb")
        assert hook.increments == [
            {"name": "scriptdiff.input_rejected_total", "value": 1,
             "tags": {"side": "updated"}},
        ]
        assert hook.timings == []


class TestLoggingAndDebug:

    def test_debug_record_fields(self, compare_log):
        TextDiffer().compare("a\nb", "a\nc")
        records = [r for r in compare_log.records if r.getMessage() == "diff computed"]
        assert len(records) == 1
        fields = records[0].extra_fields
        assert fields["original_lines"] == 2
        assert fields["updated_lines"] == 2
        assert (fields["kept"], fields["added"], fields["removed"]) == (1, 1, 1)

    def test_debug_dump_writes_rendered_diff(self, capsys):
        TextDiffer(DiffConfig(debug_dump_diff=True)).compare("a\nb", "a\nc")
        err = capsys.readouterr().err
        assert "  a\n- b\n+ c\n" in err

    def test_no_dump_by_default(self, capsys):
        TextDiffer().compare("a\nb", "a\nc")
        assert "+ c" not in capsys.readouterr().err
