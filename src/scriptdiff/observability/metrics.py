"""Metrics hook protocol and no-op default implementation.

scriptdiff emits counters, timings, and gauges from the text-level
facade.  By default a :class:`NoopMetricsHook` is used so there is zero
overhead.  Users can supply any object satisfying :class:`MetricsHook` to
route metrics to Prometheus, StatsD, or another backend.

Emitted metric names:

* ``scriptdiff.diff_ops_total``        -- counter, tagged ``op``
* ``scriptdiff.diff_duration_ms``      -- timing
* ``scriptdiff.lcs_cells``             -- gauge
* ``scriptdiff.input_rejected_total``  -- counter, tagged ``side``
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict whose keys and values are
    strings.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Default metrics implementation that silently discards all data points."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
