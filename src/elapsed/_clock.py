"""Monotonic clock port and system adapter.

Provides ClockPort (Protocol) and SystemClock for measuring elapsed time.

**Why monotonic?** A monotonic clock is immune to NTP adjustments and
manual system-clock changes, making it suitable for measuring elapsed
durations.  The epoch is arbitrary; only *differences* between
``now_ns()`` calls are meaningful (PEP 418).

Samples are integer nanoseconds so that an interval converts to an
:class:`~elapsed.ElapsedDuration` without passing through a float.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Monotonic clock for timing measurements.

    The default implementation wraps ``time.perf_counter_ns()``.  Tests
    inject a deterministic fake clock for reproducible timing.
    """

    def now_ns(self) -> int:
        """Return monotonic time in nanoseconds.

        Returns:
            An int counting nanoseconds from an arbitrary epoch.
            Only the *difference* between two calls is meaningful.
        """
        ...


class SystemClock:
    """Production clock wrapping ``time.perf_counter_ns()``.

    ``perf_counter`` is monotonic and has the highest resolution the
    platform offers.  Satisfies :class:`ClockPort` via structural
    subtyping (PEP 544).

    Usage::

        clock = SystemClock()
        start = clock.now_ns()
        # ... some work ...
        elapsed_ns = clock.now_ns() - start
    """

    def now_ns(self) -> int:
        """Return monotonic time in nanoseconds."""
        return time.perf_counter_ns()
