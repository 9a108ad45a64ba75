"""Time a single synchronous call.

:func:`measure_time` samples the clock, runs the callable once on the
calling thread, samples again, and hands back the interval together
with the callable's result::

    duration, total = measure_time(lambda: sum(range(10_000)))
    print(f"elapsed = {duration}")

:func:`timed` wraps the same measurement around a function and logs
the result after every successful call.

Neither catches exceptions.  If the callable raises, the exception
reaches the caller unchanged and no duration is produced.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable

from elapsed._clock import ClockPort, SystemClock
from elapsed._duration import ElapsedDuration


def measure_time[T](
    func: Callable[[], T],
    *,
    clock: ClockPort | None = None,
) -> tuple[ElapsedDuration, T]:
    """Measure the wall-clock time of one call to *func*.

    Args:
        func: Zero-argument callable, invoked exactly once.
        clock: Clock to sample.  Defaults to :class:`SystemClock`.

    Returns:
        ``(duration, result)`` where *result* is whatever *func*
        returned, unmodified.
    """
    resolved = clock if clock is not None else SystemClock()
    start = resolved.now_ns()
    result = func()
    end = resolved.now_ns()
    return ElapsedDuration.from_nanos(end - start), result


def timed[**P, R](
    label: str | None = None,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.INFO,
    clock: ClockPort | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator logging how long each call of the wrapped function takes.

    Emits ``"<label> took <duration>"`` on *logger* at *level* once
    the call returns.  Failed calls are not logged; their exception
    propagates untouched.

    Args:
        label: Name used in the log line.  Defaults to the wrapped
            function's ``__qualname__``.
        logger: Destination logger.  Defaults to this module's logger.
        level: Log level for the timing line.
        clock: Clock forwarded to :func:`measure_time`.

    Example::

        @timed(level=logging.DEBUG)
        def load() -> bytes: ...
    """
    target = logger if logger is not None else logging.getLogger(__name__)

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        name = label if label is not None else func.__qualname__

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            duration, result = measure_time(
                functools.partial(func, *args, **kwargs),
                clock=clock,
            )
            target.log(level, "%s took %s", name, duration)
            return result

        return wrapper

    return decorator
