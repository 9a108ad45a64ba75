"""elapsed.

Measure how long a block of code takes and print it in the coarsest
fitting unit::

    from elapsed import measure_time

    duration, total = measure_time(lambda: sum(range(10_000)))
    print(f"elapsed = {duration}")  # elapsed = 227.81 μs
"""

from importlib.metadata import PackageNotFoundError, version

from elapsed._clock import ClockPort, SystemClock
from elapsed._duration import ElapsedDuration
from elapsed._errors import U64_MAX, DurationOverflowError
from elapsed._logging import JsonFormatter, configure_logging
from elapsed._measure import measure_time, timed
from elapsed._settings import DisplaySettings, LoggingSettings, Settings

try:
    # Installed package metadata
    __version__ = version("elapsed")
except PackageNotFoundError:
    # Last resort fallback for source trees without metadata
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Duration
    "ElapsedDuration",
    # Measurement
    "measure_time",
    "timed",
    # Clock
    "ClockPort",
    "SystemClock",
    # Errors
    "DurationOverflowError",
    "U64_MAX",
    # Logging
    "JsonFormatter",
    "configure_logging",
    # Settings
    "DisplaySettings",
    "LoggingSettings",
    "Settings",
]
