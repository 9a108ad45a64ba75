"""Public test-support utilities for elapsed.

Re-exports test doubles and factories so that consumer test suites
can import everything from a single ``elapsed.testing`` namespace
instead of reaching into private modules.

Provided symbols:

- :class:`FakeClock` — deterministic clock for timing tests.
- :func:`make_settings` — factory for ``Settings`` without ``.env`` files.
"""

from elapsed.testing._clock import FakeClock
from elapsed.testing._settings import make_settings

__all__ = [
    "FakeClock",
    "make_settings",
]
