"""Unit tests for the elapsed top-level public API surface.

Test Techniques Used:
    - Specification-based Testing: ``__all__`` completeness against the
      documented public API contract.
    - Importability: Every name in ``__all__`` resolves to a real object
      via ``getattr``.
"""

from __future__ import annotations

import elapsed


class TestElapsedPublicAPI:
    """All expected symbols are importable and listed in ``__all__``."""

    EXPECTED_NAMES = {
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
    }

    def test_all_contains_expected_symbols(self) -> None:
        """``__all__`` matches the documented public API exactly."""
        assert set(elapsed.__all__) == self.EXPECTED_NAMES

    def test_all_symbols_importable(self) -> None:
        """Every name in ``__all__`` is accessible on the package."""
        for name in elapsed.__all__:
            assert getattr(elapsed, name, None) is not None, name

    def test_version_is_string(self) -> None:
        """Package exposes a non-empty version string."""
        assert isinstance(elapsed.__version__, str)
        assert len(elapsed.__version__) > 0

    def test_overflow_error_is_an_overflow_error(self) -> None:
        """Callers catching OverflowError also catch the specific type."""
        assert issubclass(elapsed.DurationOverflowError, OverflowError)
