"""Immutable elapsed-duration value with unit accessors and display.

An :class:`ElapsedDuration` holds one measurement as a whole-seconds
count plus a sub-second nanosecond remainder, the same canonical split
used by most platform duration types.  Every other view (milliseconds,
microseconds, nanoseconds, floats, ``timedelta``) is derived from those
two fields on demand, so the views can never disagree.

Display picks the coarsest unit whose whole-number value is non-zero
and shows two fractional digits::

    >>> str(ElapsedDuration(1, 300_000_000))
    '1.30 s'
    >>> f"{ElapsedDuration(20):>10}"
    '   20.00 s'

See Also:
    :func:`elapsed.measure_time` for producing values from a clock.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Self

from elapsed._errors import U64_MAX, DurationOverflowError

NANOS_PER_SEC = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000

_UNIT_SECONDS = "s"
_UNIT_MILLIS = "ms"
_UNIT_MICROS = "μs"
_UNIT_NANOS = "ns"


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful count.
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _checked_scale(whole_seconds: int, factor: int, unit: str) -> int:
    """Multiply *whole_seconds* by *factor*, enforcing the u64 range."""
    scaled = whole_seconds * factor
    if scaled > U64_MAX:
        raise DurationOverflowError(whole_seconds, unit)
    return scaled


def _checked_add(whole_seconds: int, scaled: int, remainder: int, unit: str) -> int:
    total = scaled + remainder
    if total > U64_MAX:
        raise DurationOverflowError(whole_seconds, unit)
    return total


@dataclass(frozen=True, slots=True, order=True)
class ElapsedDuration:
    """A non-negative elapsed time, immutable once built.

    Field order is ``(whole_seconds, subsec_nanos)`` so the generated
    comparison methods order values chronologically.

    Args:
        whole_seconds: Whole seconds, in ``[0, 2**64 - 1]``.
        subsec_nanos: Sub-second remainder in nanoseconds, in
            ``[0, 999_999_999]``.

    Raises:
        TypeError: If either field is not an ``int``.
        ValueError: If either field is outside its range.
    """

    whole_seconds: int
    subsec_nanos: int = 0

    def __post_init__(self) -> None:
        _require_int("whole_seconds", self.whole_seconds)
        _require_int("subsec_nanos", self.subsec_nanos)
        if not 0 <= self.whole_seconds <= U64_MAX:
            raise ValueError(
                f"whole_seconds must be in [0, {U64_MAX}], got {self.whole_seconds}"
            )
        if not 0 <= self.subsec_nanos < NANOS_PER_SEC:
            raise ValueError(
                f"subsec_nanos must be in [0, {NANOS_PER_SEC - 1}], "
                f"got {self.subsec_nanos}"
            )

    # -- construction --------------------------------------------------------

    @classmethod
    def zero(cls) -> Self:
        """The empty duration."""
        return cls(0, 0)

    @classmethod
    def from_nanos(cls, nanos: int) -> Self:
        """Split a nanosecond count into whole seconds and remainder.

        Typically the difference of two ``now_ns()`` clock samples.
        """
        _require_int("nanos", nanos)
        if nanos < 0:
            raise ValueError(f"duration cannot be negative, got {nanos} ns")
        whole_seconds, subsec_nanos = divmod(nanos, NANOS_PER_SEC)
        return cls(whole_seconds, subsec_nanos)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Self:
        """Wrap a :class:`~datetime.timedelta`.

        Raises:
            ValueError: If *delta* is negative.
        """
        if delta < timedelta(0):
            raise ValueError(f"duration cannot be negative, got {delta!r}")
        return cls(
            delta.days * 86_400 + delta.seconds,
            delta.microseconds * NANOS_PER_MICRO,
        )

    # -- whole-unit accessors ------------------------------------------------

    def seconds(self) -> int:
        """Whole seconds."""
        return self.whole_seconds

    def millis(self) -> int:
        """Whole milliseconds, truncated."""
        scaled = _checked_scale(self.whole_seconds, 1_000, _UNIT_MILLIS)
        return _checked_add(
            self.whole_seconds,
            scaled,
            self.subsec_nanos // NANOS_PER_MILLI,
            _UNIT_MILLIS,
        )

    def micros(self) -> int:
        """Whole microseconds, truncated."""
        scaled = _checked_scale(self.whole_seconds, 1_000_000, _UNIT_MICROS)
        return _checked_add(
            self.whole_seconds,
            scaled,
            self.subsec_nanos // NANOS_PER_MICRO,
            _UNIT_MICROS,
        )

    def nanos(self) -> int:
        """Whole nanoseconds."""
        scaled = _checked_scale(self.whole_seconds, NANOS_PER_SEC, _UNIT_NANOS)
        return _checked_add(self.whole_seconds, scaled, self.subsec_nanos, _UNIT_NANOS)

    # -- raw and fractional views --------------------------------------------

    def as_timedelta(self) -> timedelta:
        """Return the duration as a ``timedelta``, truncated to microseconds.

        Raises:
            OverflowError: If the duration exceeds ``timedelta.max``.
        """
        return timedelta(
            seconds=self.whole_seconds,
            microseconds=self.subsec_nanos // NANOS_PER_MICRO,
        )

    def as_fractional_secs(self) -> float:
        return self.whole_seconds + self.subsec_nanos / NANOS_PER_SEC

    def as_fractional_millis(self) -> float:
        return self.whole_seconds * 1e3 + self.subsec_nanos / NANOS_PER_MILLI

    def as_fractional_micros(self) -> float:
        return self.whole_seconds * 1e6 + self.subsec_nanos / NANOS_PER_MICRO

    def as_fractional_nanos(self) -> float:
        return self.whole_seconds * 1e9 + self.subsec_nanos

    # -- display -------------------------------------------------------------

    def _display_parts(self) -> tuple[int, int, str]:
        """Pick the coarsest non-zero unit and its next-finer count.

        Returns:
            ``(coarse, fine, suffix)`` where *fine* counts the next
            finer unit over the same span.
        """
        if self.seconds() > 0:
            return self.seconds(), self.millis(), _UNIT_SECONDS
        if self.millis() > 0:
            return self.millis(), self.micros(), _UNIT_MILLIS
        if self.micros() > 0:
            return self.micros(), self.nanos(), _UNIT_MICROS
        nanos = self.nanos()
        return nanos, nanos * 1_000, _UNIT_NANOS

    def format(self) -> str:
        """Render as ``"<value> <unit>"`` with two fractional digits.

        The fraction is rebuilt from exact integer sub-unit counts
        (``fine - coarse * 1000``) rather than by dividing the raw
        nanosecond total, so large durations do not pick up float
        error from the finer digits.

        Raises:
            DurationOverflowError: If a unit-scaling step leaves the
                u64 range.
        """
        coarse, fine, suffix = self._display_parts()
        value = coarse + (fine - coarse * 1_000) / 1_000.0
        return f"{value:.2f} {suffix}"

    def __str__(self) -> str:
        return self.format()

    def __format__(self, format_spec: str) -> str:
        """Pad the rendered duration like a ``str``.

        Accepts the string format-spec subset ``[[fill]align][width]``,
        e.g. ``f"{d:*^20}"``.  Specs ``str`` rejects are rejected here too.
        """
        if not format_spec:
            return self.format()
        return format(self.format(), format_spec)
