"""Error types raised by elapsed.

Durations are modelled on an unsigned 64-bit whole-seconds count.
Scaling that count to a finer unit can leave the u64 range; when it
does, :class:`DurationOverflowError` is raised instead of returning a
wrapped or saturated number.  A silently wrong elapsed time is worse
than a loud failure.
"""

from __future__ import annotations

U64_MAX = 2**64 - 1


class DurationOverflowError(OverflowError):
    """Unit scaling of a duration exceeded the unsigned 64-bit range.

    Attributes:
        whole_seconds: The whole-seconds field of the offending duration.
        unit: Suffix of the unit being computed (``"ms"``, ``"μs"``
            or ``"ns"``).
    """

    def __init__(self, whole_seconds: int, unit: str) -> None:
        super().__init__(
            f"duration of {whole_seconds} s overflows u64 when scaled to {unit}"
        )
        self.whole_seconds = whole_seconds
        self.unit = unit
