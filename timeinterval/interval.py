from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Literal

from typing_extensions import override

from timeinterval.util import SEPARATOR, format_rfc3339, parse_rfc3339

if TYPE_CHECKING:
    from timeinterval.event import Timed


class ParseError(ValueError):
    """Raised when text is not two RFC 3339 timestamps joined by a single '/'."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"Invalid time interval {text!r}: {reason}")
        self.text: str = text
        self.reason: str = reason


def _check_aware(dt: datetime, edge: Literal["start", "end"]) -> None:
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise TypeError(
            f"TimeInterval {edge} must be a timezone-aware datetime.\n"
            f"Got naive datetime: {dt!r}\n"
            f"Hint: Add timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)"
        )


@dataclass(frozen=True, order=True)
class TimeInterval:
    """A span of time from ``start`` to ``end``.

    Intervals are treated as half-open, ``[start, end)``: two intervals that
    meet at a single instant touch but do not intersect.

    ``start <= end`` is not enforced. An inverted interval is kept as given
    and reports a negative ``duration``.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        _check_aware(self.start, "start")
        _check_aware(self.end, "end")

    @classmethod
    def new(cls, start: datetime, end: datetime) -> "TimeInterval":
        return cls(start, end)

    @classmethod
    def from_string(cls, text: str) -> "TimeInterval":
        """Parse ``"<start>/<end>"`` where both sides are RFC 3339 timestamps.

        Both endpoints are normalized to UTC. No ordering check is made.

        Raises:
            ParseError: If there is not exactly one separator, or either
                side fails to parse as RFC 3339
        """
        parts = text.split(SEPARATOR)
        if len(parts) != 2:
            raise ParseError(
                text, f"expected exactly one {SEPARATOR!r}, got {len(parts) - 1}"
            )
        start_text, end_text = parts
        try:
            start = parse_rfc3339(start_text)
            end = parse_rfc3339(end_text)
        except ValueError as exc:
            raise ParseError(text, str(exc)) from exc
        return cls(start, end)

    @classmethod
    def from_event(cls, event: "Timed") -> "TimeInterval":
        """Interval covered by an event: ``[timestamp, timestamp + duration)``."""
        return cls(event.timestamp, event.timestamp + event.duration)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def copy(self) -> "TimeInterval":
        return replace(self)

    def gap(self, other: "TimeInterval") -> "TimeInterval | None":
        """The interval separating two disjoint intervals.

        Returns None if the intervals touch or overlap.
        """
        if self.end < other.start:
            return TimeInterval(self.end, other.start)
        if other.end < self.start:
            return TimeInterval(other.end, self.start)
        return None

    def union(self, other: "TimeInterval") -> "TimeInterval | None":
        """Join two intervals that touch or overlap, else None."""
        if self.gap(other) is not None:
            return None
        return TimeInterval(min(self.start, other.start), max(self.end, other.end))

    def intersection(self, other: "TimeInterval") -> "TimeInterval | None":
        last_start = max(self.start, other.start)
        first_end = min(self.end, other.end)
        if last_start < first_end:
            return TimeInterval(last_start, first_end)
        return None

    def intersects(self, other: "TimeInterval") -> bool:
        return self.intersection(other) is not None

    def adjacent(self, other: "TimeInterval") -> bool:
        """True if one interval ends exactly where the other starts."""
        return self.end == other.start or other.end == self.start

    def contains(self, other: "TimeInterval | datetime") -> bool:
        """Check whether an interval or instant lies within this interval.

        An instant equal to ``end`` is outside; an interval ending at ``end``
        is inside.
        """
        if isinstance(other, TimeInterval):
            return self.start <= other.start and other.end <= self.end
        return self.start <= other < self.end

    def __contains__(self, other: "TimeInterval | datetime") -> bool:
        return self.contains(other)

    def to_string(self) -> str:
        return str(self)

    @override
    def __str__(self) -> str:
        return f"{format_rfc3339(self.start)}{SEPARATOR}{format_rfc3339(self.end)}"
