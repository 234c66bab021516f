"""Event records that can be viewed as time intervals.

Anything exposing a ``timestamp`` and a ``duration`` satisfies ``Timed`` and
can be converted with ``TimeInterval.from_event``. ``Event`` is a minimal
concrete record for callers without their own event type.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Protocol

from timeinterval.interval import TimeInterval


class Timed(Protocol):
    @property
    def timestamp(self) -> datetime: ...

    @property
    def duration(self) -> timedelta: ...


@dataclass(frozen=True)
class Event:
    """A timestamped record with a duration.

    Attributes:
        timestamp: When the event started (timezone-aware)
        duration: How long the event lasted
        data: Free-form payload, not interpreted here
    """

    timestamp: datetime
    duration: timedelta = timedelta(0)
    data: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @property
    def interval(self) -> TimeInterval:
        return TimeInterval.from_event(self)
