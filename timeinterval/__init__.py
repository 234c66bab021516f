from .event import Event, Timed
from .interval import ParseError, TimeInterval
from .models import TimeIntervalField, parse_time_interval
from .util import DAY, HOUR, MINUTE, SECOND, WEEK

__all__ = [
    "TimeInterval",
    "ParseError",
    "Event",
    "Timed",
    "TimeIntervalField",
    "parse_time_interval",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
