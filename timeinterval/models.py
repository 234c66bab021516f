import logging
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from timeinterval.interval import ParseError, TimeInterval
from timeinterval.util import EXPECTED_FORMAT

__all__ = ["TimeIntervalField", "parse_time_interval", "format_time_interval"]

logger = logging.getLogger(__name__)


def parse_time_interval(value: Any) -> TimeInterval:
    """Validate a time interval given as text (or already parsed)."""
    if isinstance(value, TimeInterval):
        return value
    if not isinstance(value, str):
        raise ValueError(  # noqa: TRY004
            f"invalid type {type(value).__name__}, expected {EXPECTED_FORMAT}"
        )
    try:
        return TimeInterval.from_string(value)
    except ParseError as exc:
        logger.warning("%s", exc)
        raise ValueError(f"invalid value {value!r}, expected {EXPECTED_FORMAT}") from exc


def format_time_interval(interval: TimeInterval) -> str:
    return str(interval)


TimeIntervalField = Annotated[
    TimeInterval,
    PlainValidator(parse_time_interval),
    PlainSerializer(format_time_interval, return_type=str),
    WithJsonSchema(
        {
            "type": "string",
            "format": "time-interval",
            "examples": ["2000-01-01T00:00:00+00:00/2000-01-02T00:00:00+00:00"],
        }
    ),
]
"""
A time interval read from and written to a single string field.

For example:

```python
class Activity(BaseModel):
    name: str
    period: TimeIntervalField

activity = Activity.model_validate_json(
    '{"name": "work", "period": "2000-01-01T09:00:00Z/2000-01-01T17:00:00Z"}'
)
activity.model_dump_json()
# '{"name":"work","period":"2000-01-01T09:00:00+00:00/2000-01-01T17:00:00+00:00"}'
```

A malformed string fails validation of the whole model.
"""
