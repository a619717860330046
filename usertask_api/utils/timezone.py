"""Display-only time zone conversion."""
from datetime import datetime, timezone

import pytz

CREATED_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def to_display_zone(value: datetime, zone_name: str) -> datetime:
    """Convert a UTC timestamp to ``zone_name``. Naive values are UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(pytz.timezone(zone_name))
