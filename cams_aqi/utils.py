#file: cams_aqi/utils.py

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Optional

import pytz


def get_current_time() -> datetime:
    """Get current UTC time."""
    return datetime.now(pytz.utc)


def next_hour_expiry(now: Optional[datetime] = None) -> datetime:
    """Top of the next UTC hour, rolling over into the next day after 23:00."""
    now = (now or get_current_time()).astimezone(pytz.utc)
    return now.replace(minute=0, second=0, microsecond=0) + timedelta(hours=1)


def http_date(moment: datetime) -> str:
    """Format a datetime as an HTTP date, e.g. 'Sun, 18 Oct 2026 14:00:00 GMT'."""
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)
