from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pickupnews.logging_config import logger


DATE_FORMAT = "%Y-%m-%d"

# Used when the tz database is not available on the host (e.g. slim Lambda images)
FALLBACK_UTC_OFFSET = timedelta(hours=9)


def get_target_timezone(name: str) -> tzinfo:
    """Resolve a tz database name, falling back to a fixed UTC+9 offset."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Timezone '{name}' not available, using fixed offset {FALLBACK_UTC_OFFSET}")
        return timezone(FALLBACK_UTC_OFFSET, name)


def default_date_range(tz: tzinfo, now: Optional[datetime] = None) -> Tuple[str, str]:
    """Return (yesterday, today) in the given timezone formatted as YYYY-MM-DD."""
    current = (now or datetime.now(timezone.utc)).astimezone(tz)
    yesterday = current - timedelta(days=1)
    return yesterday.strftime(DATE_FORMAT), current.strftime(DATE_FORMAT)
