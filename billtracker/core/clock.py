"""Wall-clock helpers for the configured timezone."""

from datetime import datetime

import pytz

from billtracker.config import get_settings

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)


def local_now() -> datetime:
    """Current time in the configured timezone, as a naive datetime.

    Timestamps are stored naive so SQLite round-trips them unchanged.
    """
    return datetime.now(tz).replace(tzinfo=None)
