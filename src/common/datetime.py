"""Date normalization utilities.

Dates leave this module as canonical ``YYYY-MM-DD`` strings so that string
comparison and chronological comparison agree.
"""

import logging
from datetime import date, datetime, timezone

logger = logging.getLogger(__name__)


def parse_datetime(value: str) -> datetime:
    """Parse an ISO datetime string, accepting a trailing Z for UTC."""
    return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))


def normalize_date(value) -> str | None:
    """Normalize a date-like value to a ``YYYY-MM-DD`` string.

    Aware datetimes are shifted to UTC before the date is taken; naive ones
    are treated as UTC already. Returns None when the value is empty or
    cannot be parsed.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value.isoformat()
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            parsed = parse_datetime(text)
        except ValueError:
            logger.debug("Unparseable date value: %r", value)
            return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def today_iso() -> str:
    """Today's local date as ``YYYY-MM-DD``."""
    return date.today().isoformat()
