"""Bounded, most-recent-first activity log."""

from datetime import datetime

from retail_hub.activity_domain.domain.entities.activity_log_entry import ActivityCategory, ActivityLogEntry
from retail_hub.common.config.settings import settings
from retail_hub.common.utils.id_utils import generate_id


def record_activity(
    entries: tuple[ActivityLogEntry, ...],
    message: str,
    category: ActivityCategory,
    now: datetime,
    limit: int | None = None,
) -> tuple[ActivityLogEntry, ...]:
    """Returns a new log with the entry prepended and the oldest entries dropped past the limit."""
    if limit is None:
        limit = settings.ACTIVITY_LOG_LIMIT
    entry = ActivityLogEntry(id=generate_id("log"), message=message, timestamp=now, category=category)
    return (entry, *entries)[:limit]
