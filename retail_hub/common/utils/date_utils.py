"""Utility functions for date manipulation."""

from datetime import date, datetime

import pytz

from retail_hub.common.config.settings import settings


def now_local() -> datetime:
    """Returns the current timezone-aware datetime in the store's timezone."""
    return datetime.now(pytz.timezone(settings.TIMEZONE))


def today_local() -> date:
    """Returns today's date in the store's timezone."""
    return now_local().date()


def format_invoice_date(dt: datetime) -> str:
    """Formats a datetime as the YYYYMMDD date part of an invoice number."""
    return dt.strftime("%Y%m%d")


def format_display_datetime(dt: datetime) -> str:
    """Formats a datetime for printed documents, e.g. '19 Oct 2026, 14:05'."""
    return dt.strftime("%d %b %Y, %H:%M")


def parse_restock_date(date_str: str) -> date | None:
    """Parses an ISO date string (YYYY-MM-DD) into a date."""
    if not date_str:
        return None
    try:
        return date.fromisoformat(date_str)
    except (ValueError, TypeError):
        return None
