"""Cutoff instant for old files."""

from datetime import datetime, timedelta


def staleness_threshold(now: datetime, days: int) -> datetime:
    """Files modified strictly before the returned instant count as old."""
    return now - timedelta(days=days)
