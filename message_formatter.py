"""Human-readable notification text for each content kind."""

from __future__ import annotations

from detectors import UNKNOWN_AUTHOR, last_update_author
from models import ContentRecord, UpdateEntry


def format_pin_message(record: ContentRecord, site_url: str) -> str:
    pin_id = record.record_id or "unknown"
    pin_type = record.pin_type or "unknown"
    return f"📍 *New {pin_type}* pin from {pin_id}. Location here <{_base(site_url)}/map/#{pin_id}>"


def format_library_message(record: ContentRecord, site_url: str) -> str:
    author = record.created_by or UNKNOWN_AUTHOR
    return (
        f"📓 New library project {record.title} by {author}, "
        f"check it out: <{_base(site_url)}/library/{record.slug}>"
    )


def format_research_update_message(slug: str, update: UpdateEntry, site_url: str) -> str:
    """Build the announcement for the most recent research update."""
    author = last_update_author(update)
    return (
        f"📝 New update from {author} in their research: {update.title}\n"
        f"Learn about it here: <{_base(site_url)}/research/{slug}#update_{update.update_id}>"
    )


def _base(site_url: str | None) -> str:
    return (site_url or "").rstrip("/")
