"""Shared typed models for content snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class ModerationStatus:
    """Moderation states of a user-submitted pin or library item."""

    DRAFT = "draft"
    AWAITING_MODERATION = "awaiting-moderation"
    IMPROVEMENTS_NEEDED = "improvements-needed"
    REJECTED = "rejected"
    ACCEPTED = "accepted"


class UpdateStatus:
    """Publication states of a single research update."""

    DRAFT = "draft"
    PUBLISHED = "published"


@dataclass(frozen=True, slots=True)
class ContentRecord:
    """One snapshot of a map pin or library item."""

    record_id: str
    moderation: str
    title: str = ""
    slug: str = ""
    created_by: str = ""
    pin_type: str = ""


@dataclass(frozen=True, slots=True)
class UpdateEntry:
    """One progress post inside a research item."""

    update_id: str
    status: str
    title: str = ""
    collaborators: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ResearchRecord:
    """Research item snapshot; the last update is the most recent one."""

    slug: str
    updates: tuple[UpdateEntry, ...] = ()


def parse_content_record(data: Any) -> ContentRecord | None:
    """Parse a raw pin/library document into a ContentRecord.

    Returns None when the snapshot is absent (record created or deleted).
    Missing fields fall back to empty strings so callers never see KeyError.
    """
    if not isinstance(data, dict):
        return None

    return ContentRecord(
        record_id=_as_str(data.get("_id")),
        moderation=_as_status(data.get("moderation")),
        title=_as_str(data.get("title")),
        slug=_as_str(data.get("slug")),
        created_by=_as_str(data.get("_createdBy")),
        pin_type=_as_str(data.get("type")),
    )


def parse_research_record(data: Any) -> ResearchRecord | None:
    """Parse a raw research document, keeping update order as stored."""
    if not isinstance(data, dict):
        return None

    raw_updates = data.get("updates")
    updates: list[UpdateEntry] = []
    if isinstance(raw_updates, list):
        for item in raw_updates:
            if not isinstance(item, dict):
                continue
            updates.append(_parse_update(item))

    return ResearchRecord(slug=_as_str(data.get("slug")), updates=tuple(updates))


def _parse_update(item: dict[str, Any]) -> UpdateEntry:
    raw_collaborators = item.get("collaborators")
    collaborators: tuple[str, ...] = ()
    if isinstance(raw_collaborators, list):
        # Position matters: the first slot is the author even when it is blank.
        collaborators = tuple(c if isinstance(c, str) else "" for c in raw_collaborators)

    return UpdateEntry(
        update_id=_as_str(item.get("_id")),
        status=_as_status(item.get("status")),
        title=_as_str(item.get("title")),
        collaborators=collaborators,
    )


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_status(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""
