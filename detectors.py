"""Eligibility checks deciding whether a mutation should notify (no I/O)."""

from __future__ import annotations

from collections.abc import Sequence

from models import ContentRecord, ModerationStatus, UpdateEntry, UpdateStatus

UNKNOWN_AUTHOR = "unknown"


def is_newly_accepted(previous: ContentRecord | None, current: ContentRecord) -> bool:
    """Return True if the record has just moved into the accepted state.

    A record created already accepted (no previous snapshot) counts as a
    transition. `current` must not be None: deletions are filtered upstream.
    """
    if current.moderation != ModerationStatus.ACCEPTED:
        return False
    return previous is None or previous.moderation != ModerationStatus.ACCEPTED


def is_newly_published_last_update(
    previous_updates: Sequence[UpdateEntry],
    current_updates: Sequence[UpdateEntry],
) -> bool:
    """Return True if the last update of the feed should be announced.

    Decision logic (first matching rule wins):
    - False  — the current feed is empty.
    - False  — the feed did not grow and the last entry kept its status.
    - False  — the last entry is still a draft.
    - True   — otherwise.

    Only length and the last entry's status are compared. Reordering, deletions
    and edits of earlier entries are not detected.
    """
    if not current_updates:
        return False

    current_last = current_updates[-1]
    previous_status = previous_updates[-1].status if previous_updates else None

    if len(previous_updates) >= len(current_updates) and previous_status == current_last.status:
        return False

    if current_last.status == UpdateStatus.DRAFT:
        return False

    return True


def last_update_author(update: UpdateEntry) -> str:
    """Return the update's author; collaborators hold a single person in practice."""
    if not update.collaborators:
        return UNKNOWN_AUTHOR
    return update.collaborators[0] or UNKNOWN_AUTHOR
