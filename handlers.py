"""Document-change handlers: detect a publish transition and notify once.

Each handler receives the raw before/after snapshots of one mutation. Events
may arrive duplicated or out of order; nothing is remembered between calls,
so the decision depends only on the two snapshots given.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any

from config import Settings
from detectors import is_newly_accepted, is_newly_published_last_update
from discord_client import DispatchResult, Sender, dispatch, post_webhook
from message_formatter import format_library_message, format_pin_message, format_research_update_message
from models import UpdateStatus, parse_content_record, parse_research_record

LOGGER = logging.getLogger(__name__)

CONTENT_KINDS = ("pin", "library", "research")


def notify_pin_published(
    before: Any,
    after: Any,
    settings: Settings,
    send: Sender | None = None,
) -> DispatchResult | None:
    """Announce a map pin the first time it is accepted."""
    current = parse_content_record(after)
    if current is None:
        LOGGER.debug("Pin deleted, nothing to notify")
        return None

    if not is_newly_accepted(parse_content_record(before), current):
        return None

    text = format_pin_message(current, settings.site_url)
    return _deliver(text, settings, send)


def notify_library_item_published(
    before: Any,
    after: Any,
    settings: Settings,
    send: Sender | None = None,
) -> DispatchResult | None:
    """Announce a library item the first time it is accepted."""
    current = parse_content_record(after)
    if current is None:
        LOGGER.debug("Library item deleted, nothing to notify")
        return None

    if not is_newly_accepted(parse_content_record(before), current):
        return None

    text = format_library_message(current, settings.site_url)
    return _deliver(text, settings, send)


def notify_research_update_published(
    before: Any,
    after: Any,
    settings: Settings,
    send: Sender | None = None,
) -> DispatchResult | None:
    """Announce the newest research update once it is published."""
    if not settings.webhook_url:
        LOGGER.info("No webhook URL configured")
        return None

    current = parse_research_record(after)
    if current is None:
        LOGGER.debug("Research item deleted, nothing to notify")
        return None

    previous = parse_research_record(before)
    previous_updates = previous.updates if previous is not None else ()

    if not is_newly_published_last_update(previous_updates, current.updates):
        if current.updates and current.updates[-1].status == UpdateStatus.DRAFT:
            LOGGER.info("Update is a draft for research slug=%s", current.slug)
        else:
            LOGGER.info("There is no new update for research slug=%s", current.slug)
        return None

    last_update = current.updates[-1]
    text = format_research_update_message(current.slug, last_update, settings.site_url)
    return _deliver(text, settings, send)


def handle_change(
    kind: str,
    before: Any,
    after: Any,
    settings: Settings,
    send: Sender | None = None,
) -> DispatchResult | None:
    """Route one change event to the handler for its content kind."""
    handlers = {
        "pin": notify_pin_published,
        "library": notify_library_item_published,
        "research": notify_research_update_published,
    }
    handler = handlers.get(kind)
    if handler is None:
        raise ValueError(f"Unknown content kind: {kind!r} (expected one of {CONTENT_KINDS})")
    return handler(before, after, settings, send)


def _deliver(text: str, settings: Settings, send: Sender | None) -> DispatchResult:
    if send is None:
        send = partial(post_webhook, timeout=settings.request_timeout)
    result = dispatch(settings.webhook_url, text, send=send)
    result.raise_for_error()
    return result
