"""CLI entrypoint for replaying one document-change event through the notifier."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any

import requests

from config import Settings
from handlers import CONTENT_KINDS, handle_change


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Replay a content change event and notify Discord")
    parser.add_argument("--kind", choices=CONTENT_KINDS, required=True, help="Content kind of the changed document")
    parser.add_argument(
        "event",
        nargs="?",
        default="-",
        help='Path to a JSON event {"before": ..., "after": ...}; "-" reads stdin',
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the message that would be sent, without posting to the webhook",
    )
    return parser.parse_args(argv)


def load_event(source: str) -> tuple[Any, Any]:
    """Read a change event and return its (before, after) snapshots."""
    if source == "-":
        payload = json.load(sys.stdin)
    else:
        with open(source, encoding="utf-8") as fh:
            payload = json.load(fh)

    if not isinstance(payload, dict):
        raise ValueError("Change event must be a JSON object with 'before' and 'after' keys")
    return payload.get("before"), payload.get("after")


def _dry_run_send(url: str, payload: dict[str, Any]) -> requests.Response:
    logging.info("[dry-run] Would post to webhook: %s", payload["content"])
    response = requests.Response()
    response.status_code = 204
    return response


def run(kind: str, source: str, dry_run: bool, settings: Settings) -> int:
    """Process one event; return the process exit code."""
    before, after = load_event(source)
    send = _dry_run_send if dry_run else None

    try:
        result = handle_change(kind, before, after, settings, send=send)
    except requests.RequestException:
        return 1

    if result is None:
        logging.info("No notification for this %s change", kind)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Initialize config and handle the event."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = parse_args(argv)
    settings = Settings.from_env()
    if args.dry_run and not settings.webhook_url:
        settings = replace(settings, webhook_url="dry-run")
    return run(kind=args.kind, source=args.event, dry_run=args.dry_run, settings=settings)


if __name__ == "__main__":
    sys.exit(main())
