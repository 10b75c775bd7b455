"""Discord webhook dispatch for publish notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

import requests

LOGGER = logging.getLogger(__name__)

Sender = Callable[[str, dict[str, Any]], requests.Response]


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Outcome of one dispatch: sent, skipped (no webhook), or failed."""

    sent: bool
    response: requests.Response | None = None
    error: requests.RequestException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def post_webhook(
    url: str,
    payload: dict[str, Any],
    timeout: float | None = None,
) -> requests.Response:
    """Send one webhook request. No retries; HTTP error statuses raise."""
    response = requests.post(url, json=payload, timeout=timeout)
    response.raise_for_status()
    return response


def dispatch(endpoint_url: str | None, text: str, send: Sender = post_webhook) -> DispatchResult:
    """Post `text` to the webhook as `{"content": text}`.

    An empty endpoint is a no-op rather than an error. Transport failures are
    logged here and returned in the result; the caller decides whether to raise.
    """
    if not endpoint_url:
        LOGGER.info("No webhook URL configured, skipping notification")
        return DispatchResult(sent=False)

    try:
        response = send(endpoint_url, {"content": text})
    except requests.RequestException as exc:
        LOGGER.exception("Webhook post failed: %s", exc)
        return DispatchResult(sent=False, error=exc)

    LOGGER.info("Webhook post success status=%s", getattr(response, "status_code", None))
    return DispatchResult(sent=True, response=response)
