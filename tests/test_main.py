"""Tests for the event replay entrypoint (main.run / main.main)."""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
import requests

import main
from config import Settings

SETTINGS = Settings(webhook_url="https://discord.test/hook", site_url="https://x")


def _write_event(tmp_path: Path, before: dict | None, after: dict | None) -> str:
    path = tmp_path / "event.json"
    path.write_text(json.dumps({"before": before, "after": after}), encoding="utf-8")
    return str(path)


def test_load_event_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "event.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError):
        main.load_event(str(path))


def test_run_dry_run_logs_message_without_posting(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("INFO")
    source = _write_event(tmp_path, None, {"_id": "pin-1", "type": "member", "moderation": "accepted"})

    with patch("discord_client.requests.post") as mock_post:
        code = main.run(kind="pin", source=source, dry_run=True, settings=SETTINGS)

    assert code == 0
    mock_post.assert_not_called()
    assert "[dry-run] Would post to webhook" in caplog.text
    assert "pin from pin-1" in caplog.text


def test_run_returns_1_on_transport_failure(tmp_path: Path) -> None:
    source = _write_event(tmp_path, None, {"_id": "pin-1", "moderation": "accepted"})

    with patch("main.handle_change", side_effect=requests.ConnectionError("down")):
        code = main.run(kind="pin", source=source, dry_run=False, settings=SETTINGS)

    assert code == 1


def test_run_ineligible_change_returns_0(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("INFO")
    source = _write_event(tmp_path, {"_id": "h1", "moderation": "accepted"}, {"_id": "h1", "moderation": "accepted"})

    with patch("discord_client.requests.post") as mock_post:
        code = main.run(kind="library", source=source, dry_run=False, settings=SETTINGS)

    assert code == 0
    mock_post.assert_not_called()
    assert "No notification for this library change" in caplog.text


def test_main_dry_run_without_webhook_still_formats(tmp_path: Path) -> None:
    source = _write_event(tmp_path, None, {"_id": "pin-1", "type": "member", "moderation": "accepted"})

    with patch("main.Settings.from_env", return_value=Settings(webhook_url="", site_url="https://x")), \
         patch("main.run", return_value=0) as mock_run:
        code = main.main(["--kind", "pin", source, "--dry-run"])

    assert code == 0
    assert mock_run.call_args.kwargs["settings"].webhook_url == "dry-run"
    assert mock_run.call_args.kwargs["dry_run"] is True


def test_main_reads_webhook_from_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("DISCORD_WEBHOOK_URL=https://discord.test/from-file\n", encoding="utf-8")
    monkeypatch.setenv("ENV_FILE", str(env_file))
    monkeypatch.delenv("DISCORD_WEBHOOK_URL", raising=False)
    source = _write_event(tmp_path, None, None)

    try:
        with patch("main.run", return_value=0) as mock_run:
            main.main(["--kind", "pin", source])
    finally:
        os.environ.pop("DISCORD_WEBHOOK_URL", None)

    assert mock_run.call_args.kwargs["settings"].webhook_url == "https://discord.test/from-file"
    assert not hasattr(main, "load_dotenv")
