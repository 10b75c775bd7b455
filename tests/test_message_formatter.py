from message_formatter import format_library_message, format_pin_message, format_research_update_message
from models import ContentRecord, UpdateEntry


def test_library_message_contains_title_author_and_link() -> None:
    record = ContentRecord(record_id="h1", moderation="accepted", title="T", slug="s", created_by="Author")

    text = format_library_message(record, "https://x")

    assert "T" in text
    assert "Author" in text
    assert "https://x/library/s" in text
    assert text.startswith("📓 New library project")


def test_library_message_missing_author_uses_unknown() -> None:
    record = ContentRecord(record_id="h1", moderation="accepted", title="Shredder", slug="shredder")
    assert "by unknown" in format_library_message(record, "https://x")


def test_pin_message_format() -> None:
    record = ContentRecord(record_id="workshop-42", moderation="accepted", pin_type="workspace")

    text = format_pin_message(record, "https://x/")

    assert text == "📍 *New workspace* pin from workshop-42. Location here <https://x/map/#workshop-42>"


def test_research_update_message_format() -> None:
    update = UpdateEntry(update_id="u7", status="published", title="Week 3", collaborators=("maria",))

    text = format_research_update_message("brick-press", update, "https://x")

    assert text == (
        "📝 New update from maria in their research: Week 3\n"
        "Learn about it here: <https://x/research/brick-press#update_u7>"
    )


def test_research_update_message_without_collaborators() -> None:
    update = UpdateEntry(update_id="u7", status="published", title="Week 3")
    assert "New update from unknown" in format_research_update_message("slug", update, "https://x")
