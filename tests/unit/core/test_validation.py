"""Unit tests for payload presence checks."""

from noteful.core.validation import first_missing, is_missing, supplied_fields


def test_is_missing():
    assert is_missing(None)
    assert is_missing("")
    assert is_missing("   ")
    assert not is_missing("x")
    assert not is_missing(0)


def test_first_missing_respects_field_order():
    fields = ("note_name", "content", "folder_id")
    assert first_missing({"folder_id": 1}, fields) == "note_name"
    assert first_missing({"note_name": "n", "folder_id": 1}, fields) == "content"
    assert first_missing({"note_name": "n", "content": "c", "folder_id": 1}, fields) is None


def test_supplied_fields_ignores_blank_and_unknown():
    payload = {"note_name": "n", "content": " ", "folder_id": None, "other": "x"}
    assert supplied_fields(payload, ("note_name", "content", "folder_id")) == ["note_name"]
