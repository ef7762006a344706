"""Persisted JSON store"""

import json

import pytest

from linkedin_auto_apply.data.answer_bank import DEFAULT_FIELD_KEYS, load_default_fields
from linkedin_auto_apply.data.store import KEY_DEFAULT_FIELDS, JsonStore


def test_values_survive_reload(tmp_path):
    path = tmp_path / "state.json"
    JsonStore(path).set({"loopRunning": True}, lastJobSearchUrl="https://x")

    reloaded = JsonStore(path)
    assert reloaded.get("loopRunning") is True
    assert reloaded.get(["lastJobSearchUrl", "missing"]) == {"lastJobSearchUrl": "https://x"}


def test_get_returns_copies():
    store = JsonStore()
    store.set({"badWords": ["unpaid"]})
    store.get("badWords").append("intern")
    assert store.get("badWords") == ["unpaid"]


def test_remove(tmp_path):
    path = tmp_path / "state.json"
    store = JsonStore(path)
    store.set({"a": 1, "b": 2})
    store.remove(["a", "missing"])
    assert json.loads(path.read_text()) == {"b": 2}


def test_unreadable_file_starts_empty(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{not json")
    assert JsonStore(path).get("anything", "default") == "default"


def test_non_object_file_starts_empty(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("[]")
    store = JsonStore(path)
    assert store.get("anything") is None
    store.set({"a": 1})
    assert json.loads(path.read_text()) == {"a": 1}


def test_merge_file(tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"userEmail": "me@example.com", "badWords": ["unpaid"]}))
    store = JsonStore()
    assert store.merge_file(settings) == ["badWords", "userEmail"]
    assert store.get("userEmail") == "me@example.com"


def test_merge_file_rejects_non_object(tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text("[1, 2]")
    with pytest.raises(ValueError):
        JsonStore().merge_file(settings)


def test_default_fields_absent_until_saved():
    store = JsonStore()
    assert load_default_fields(store) is None

    store.set({KEY_DEFAULT_FIELDS: {"FirstName": "John", "YearsOfExperience": 5}})
    fields = load_default_fields(store)
    assert set(fields) == set(DEFAULT_FIELD_KEYS)
    assert fields["FirstName"] == "John"
    assert fields["YearsOfExperience"] == "5"
    assert fields["City"] == ""
