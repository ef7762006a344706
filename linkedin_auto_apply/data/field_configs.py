"""Learned answers for text, radio and dropdown questions"""

import time

from linkedin_auto_apply.data.store import (
    KEY_TEXT_FIELDS,
    KEY_RADIO_FIELDS,
    KEY_DROPDOWN_FIELDS,
    KEY_USER_EMAIL,
)
from linkedin_auto_apply.reasoning.normalize import normalize_label

TEXT = "text"
RADIO = "radio"
DROPDOWN = "dropdown"

STORAGE_KEYS = {
    TEXT: KEY_TEXT_FIELDS,
    RADIO: KEY_RADIO_FIELDS,
    DROPDOWN: KEY_DROPDOWN_FIELDS,
}

# Fields a caller may not overwrite through upsert()
_BOOKKEEPING = ("placeholder", "email", "count", "createdAt", "updatedAt")


def now_ms():
    return int(time.time() * 1000)


def single_selected(options, selected_value=None):
    """
    Copy an option catalog keeping at most one option selected.

    With selected_value the matching option becomes the selection, otherwise
    the first option already flagged wins.
    """
    result = []
    chosen = False
    for option in options or []:
        if selected_value is not None:
            selected = not chosen and option.get("value") == selected_value
        else:
            selected = not chosen and bool(option.get("selected"))
        chosen = chosen or selected
        result.append(
            {
                "value": option.get("value", ""),
                "text": option.get("text", ""),
                "selected": selected,
            }
        )
    return result


def selected_value(record):
    """Stored answer of a radio/dropdown record (selected option, else defaultValue)"""
    for option in record.get("options") or []:
        if option.get("selected"):
            return option.get("value")
    return record.get("defaultValue")


class FieldConfigStore:
    """
    Typed read/merge/write of FieldConfig records.

    Records are keyed by (email, placeholder) where placeholder is the
    verbatim question label. Lookups try the verbatim label first and then
    a normalized comparison, so "First name" and "first-name" share a record.
    """

    def __init__(self, store):
        self.store = store

    @property
    def email(self):
        return self.store.get(KEY_USER_EMAIL) or ""

    def get(self, kind):
        return self.store.get(STORAGE_KEYS[kind]) or []

    def _locate(self, records, placeholder, email):
        owned = [
            (index, record)
            for index, record in enumerate(records)
            if (record.get("email") or "") == email
        ]
        for index, record in owned:
            if record.get("placeholder") == placeholder:
                return index
        wanted = normalize_label(placeholder)
        if not wanted:
            return None
        for index, record in owned:
            if normalize_label(record.get("placeholder")) == wanted:
                return index
        return None

    def find(self, kind, placeholder):
        """Return the stored record for a question label, or None"""
        records = self.get(kind)
        index = self._locate(records, placeholder, self.email)
        return records[index] if index is not None else None

    def upsert(self, kind, record):
        """
        Insert a new record or merge into the existing one.

        Existing: count += 1, non-bookkeeping fields overwritten, updatedAt
        refreshed. New: count = 1, createdAt = updatedAt = now.
        """
        placeholder = record["placeholder"]
        email = self.email
        records = self.get(kind)
        index = self._locate(records, placeholder, email)
        timestamp = now_ms()

        updates = {k: v for k, v in record.items() if k not in _BOOKKEEPING}
        if "options" in updates:
            updates["options"] = single_selected(updates["options"])

        if index is not None:
            stored = records[index]
            stored.update(updates)
            stored["count"] = int(stored.get("count") or 0) + 1
            if not stored.get("createdAt"):
                stored["createdAt"] = timestamp
            stored["updatedAt"] = timestamp
        else:
            stored = {
                "placeholder": placeholder,
                "email": email,
                "count": 1,
                "createdAt": timestamp,
                "updatedAt": timestamp,
            }
            if kind == TEXT:
                stored["defaultValue"] = ""
            stored.update(updates)
            records.append(stored)

        self.store.set({STORAGE_KEYS[kind]: records})
        return stored

    def record_unanswered(self, placeholder):
        """Remember a text question with no answer yet (or bump its count)"""
        return self.upsert(TEXT, {"placeholder": placeholder})

    def set_answer(self, kind, placeholder, value):
        """Explicitly set the stored answer for a question, creating it if needed"""
        records = self.get(kind)
        index = self._locate(records, placeholder, self.email)
        if index is None:
            record = {"placeholder": placeholder, "defaultValue": value}
            if kind != TEXT:
                record["options"] = [{"value": value, "text": value, "selected": True}]
            return self.upsert(kind, record)

        stored = records[index]
        stored["defaultValue"] = value
        if kind != TEXT:
            stored["options"] = single_selected(stored.get("options"), value)
        stored["updatedAt"] = now_ms()
        self.store.set({STORAGE_KEYS[kind]: records})
        return stored

    def delete(self, kind, placeholder):
        """Remove the record for placeholder; returns True when one was deleted"""
        records = self.get(kind)
        index = self._locate(records, placeholder, self.email)
        if index is None:
            return False
        del records[index]
        self.store.set({STORAGE_KEYS[kind]: records})
        return True
