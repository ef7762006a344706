"""Persisted key/value store - the only state that survives a page reload"""

import copy
import json
import os
import tempfile
from pathlib import Path

# Run state
KEY_RUNNING = "autoApplyRunning"
KEY_LAST_SEARCH_URL = "lastJobSearchUrl"
KEY_RESTART_URL = "loopRestartUrl"
KEY_SHOULD_RESTART = "shouldRestartScript"
KEY_LOOP_ENABLED = "loopRunning"
KEY_LOOP_DELAY = "loopRunningDelay"

# Profile and policies
KEY_USER_EMAIL = "userEmail"
KEY_DEFAULT_FIELDS = "defaultFields"
KEY_STOP_ON_MISSING = "stopIfNotExistInFormControl"

# Learned answers and history
KEY_TEXT_FIELDS = "inputFieldConfigs"
KEY_RADIO_FIELDS = "radioButtons"
KEY_DROPDOWN_FIELDS = "dropdowns"
KEY_APPLIED_JOBS = "autoAppliedJobs"


class JsonStore:
    """
    Small JSON-file key/value store with get/set/remove.

    Every write replaces the whole file atomically. With path=None the store
    lives in memory only.
    """

    def __init__(self, path=None):
        self.path = Path(path) if path else None
        self._data = {}
        if self.path and self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("expected a JSON object")
                self._data = data
            except (OSError, ValueError) as e:
                print(f"  ⚠️ Could not read state file {self.path}: {e}")
                self._data = {}

    def get(self, keys, default=None):
        """Return one value for a string key, or a dict of present keys for a list"""
        if isinstance(keys, str):
            return copy.deepcopy(self._data.get(keys, default))
        return {
            key: copy.deepcopy(self._data[key]) for key in keys if key in self._data
        }

    def set(self, values=None, **kwargs):
        updates = dict(values or {})
        updates.update(kwargs)
        self._data.update(copy.deepcopy(updates))
        self._flush()

    def remove(self, keys):
        if isinstance(keys, str):
            keys = [keys]
        changed = False
        for key in keys:
            if key in self._data:
                del self._data[key]
                changed = True
        if changed:
            self._flush()

    def merge_file(self, settings_path):
        """Merge a JSON settings file (filters, profile fields, email) into the store"""
        with open(settings_path, "r", encoding="utf-8") as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise ValueError(f"Settings file {settings_path} must contain a JSON object")
        self.set(settings)
        return sorted(settings)

    def _flush(self):
        if not self.path:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=".state-", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
