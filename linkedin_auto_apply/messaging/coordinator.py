"""Background coordinator - handles lifecycle, history and field-config messages"""

from linkedin_auto_apply.data.field_configs import TEXT, RADIO, DROPDOWN
from linkedin_auto_apply.data.store import KEY_APPLIED_JOBS
from linkedin_auto_apply.reasoning.normalize import normalize_text
from linkedin_auto_apply.utils.logging import log_result

ACTION_STOP = "stopAutoApply"
ACTION_RUNNING = "autoApplyRunning"
ACTION_RECORD_APPLIED = "recordAutoAppliedJob"
ACTION_UNANSWERED_FIELD = "updateInputFieldConfigsInStorage"
ACTION_OPEN_DEFAULT_INPUT = "openDefaultInputPage"


def _same_job(a, b):
    return (
        a.get("link") == b.get("link")
        and normalize_text(a.get("title")) == normalize_text(b.get("title"))
        and normalize_text(a.get("companyName")) == normalize_text(b.get("companyName"))
    )


class BackgroundCoordinator:
    """
    Dispatches channel requests by action name.

    Every handler returns a response dict with at least a "success" key.
    """

    def __init__(self, store, field_configs, notifier):
        self.store = store
        self.field_configs = field_configs
        self.notifier = notifier
        self._handlers = {
            ACTION_RUNNING: self._on_running,
            ACTION_STOP: self._on_stop,
            ACTION_RECORD_APPLIED: self._on_record_applied,
            ACTION_UNANSWERED_FIELD: self._on_unanswered_field,
            ACTION_OPEN_DEFAULT_INPUT: self._on_open_default_input,
            "getFormControlData": self._on_get_form_control_data,
            "updateInputFieldValue": self._on_update_text_value,
            "updateRadioButtonValue": self._on_update_radio_value,
            "updateDropdownConfig": self._on_update_dropdown_value,
            "deleteInputFieldConfig": self._on_delete(TEXT),
            "deleteRadioButtonConfig": self._on_delete(RADIO),
            "deleteDropdownConfig": self._on_delete(DROPDOWN),
        }

    def handle(self, action, data=None):
        handler = self._handlers.get(action)
        if handler is None:
            print(f"  ⚠️ Unknown action: {action}")
            return {"success": False, "message": "Unknown action"}
        try:
            return handler(data)
        except (KeyError, TypeError, ValueError) as e:
            print(f"  ⚠️ Error handling {action}: {e}")
            return {"success": False, "message": str(e)}

    def _on_running(self, data):
        self.notifier.show_running_indicator()
        return {"success": True}

    def _on_stop(self, data):
        self.notifier.hide_running_indicator()
        return {"success": True}

    def _on_record_applied(self, data):
        job = dict(data["job"])
        history = self.store.get(KEY_APPLIED_JOBS) or []
        if any(_same_job(existing, job) for existing in history):
            print("  ⏭️  Duplicate job skipped")
            return {"success": False, "reason": "duplicate"}

        history.insert(0, job)
        self.store.set({KEY_APPLIED_JOBS: history})
        log_result(
            job.get("link", ""),
            "APPLIED",
            title=job.get("title", ""),
            company=job.get("companyName", ""),
            job_id=job.get("id", ""),
        )
        return {"success": True}

    def _on_unanswered_field(self, data):
        record = self.field_configs.record_unanswered(data)
        return {"success": True, "count": record["count"]}

    def _on_open_default_input(self, data):
        self.notifier.alert(
            "Profile fields are missing. Fill in YearsOfExperience, City, FirstName, "
            "LastName, Email and PhoneNumber (--settings FILE) before starting."
        )
        return {"success": True}

    def _on_get_form_control_data(self, data):
        return {
            "success": True,
            "data": {
                "inputFieldConfigs": self.field_configs.get(TEXT),
                "radioButtons": self.field_configs.get(RADIO),
                "dropdowns": self.field_configs.get(DROPDOWN),
            },
        }

    def _on_update_text_value(self, data):
        self.field_configs.set_answer(TEXT, data["placeholder"], data["value"])
        return {"success": True}

    def _on_update_radio_value(self, data):
        if self.field_configs.find(RADIO, data["placeholder"]) is None:
            return {"success": False, "message": "Radio config not found"}
        self.field_configs.set_answer(RADIO, data["placeholder"], data["value"])
        return {"success": True}

    def _on_update_dropdown_value(self, data):
        self.field_configs.set_answer(DROPDOWN, data["placeholder"], data["value"])
        return {"success": True}

    def _on_delete(self, kind):
        def handler(data):
            return {"success": self.field_configs.delete(kind, data)}

        return handler
