"""Fills one wizard step with learned, profile or default answers"""

import time

import linkedin_auto_apply.config as config
from linkedin_auto_apply.data.answer_bank import load_default_fields
from linkedin_auto_apply.data.field_configs import TEXT, RADIO, DROPDOWN, selected_value
from linkedin_auto_apply.data.store import KEY_STOP_ON_MISSING
from linkedin_auto_apply.interaction.actuation import KEY_EVENT_SEQUENCE
from linkedin_auto_apply.messaging.coordinator import ACTION_UNANSWERED_FIELD
from linkedin_auto_apply.reasoning.matching import find_closest_field
from linkedin_auto_apply.utils.timing import pace


class FormFiller:
    """
    Answers the visible questions of the current step, in document order:
    text/checkbox controls, then radio groups, dropdowns and checkbox groups.

    fill_step() returns False when the run was stopped (by the operator or
    by the stop-on-missing policy) or the step deadline passed.
    """

    def __init__(self, site, lifecycle, field_configs, channel, notifier, store):
        self.site = site
        self.lifecycle = lifecycle
        self.field_configs = field_configs
        self.channel = channel
        self.notifier = notifier
        self.store = store

    def fill_step(self, deadline=None):
        self._deadline = deadline
        self.site.dismiss_save_prompt()
        if not self.fill_text_questions():
            return False
        if not self.fill_radio_groups():
            return False
        if not self.fill_dropdowns():
            return False
        return self.check_checkbox_groups()

    def _may_continue(self):
        if self._deadline is not None and time.monotonic() > self._deadline:
            print("  ⚠️ Step deadline reached while filling questions")
            return False
        return self.lifecycle.is_running()

    @property
    def stop_on_missing(self):
        return bool(self.store.get(KEY_STOP_ON_MISSING))

    def _abort_for_missing(self, label):
        self.lifecycle.stop()
        self.notifier.alert(
            f'Field with label "{label}" is not filled. '
            "Please fill it in the form control settings."
        )

    # ------------------------------------------------------------------
    # Text questions
    # ------------------------------------------------------------------

    def write_text(self, question, value):
        """Native value write followed by the synthetic key/change sequence"""
        element = question["element"]
        if question.get("is_combobox"):
            self.site.focus(element)
            pace("key_event")
            self.site.set_native_value(element, value)
            pace("suggestion")
            if self.site.pick_first_suggestion(element):
                pace("suggestion")
            self.site.dispatch(element, "change")
            pace("key_event")
            self.site.blur(element)
            pace("key_event")
            return

        self.site.set_native_value(element, value)
        for event_type in KEY_EVENT_SEQUENCE:
            self.site.dispatch(element, event_type)
            pace("key_event")
        self.site.dispatch(element, "change")
        pace("change_settle")

    def check_box(self, element):
        self.site.set_checked(element, True)
        self.site.dispatch(element, "change")
        pace("check_settle")

    def fill_text_questions(self):
        default_fields = load_default_fields(self.store) or {}

        for question in self.site.text_questions():
            if not self._may_continue():
                return False

            label = question["label"]

            if question["is_checkbox"]:
                if config.TERMS_LABEL_TEXT in label.lower():
                    self.check_box(question["element"])
                    print(f"  ✓ Accepted terms: {label[:60]}")
                continue

            stored = self.field_configs.find(TEXT, label)
            if stored and stored.get("defaultValue"):
                self.write_text(question, stored["defaultValue"])
                self.field_configs.upsert(TEXT, {"placeholder": stored["placeholder"]})
                print(f"  ✓ Filled '{label}' from saved answer")
                continue

            profile_value = find_closest_field(default_fields, label)
            if profile_value:
                self.write_text(question, profile_value)
                print(f"  ✓ Filled '{label}' from profile")
                continue

            if (question.get("value") or "").strip():
                continue

            if self.stop_on_missing:
                self._abort_for_missing(label)
                return False

            if config.TEXT_FALLBACK_VALUE is not None:
                self.write_text(question, config.TEXT_FALLBACK_VALUE)
            self.channel.send(ACTION_UNANSWERED_FIELD, label)
            print(f"  ⚠️ No answer for '{label}' - saved for later")

        return True

    # ------------------------------------------------------------------
    # Radio groups
    # ------------------------------------------------------------------

    def fill_radio_groups(self):
        for group in self.site.radio_groups():
            if not self._may_continue():
                return False

            label = group["label"]
            options = group["options"]
            stored = self.field_configs.find(RADIO, label)

            if stored:
                wanted = selected_value(stored)
                option = next((o for o in options if o["value"] == wanted), None)
                if option is not None:
                    self.check_box(option["element"])
                self.field_configs.upsert(RADIO, {"placeholder": stored["placeholder"]})
                continue

            if len(options) <= config.RADIO_DEFAULT_INDEX:
                continue

            chosen = options[config.RADIO_DEFAULT_INDEX]
            self.check_box(chosen["element"])
            catalog = [
                {
                    "value": option["value"],
                    "text": option["text"],
                    "selected": index == config.RADIO_DEFAULT_INDEX,
                }
                for index, option in enumerate(options)
            ]
            self.field_configs.upsert(
                RADIO,
                {"placeholder": label, "defaultValue": chosen["value"], "options": catalog},
            )
            print(f"  ⚠️ New radio question '{label}' - picked '{chosen['text']}'")

            if self.stop_on_missing:
                self._abort_for_missing(label)
                return False

        return True

    # ------------------------------------------------------------------
    # Dropdowns
    # ------------------------------------------------------------------

    def fill_dropdowns(self):
        for dropdown in self.site.dropdowns():
            if not self._may_continue():
                return False

            element = dropdown["element"]
            label = dropdown["label"]
            options = dropdown["options"]
            stored = self.field_configs.find(DROPDOWN, label)

            if stored:
                value = selected_value(stored)
                if value is not None:
                    self.site.select_value(element, value)
                    self.site.dispatch(element, "change")
                self.field_configs.upsert(DROPDOWN, {"placeholder": stored["placeholder"]})
                continue

            selected_index = dropdown["selected_index"]
            default_index = config.DROPDOWN_DEFAULT_INDEX
            if selected_index < default_index and len(options) > default_index:
                self.site.select_index(element, default_index)
                self.site.dispatch(element, "change")
                selected_index = default_index

            catalog = [
                {
                    "value": option["value"],
                    "text": option["text"],
                    "selected": index == selected_index,
                }
                for index, option in enumerate(options)
            ]
            self.field_configs.upsert(DROPDOWN, {"placeholder": label, "options": catalog})

        return True

    # ------------------------------------------------------------------
    # Checkbox groups
    # ------------------------------------------------------------------

    def check_checkbox_groups(self):
        for group in self.site.checkbox_groups():
            if not self._may_continue():
                return False
            if group["checkboxes"]:
                self.check_box(group["checkboxes"][0])
        return True
