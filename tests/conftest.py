"""Shared fixtures for the auto-apply test suite.

Everything runs offline: pacing sleeps are disabled, the store lives in
memory and FakeSite stands in for the Playwright-backed LinkedInSite.
"""

import time

import pytest

import linkedin_auto_apply.config as config
from linkedin_auto_apply.data.field_configs import FieldConfigStore
from linkedin_auto_apply.data.store import JsonStore, KEY_DEFAULT_FIELDS, KEY_USER_EMAIL
from linkedin_auto_apply.interaction.notify import Notifier
from linkedin_auto_apply.messaging.channel import MessageChannel
from linkedin_auto_apply.messaging.coordinator import BackgroundCoordinator
from linkedin_auto_apply.perception.job_list import JobListing
from linkedin_auto_apply.state.run_state import Lifecycle

SEARCH_URL = "https://www.linkedin.com/jobs/search/?keywords=engineer&geoId=1"


# ---------------------------------------------------------------------------
# Fake page model
# ---------------------------------------------------------------------------


class FakeElement:
    def __init__(self, name, kind=None, value="", checked=False, options=None):
        self.name = name
        self.kind = kind
        self.value = value
        self.checked = checked
        self.options = options or []
        self.selected_index = -1
        self.events = []

    def __repr__(self):
        return f"FakeElement({self.name!r})"


def text_question(label, value="", is_checkbox=False, is_combobox=False):
    return {
        "element": FakeElement(label, kind="text", value=value),
        "label": label,
        "tag": "input",
        "input_type": "checkbox" if is_checkbox else "text",
        "value": value,
        "checked": False,
        "is_checkbox": is_checkbox,
        "is_combobox": is_combobox,
    }


def radio_group(label, *values):
    return {
        "label": label,
        "options": [
            {
                "value": value,
                "text": value,
                "selected": False,
                "element": FakeElement(f"{label}:{value}", kind="radio", value=value),
            }
            for value in values
        ],
    }


def dropdown(label, *values, selected_index=0):
    options = [{"value": value, "text": value, "selected": i == selected_index} for i, value in enumerate(values)]
    element = FakeElement(label, kind="select", options=options)
    element.selected_index = selected_index
    return {"element": element, "label": label, "options": options, "selected_index": selected_index}


def wizard_step(*buttons, text=(), radios=(), dropdowns=(), checkboxes=(), feedback=False,
                safety_reminder=False, save_prompt=False, follow_company=None):
    return {
        "buttons": set(buttons),
        "text": list(text),
        "radios": list(radios),
        "dropdowns": list(dropdowns),
        "checkboxes": list(checkboxes),
        "feedback": feedback,
        "safety_reminder": safety_reminder,
        "save_prompt": save_prompt,
        "follow_company": follow_company,
    }


class FakeListingItem:
    def __init__(self, title, company="Acme", job_id="1", applied=False,
                 description="", easy_apply=True, steps=None):
        self.listing = JobListing(
            title=title.lower(),
            company_name=company,
            link=f"/jobs/view/{job_id}/",
            has_applied_badge=applied,
            link_element=FakeElement(f"title:{job_id}", kind="title"),
        )
        self.job_id = job_id
        self.description = description
        self.easy_apply = easy_apply
        self.steps = steps if steps is not None else [wizard_step("submit")]


class FakeSite:
    """Scriptable stand-in for LinkedInSite recording every actuation"""

    def __init__(self, url=SEARCH_URL, pages=None):
        self.url = url
        self.pages = pages or [[]]
        self.page_index = 0
        self.current_item = None
        self.steps = []
        self.step = 0
        self.modal_open = False
        self.discard_prompt = False
        self.done_after_submit = False
        self.done_prompt = False
        self.no_thanks_prompt = False
        self.submitted = 0
        self.limit_reached = False
        self.actions = []
        self.navigations = []

    # Navigation
    def current_url(self):
        return self.url

    def navigate(self, url):
        self.navigations.append(url)
        self.url = url

    def wait_for_load_complete(self, timeout_ms=0):
        return True

    # Results list
    def wait_for_list_items(self, timeout_ms=0):
        return list(self.pages[self.page_index])

    def read_listing(self, item):
        return item.listing

    def open_listing(self, listing):
        for item in self.pages[self.page_index]:
            if item.listing is listing:
                self.current_item = item
                self.url = f"{SEARCH_URL}&currentJobId={item.job_id}"
        self.actions.append(("open", listing.title))
        return True

    def job_description_text(self):
        return self.current_item.description if self.current_item else ""

    def easy_apply_buttons(self):
        if self.current_item and self.current_item.easy_apply:
            return [FakeElement("easy_apply", kind="easy_apply")]
        return []

    def close_application_sent_modal(self):
        return False

    def limit_banner(self):
        return FakeElement("limit_banner") if self.limit_reached else None

    def highlight(self, element):
        self.actions.append(("highlight", element.name))

    # Wizard modal
    def _current_step(self):
        if not self.modal_open or self.step >= len(self.steps):
            return None
        return self.steps[self.step]

    def modal_present(self, timeout_ms=0):
        return self._current_step() is not None

    def _dismiss_overlay(self, name):
        step = self._current_step()
        if not (step and step[name]):
            return False
        step[name] = False
        self.actions.append(("dismiss", name))
        return True

    def dismiss_safety_reminder(self):
        return self._dismiss_overlay("safety_reminder")

    def dismiss_save_prompt(self):
        return self._dismiss_overlay("save_prompt")

    def find_modal_button(self, kind, timeout_ms=0):
        step = self._current_step()
        if step is not None and kind in step["buttons"]:
            return FakeElement(kind, kind=kind)
        return None

    def follow_company_checkbox(self, timeout_ms=0):
        step = self._current_step()
        return step["follow_company"] if step else None

    def close_button(self):
        return FakeElement("close", kind="close") if self.modal_open else None

    def done_button(self, timeout_ms=0):
        return FakeElement("done", kind="done") if self.done_prompt else None

    def has_inline_feedback(self):
        step = self._current_step()
        return bool(step and step["feedback"])

    def dismiss_button(self, modal=None):
        return FakeElement("dismiss", kind="dismiss") if self.modal_open else None

    def discard_button(self):
        return FakeElement("discard", kind="discard") if self.discard_prompt else None

    def open_modals(self):
        return [FakeElement("modal")] if self.modal_open else []

    def no_thanks_button(self):
        return FakeElement("no_thanks", kind="no_thanks") if self.no_thanks_prompt else None

    # Form questions
    def text_questions(self):
        step = self._current_step()
        return step["text"] if step else []

    def radio_groups(self):
        step = self._current_step()
        return step["radios"] if step else []

    def dropdowns(self):
        step = self._current_step()
        return step["dropdowns"] if step else []

    def checkbox_groups(self):
        step = self._current_step()
        return step["checkboxes"] if step else []

    def is_checked(self, element):
        return element.checked

    def pick_first_suggestion(self, element):
        self.actions.append(("suggestion", element.name))
        return True

    # Pagination
    def next_page_button(self):
        if self.page_index < len(self.pages) - 1:
            return FakeElement("page_next", kind="page_next")
        return None

    def active_page_label(self):
        return str(self.page_index + 1)

    def scroll_list_to_bottom(self):
        pass

    # Actuation
    def click(self, element):
        self.actions.append(("click", element.name))
        kind = element.kind
        if kind == "easy_apply":
            self.steps = self.current_item.steps
            self.step = 0
            self.modal_open = bool(self.steps)
        elif kind in ("continue", "next", "review"):
            self.step += 1
        elif kind == "submit":
            self.submitted += 1
            self.modal_open = False
            self.done_prompt = self.done_after_submit
        elif kind == "done":
            self.done_prompt = False
        elif kind == "no_thanks":
            self.no_thanks_prompt = False
        elif kind in ("close", "dismiss"):
            self.discard_prompt = self.modal_open and kind == "dismiss"
            self.modal_open = False
        elif kind == "discard":
            self.discard_prompt = False
        elif kind == "page_next":
            self.page_index += 1

    def scroll_into_view(self, element):
        pass

    def focus(self, element):
        self.actions.append(("focus", element.name))

    def blur(self, element):
        self.actions.append(("blur", element.name))

    def set_native_value(self, element, value):
        element.value = value
        self.actions.append(("set_value", element.name, value))

    def dispatch(self, element, event_type):
        element.events.append(event_type)

    def set_checked(self, element, checked=True):
        element.checked = checked
        self.actions.append(("set_checked", element.name, checked))

    def select_index(self, element, index):
        element.selected_index = index
        self.actions.append(("select_index", element.name, index))

    def select_value(self, element, value):
        element.value = value
        self.actions.append(("select_value", element.name, value))

    def values_set(self):
        return [action[1:] for action in self.actions if action[0] == "set_value"]

    def clicks(self):
        return [action[1] for action in self.actions if action[0] == "click"]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _no_delays(monkeypatch, tmp_path):
    """Disable pacing sleeps and keep the results log inside tmp_path"""
    monkeypatch.setattr(time, "sleep", lambda seconds: None)
    monkeypatch.setattr(config, "LOG_FILE", str(tmp_path / "log.jsonl"))


@pytest.fixture
def store():
    store = JsonStore()
    store.set({KEY_USER_EMAIL: "me@example.com"})
    return store


@pytest.fixture
def profile_store(store):
    store.set(
        {
            KEY_DEFAULT_FIELDS: {
                "YearsOfExperience": "5",
                "City": "Berlin",
                "FirstName": "John",
                "LastName": "Doe",
                "Email": "john@example.com",
                "PhoneNumber": "5550100",
            }
        }
    )
    return store


@pytest.fixture
def field_configs(store):
    return FieldConfigStore(store)


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def coordinator(store, field_configs, notifier):
    return BackgroundCoordinator(store, field_configs, notifier)


@pytest.fixture
def channel(coordinator):
    return MessageChannel(coordinator.handle)


@pytest.fixture
def lifecycle(store, channel, notifier):
    lifecycle = Lifecycle(store, channel, notifier)
    lifecycle.start()
    return lifecycle


@pytest.fixture
def site():
    return FakeSite()
