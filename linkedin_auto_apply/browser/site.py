"""LinkedIn page adapter - the sensing and actuation surface used by the engine"""

import time

from playwright.sync_api import Error as PlaywrightError

import linkedin_auto_apply.config as config
from linkedin_auto_apply.config import SELECTORS
from linkedin_auto_apply.interaction import actuation
from linkedin_auto_apply.interaction.actuation import HIGHLIGHT_JS, SCROLL_TO_BOTTOM_JS
from linkedin_auto_apply.interaction.buttons import (
    find_button_by_text,
    find_modal_button,
    wait_for_modal,
    wait_visible,
)
from linkedin_auto_apply.perception.checkboxes import detect_checkbox_groups
from linkedin_auto_apply.perception.job_list import read_job_listing
from linkedin_auto_apply.perception.radios import detect_radio_groups
from linkedin_auto_apply.perception.selects import detect_select_fields
from linkedin_auto_apply.perception.text_fields import detect_text_questions


class LinkedInSite:
    """
    Wraps a Playwright page.

    Sensing methods never raise for missing elements: they return None, an
    empty list or False. Actuation methods act on the locators returned by
    the sensing methods.
    """

    def __init__(self, page):
        self.page = page

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def current_url(self):
        return self.page.url

    def navigate(self, url):
        self.page.goto(url, wait_until="domcontentloaded", timeout=config.NAVIGATION_TIMEOUT_MS)

    def wait_for_load_complete(self, timeout_ms=config.LOAD_STATE_WAIT_MS):
        """Poll document.readyState until "complete" (or the budget runs out)"""
        deadline = time.monotonic() + timeout_ms / 1000
        while time.monotonic() < deadline:
            try:
                if self.page.evaluate("document.readyState") == "complete":
                    return True
            except PlaywrightError as e:
                print(f"  ⚠️ Load state check failed: {e}")
            time.sleep(config.LOAD_STATE_POLL_MS / 1000)
        return False

    # ------------------------------------------------------------------
    # Results list and detail pane
    # ------------------------------------------------------------------

    def wait_for_list_items(self, timeout_ms=config.LIST_WAIT_MS):
        items = self.page.locator(SELECTORS["list_item"])
        if wait_visible(items, timeout_ms) is None:
            return []
        return items.all()

    def read_listing(self, item):
        title_link = wait_visible(item.locator(SELECTORS["title_link"]), config.TITLE_LINK_WAIT_MS)
        try:
            return read_job_listing(item, title_link)
        except PlaywrightError as e:
            print(f"  ⚠️ Could not read job card: {e}")
            return None

    def open_listing(self, listing):
        """Click the title link and wait for the detail pane"""
        self.scroll_into_view(listing.link_element)
        self.click(listing.link_element)
        return wait_visible(self.page.locator(SELECTORS["detail_pane"]), config.DETAIL_PANE_WAIT_MS) is not None

    def job_description_text(self):
        description = self.page.locator(SELECTORS["job_description"])
        if description.count() == 0:
            return ""
        return (description.first.text_content() or "").strip().lower()

    def easy_apply_buttons(self):
        buttons = self.page.locator(SELECTORS["easy_apply_button"])
        return [button for button in buttons.all() if button.is_visible()]

    def close_application_sent_modal(self):
        modal = self.page.locator(SELECTORS["modal"])
        if modal.count() == 0:
            return False
        text = modal.first.text_content() or ""
        if config.APPLICATION_SENT_TEXT in text and config.APPLICATION_SENT_DETAIL_TEXT in text:
            close = modal.first.locator(SELECTORS["modal_close"])
            if close.count() > 0:
                close.first.click()
                return True
        return False

    def limit_banner(self):
        feedback = self.page.locator(SELECTORS["inline_feedback"])
        if feedback.count() == 0:
            return None
        if config.DAILY_LIMIT_TEXT in (feedback.first.text_content() or ""):
            return feedback.first
        return None

    def highlight(self, element):
        element.evaluate(HIGHLIGHT_JS)

    # ------------------------------------------------------------------
    # Wizard modal
    # ------------------------------------------------------------------

    def modal_present(self, timeout_ms=0):
        return wait_for_modal(self.page, timeout_ms) is not None

    def _dismiss_modal_with_header(self, header_text):
        modal = self.page.locator(SELECTORS["modal"])
        if modal.count() == 0:
            return False
        header = modal.first.locator(SELECTORS["modal_header"])
        if header.count() == 0 or header_text not in (header.first.text_content() or ""):
            return False
        dismiss = modal.first.locator(SELECTORS["modal_close"])
        if dismiss.count() == 0:
            return False
        dismiss.first.click()
        return True

    def dismiss_safety_reminder(self):
        return self._dismiss_modal_with_header(config.SAFETY_REMINDER_TEXT)

    def dismiss_save_prompt(self):
        return self._dismiss_modal_with_header(config.SAVE_APPLICATION_TEXT)

    def find_modal_button(self, kind, timeout_ms=0):
        return find_modal_button(self.page, kind, timeout_ms)

    def follow_company_checkbox(self, timeout_ms=config.FOLLOW_CHECKBOX_WAIT_MS):
        return wait_visible(self.page.locator(SELECTORS["follow_checkbox"]), timeout_ms)

    def close_button(self):
        close = self.page.locator(SELECTORS["modal_close"])
        return close.first if close.count() > 0 else None

    def done_button(self, timeout_ms=config.DONE_BUTTON_WAIT_MS):
        modal = wait_for_modal(self.page, timeout_ms)
        if modal is None:
            return None
        return find_button_by_text(modal, "Done")

    def has_inline_feedback(self):
        return self.page.locator(SELECTORS["inline_feedback"]).count() > 0

    def dismiss_button(self, modal=None):
        scope = modal if modal is not None else self.page
        button = scope.locator(SELECTORS["dismiss_button"])
        return button.first if button.count() > 0 else None

    def discard_button(self):
        return find_button_by_text(
            self.page, "Discard", exact=True, selector=SELECTORS["secondary_dialog_button"]
        )

    def open_modals(self):
        return self.page.locator(SELECTORS["modal"]).all()

    def no_thanks_button(self):
        modal = self.page.locator(SELECTORS["any_modal"])
        if modal.count() == 0:
            return None
        return find_button_by_text(modal.first, "No thanks")

    # ------------------------------------------------------------------
    # Form questions
    # ------------------------------------------------------------------

    def text_questions(self):
        return detect_text_questions(self.page)

    def radio_groups(self):
        return detect_radio_groups(self.page)

    def dropdowns(self):
        return detect_select_fields(self.page)

    def checkbox_groups(self):
        return detect_checkbox_groups(self.page)

    def is_checked(self, element):
        return element.is_checked()

    def pick_first_suggestion(self, element):
        """Click the first option of an autocomplete listbox, if it is showing"""
        listbox_id = element.get_attribute("aria-controls") or element.get_attribute("aria-owns")
        if not listbox_id:
            return False
        option = self.page.locator(f'[id="{listbox_id}"] [role="option"]')
        if option.count() == 0 or not option.first.is_visible():
            return False
        option.first.click()
        return True

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def next_page_button(self):
        pagination = self.page.locator(SELECTORS["pagination"])
        if pagination.count() == 0:
            return None
        button = pagination.first.locator(SELECTORS["pagination_next"])
        return button.first if button.count() > 0 else None

    def active_page_label(self):
        active = self.page.locator(f'{SELECTORS["pagination"]} {SELECTORS["pagination_active"]}')
        return (active.first.inner_text() or "").strip() if active.count() > 0 else ""

    def scroll_list_to_bottom(self):
        scroller = self.page.locator(SELECTORS["list_scroller"])
        if scroller.count() > 0:
            scroller.first.evaluate(SCROLL_TO_BOTTOM_JS)

    # ------------------------------------------------------------------
    # Actuation
    # ------------------------------------------------------------------

    def click(self, element):
        element.click()

    def scroll_into_view(self, element):
        actuation.scroll_into_view(element)

    def focus(self, element):
        element.focus()

    def blur(self, element):
        actuation.blur(element)

    def set_native_value(self, element, value):
        actuation.set_native_value(element, value)

    def dispatch(self, element, event_type):
        actuation.dispatch(element, event_type)

    def set_checked(self, element, checked=True):
        actuation.set_checked(element, checked)

    def select_index(self, element, index):
        actuation.select_index(element, index)

    def select_value(self, element, value):
        actuation.select_value(element, value)
