"""Drives the Easy Apply modal from the first step to submission"""

import time
from dataclasses import dataclass, field
from typing import List

import linkedin_auto_apply.config as config
from linkedin_auto_apply.messaging.channel import ChannelUnavailable
from linkedin_auto_apply.state.wizard_state import (
    MODAL_DETECTED,
    SAFETY_DISMISS,
    STEP_VALIDATION,
    ADVANCE_NEXT,
    ADVANCE_REVIEW,
    SUBMIT,
    DONE,
    ERROR_DISCARD,
    STEP_CONTINUE,
    STEP_SUBMIT,
    STEP_REVIEW,
    STEP_NEXT,
    detect_step,
)
from linkedin_auto_apply.utils.timing import pace


@dataclass
class WizardResult:
    deadline: float
    history: List[str] = field(default_factory=list)
    submitted: bool = False
    error: bool = False
    timed_out: bool = False
    fatal: bool = False

    def enter(self, state):
        self.history.append(state)

    def expired(self):
        return time.monotonic() > self.deadline

    @property
    def outcome(self):
        return ERROR_DISCARD if self.error else DONE


class WizardNavigator:
    """
    Iterative state machine over the application modal.

    Every run ends in Done or ErrorDiscard within WIZARD_TIMEOUT_S; any
    failure inside a step resolves to Done and is never raised to the caller.
    """

    def __init__(self, site, lifecycle, form_filler, timeout_s=config.WIZARD_TIMEOUT_S):
        self.site = site
        self.lifecycle = lifecycle
        self.form_filler = form_filler
        self.timeout_s = timeout_s

    def run(self):
        result = WizardResult(deadline=time.monotonic() + self.timeout_s)
        try:
            self._drive(result)
        except ChannelUnavailable as e:
            print(f"  ❌ Coordinator unreachable during application: {e}")
            result.fatal = True
            self.lifecycle.stop(notify=False)
        except Exception as e:
            print(f"  ⚠️ Application wizard error: {e}")

        # A stopped run leaves the modal open for the operator
        if self.lifecycle.is_running():
            try:
                self._close_residual_modals()
            except Exception as e:
                print(f"  ⚠️ Could not close leftover modals: {e}")

        result.enter(result.outcome)
        return result

    def _drive(self, result):
        while True:
            if result.expired():
                print(f"  ⏱️  Application took longer than {self.timeout_s}s - giving up")
                result.timed_out = True
                return
            if not self.lifecycle.sleep("modal_transition"):
                return

            if self.site.dismiss_safety_reminder():
                result.enter(SAFETY_DISMISS)

            if not self.site.modal_present(config.MODAL_WAIT_MS):
                return
            result.enter(MODAL_DETECTED)

            step, button = detect_step(self.site)

            if step == STEP_CONTINUE:
                self.site.scroll_into_view(button)
                if not self.lifecycle.sleep("scroll_settle"):
                    return
                self.site.click(button)
                continue

            if step == STEP_SUBMIT:
                self._submit(result, button)
                return

            if step in (STEP_REVIEW, STEP_NEXT):
                result.enter(STEP_VALIDATION)
                if not self.form_filler.fill_step(deadline=result.deadline):
                    return
                if self.site.has_inline_feedback():
                    print("  ❌ Form has validation errors - discarding application")
                    result.enter(ERROR_DISCARD)
                    result.error = True
                    self._dismiss_and_discard()
                    return

                result.enter(ADVANCE_REVIEW if step == STEP_REVIEW else ADVANCE_NEXT)
                self.site.scroll_into_view(button)
                if not self.lifecycle.sleep("modal_transition"):
                    return
                self.site.click(button)
                continue

            print("  ⚠️ No actionable button in modal")
            return

    def _submit(self, result, button):
        result.enter(SUBMIT)
        self._unfollow_company()

        self.site.scroll_into_view(button)
        if not self.lifecycle.sleep("scroll_settle"):
            return
        self.site.click(button)
        result.submitted = True
        print("  ✅ Application submitted")

        pace("modal_transition")
        close = self.site.close_button()
        if close is not None:
            self.site.scroll_into_view(close)
            pace("scroll_settle")
            self.site.click(close)

        done = self.site.done_button()
        if done is not None:
            self.site.click(done)
            pace("change_settle")

    def _unfollow_company(self):
        checkbox = self.site.follow_company_checkbox()
        if checkbox is None or not self.site.is_checked(checkbox):
            return
        self.site.scroll_into_view(checkbox)
        pace("scroll_settle")
        self.site.set_checked(checkbox, False)
        self.site.dispatch(checkbox, "change")
        pace("change_settle")

    def _dismiss_and_discard(self, modal=None):
        dismiss = self.site.dismiss_button(modal)
        if dismiss is None:
            return False
        self.site.click(dismiss)
        self.site.dispatch(dismiss, "change")
        pace("check_settle")

        discard = self.site.discard_button()
        if discard is not None:
            self.site.click(discard)
            self.site.dispatch(discard, "change")
            pace("check_settle")
        return True

    def _close_residual_modals(self):
        if self.site.modal_present():
            for modal in self.site.open_modals():
                pace("modal_transition")
                self._dismiss_and_discard(modal)
            pace("modal_transition")

        no_thanks = self.site.no_thanks_button()
        if no_thanks is not None:
            self.site.click(no_thanks)
