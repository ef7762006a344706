"""Wizard state names and step detection"""

import linkedin_auto_apply.config as config

MODAL_DETECTED = "ModalDetected"
SAFETY_DISMISS = "SafetyDismiss"
STEP_VALIDATION = "StepValidation"
ADVANCE_NEXT = "AdvanceNext"
ADVANCE_REVIEW = "AdvanceReview"
SUBMIT = "Submit"
DONE = "Done"
ERROR_DISCARD = "ErrorDiscard"

# Step kinds returned by detect_step
STEP_CONTINUE = "continue"
STEP_SUBMIT = "submit"
STEP_REVIEW = "review"
STEP_NEXT = "next"
STEP_UNKNOWN = "unknown"


def detect_step(site):
    """Detect the current modal step from its buttons - NO ACTIONS, only detection

    Returns (step_kind, button). Priority:
    1. Continue (interstitial, clicked straight through)
    2. Submit (final page, even when Review/Next are also rendered)
    3. Review / Next (form step that needs answers first)

    Review and Submit only get a wait budget when nothing earlier was found,
    since they render late on the last steps.
    """
    button = site.find_modal_button("continue")
    if button is not None:
        return STEP_CONTINUE, button

    next_button = site.find_modal_button("next")
    wait_ms = 0 if next_button is not None else config.BUTTON_WAIT_MS

    review_button = site.find_modal_button("review", wait_ms)
    if review_button is not None:
        wait_ms = 0

    submit_button = site.find_modal_button("submit", wait_ms)
    if submit_button is not None:
        return STEP_SUBMIT, submit_button
    if review_button is not None:
        return STEP_REVIEW, review_button
    if next_button is not None:
        return STEP_NEXT, next_button
    return STEP_UNKNOWN, None
