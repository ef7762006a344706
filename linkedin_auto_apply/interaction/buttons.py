"""Button lookup inside the application modal"""

from playwright.sync_api import TimeoutError as PlaywrightTimeout

from linkedin_auto_apply.config import SELECTORS

# Button kind -> (selector, text the button must contain or None)
MODAL_BUTTONS = {
    "continue": (SELECTORS["continue_button"], None),
    "next": ("button", "Next"),
    "review": (SELECTORS["review_button"], None),
    "submit": (SELECTORS["submit_button"], None),
}


def wait_visible(locator, timeout_ms):
    """Wait for the first match to be visible; returns it, or None on timeout"""
    if timeout_ms <= 0:
        return locator.first if locator.count() > 0 and locator.first.is_visible() else None
    try:
        locator.first.wait_for(state="visible", timeout=timeout_ms)
        return locator.first
    except PlaywrightTimeout:
        return None


def wait_for_modal(page, timeout_ms):
    """Wait for the application modal to appear"""
    return wait_visible(page.locator(SELECTORS["modal"]), timeout_ms)


def find_modal_button(page, kind, timeout_ms=0):
    """Find a wizard button (continue/next/review/submit) inside the modal"""
    selector, text = MODAL_BUTTONS[kind]
    locator = page.locator(f'{SELECTORS["modal"]} {selector}')
    if text:
        locator = locator.filter(has_text=text)
    return wait_visible(locator, timeout_ms)


def find_button_by_text(scope, text, exact=False, selector="button"):
    """First visible button under scope whose trimmed text equals/contains text"""
    buttons = scope.locator(selector)
    for i in range(buttons.count()):
        button = buttons.nth(i)
        label = (button.text_content() or "").strip()
        if (label == text) if exact else (text in label):
            if button.is_visible():
                return button
    return None
