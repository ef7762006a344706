"""Configuration, timing profiles and policy constants for the auto-apply engine"""

# ========================================
# SPEED MODE CONFIGURATION
# ========================================
# Choose one mode (set all others to False):
# - DEV_TEST_SPEED: roughly 2x faster pacing
# - SUPER_DEV_SPEED: roughly 3x faster pacing
# - Production: All False (default, safest)

DEV_TEST_SPEED = False
SUPER_DEV_SPEED = False

# ========================================
# TIMING PROFILES
# ========================================
# All delays are in milliseconds (ms)
# Each delay is randomized between its min and max via human_delay()

TIMING_PROFILES = {
    "default": {
        # Synthetic key event pacing (keydown/keypress/input/keyup)
        "key_event_min": 100,
        "key_event_max": 120,
        # Settle after a change notification
        "change_settle_min": 200,
        "change_settle_max": 250,
        # Settle after checking a radio/checkbox
        "check_settle_min": 500,
        "check_settle_max": 600,
        # Settle after scrolling a control into view
        "scroll_settle_min": 300,
        "scroll_settle_max": 400,
        # Wizard step transitions
        "modal_transition_min": 1000,
        "modal_transition_max": 1200,
        # Between listings in the results list
        "list_item_min": 300,
        "list_item_max": 450,
        # After opening a listing, before reading the detail pane
        "job_open_min": 1000,
        "job_open_max": 1200,
        # After the next-page click and after the new list renders
        "page_settle_min": 1000,
        "page_settle_max": 1300,
        # Load-hook settle before relaunching / redirecting
        "restart_settle_min": 3000,
        "restart_settle_max": 3200,
        "redirect_settle_min": 2000,
        "redirect_settle_max": 2200,
        # Run prelude
        "run_prelude_min": 3000,
        "run_prelude_max": 3200,
        # Autocomplete suggestion pop-up
        "suggestion_min": 300,
        "suggestion_max": 400,
    },
    "dev_test": {
        "key_event_min": 50,
        "key_event_max": 70,
        "change_settle_min": 120,
        "change_settle_max": 150,
        "check_settle_min": 250,
        "check_settle_max": 300,
        "scroll_settle_min": 150,
        "scroll_settle_max": 200,
        "modal_transition_min": 600,
        "modal_transition_max": 700,
        "list_item_min": 150,
        "list_item_max": 220,
        "job_open_min": 600,
        "job_open_max": 700,
        "page_settle_min": 600,
        "page_settle_max": 750,
        "restart_settle_min": 2000,
        "restart_settle_max": 2200,
        "redirect_settle_min": 1200,
        "redirect_settle_max": 1400,
        "run_prelude_min": 1500,
        "run_prelude_max": 1700,
        "suggestion_min": 200,
        "suggestion_max": 250,
    },
    "super_dev": {
        "key_event_min": 30,
        "key_event_max": 40,
        "change_settle_min": 80,
        "change_settle_max": 100,
        "check_settle_min": 150,
        "check_settle_max": 200,
        "scroll_settle_min": 100,
        "scroll_settle_max": 150,
        "modal_transition_min": 400,
        "modal_transition_max": 450,
        "list_item_min": 100,
        "list_item_max": 150,
        "job_open_min": 400,
        "job_open_max": 450,
        "page_settle_min": 400,
        "page_settle_max": 500,
        "restart_settle_min": 1500,
        "restart_settle_max": 1700,
        "redirect_settle_min": 1000,
        "redirect_settle_max": 1100,
        "run_prelude_min": 1000,
        "run_prelude_max": 1100,
        "suggestion_min": 150,
        "suggestion_max": 200,
    },
}

# ========================================
# SAFETY VALIDATIONS
# ========================================
_MIN_DELAY_MS = 25
_MIN_MODAL_TRANSITION_MS = 400
_MIN_RESTART_SETTLE_MS = 1000


def get_active_timing():
    """Get the active timing profile based on current speed mode settings"""
    if SUPER_DEV_SPEED:
        return TIMING_PROFILES["super_dev"]
    elif DEV_TEST_SPEED:
        return TIMING_PROFILES["dev_test"]
    else:
        return TIMING_PROFILES["default"]


def timing_violations(timing):
    """Return a list of human-readable floor violations for a timing profile"""
    violations = []
    for key, value in timing.items():
        if value < _MIN_DELAY_MS:
            violations.append(f"{key}={value}ms < {_MIN_DELAY_MS}ms minimum")
        if "modal" in key and value < _MIN_MODAL_TRANSITION_MS:
            violations.append(
                f"{key}={value}ms < {_MIN_MODAL_TRANSITION_MS}ms minimum"
            )
        if "restart" in key and value < _MIN_RESTART_SETTLE_MS:
            violations.append(f"{key}={value}ms < {_MIN_RESTART_SETTLE_MS}ms minimum")
    return violations


def apply_speed_mode(speed):
    """Switch the active timing profile ("dev", "super" or None for production)"""
    global DEV_TEST_SPEED, SUPER_DEV_SPEED, TIMING
    DEV_TEST_SPEED = speed == "dev"
    SUPER_DEV_SPEED = speed == "super"
    TIMING = get_active_timing()

    violations = timing_violations(TIMING)
    if violations:
        print("⚠️ TIMING PROFILE VIOLATIONS - Falling back to default profile:")
        for violation in violations:
            print(f"  - {violation}")
        DEV_TEST_SPEED = False
        SUPER_DEV_SPEED = False
        TIMING = TIMING_PROFILES["default"]
    return TIMING


TIMING = get_active_timing()

# ========================================
# WAIT BUDGETS (milliseconds unless noted)
# ========================================
WIZARD_TIMEOUT_S = 30
MODAL_WAIT_MS = 3000
BUTTON_WAIT_MS = 2000
FOLLOW_CHECKBOX_WAIT_MS = 3000
LIST_WAIT_MS = 5000
TITLE_LINK_WAIT_MS = 5000
DETAIL_PANE_WAIT_MS = 5000
DONE_BUTTON_WAIT_MS = 500
LOAD_STATE_POLL_MS = 500
LOAD_STATE_WAIT_MS = 15000
NAVIGATION_TIMEOUT_MS = 30000

# ========================================
# HEURISTIC POLICIES
# ========================================
# Unknown dropdowns: index 0 is usually a "Select an option" placeholder
DROPDOWN_DEFAULT_INDEX = 1
# Unknown radio groups: first option in document order
RADIO_DEFAULT_INDEX = 0
# Written into unanswered text questions; the stored answer stays empty.
# None leaves the field untouched.
TEXT_FALLBACK_VALUE = "1"
# Maximum normalized edit-distance score accepted by fuzzy label matching
MATCH_THRESHOLD = 0.4

# ========================================
# SEARCH / LOOP
# ========================================
RESTART_PARAMS = ("keywords", "geoId", "f_TPR", "sortBy", "origin", "refresh")
RESTART_START_OFFSET = "1"
SEARCH_PATH_MARKER = "/jobs/search/"
RECOMMENDATIONS_MARKER = "JOBS_HOME_JYMBII"
MAX_RESTART_REDIRECTS = 3

# ========================================
# PAGE TEXT MARKERS
# ========================================
DAILY_LIMIT_TEXT = "You've exceeded the daily application limit"
DAILY_LIMIT_ALERT = "Daily application limit reached - review the highlighted banner, then close the browser"
SAFETY_REMINDER_TEXT = "Job search safety reminder"
SAVE_APPLICATION_TEXT = "Save this application?"
APPLICATION_SENT_TEXT = "Application sent"
APPLICATION_SENT_DETAIL_TEXT = "Your application was sent to"
APPLIED_BADGE_TEXT = "Applied"
TERMS_LABEL_TEXT = "terms"

# ========================================
# SELECTORS
# ========================================
SELECTORS = {
    # Results list
    "list_item": ".scaffold-layout__list-item",
    "title_link": ".artdeco-entity-lockup__title .job-card-container__link",
    "title_text": 'span[aria-hidden="true"]',
    "card_footer": '[class*="footer"]',
    "card_subtitle": '[class*="subtitle"]',
    "list_scroller": ".scaffold-layout__list > div",
    # Detail pane
    "detail_pane": ".jobs-details__main-content",
    "job_description": '[class*="jobs-box__html-content"]',
    "easy_apply_button": (
        ".jobs-details__main-content button.jobs-apply-button, "
        '.jobs-details__main-content button[aria-label*="Easy Apply"]'
    ),
    # Wizard modal
    "modal": ".artdeco-modal",
    "any_modal": '[class*="artdeco-modal"]',
    "modal_header": ".artdeco-modal__header",
    "modal_close": ".artdeco-modal__dismiss",
    "continue_button": 'button[aria-label="Continue applying"]',
    "review_button": 'button[aria-label="Review your application"]',
    "submit_button": 'button[aria-label="Submit application"]',
    "dismiss_button": 'button[aria-label="Dismiss"]',
    "secondary_dialog_button": "button[data-test-dialog-secondary-btn]",
    "follow_checkbox": "#follow-company-checkbox",
    "inline_feedback": ".artdeco-inline-feedback__message",
    # Form questions
    "form_element": ".fb-dash-form-element",
    "text_label": ".artdeco-text-input--label",
    "form_control": 'input:not([type="hidden"]), textarea',
    "radio_fieldset": 'fieldset[data-test-form-builder-radio-button-form-component="true"]',
    "dropdown": ".fb-dash-form-element select",
    "checkbox_fieldset": 'fieldset[data-test-checkbox-form-component="true"]',
    # Pagination
    "pagination": ".jobs-search-pagination",
    "pagination_active": ".jobs-search-pagination__indicator-button--active",
    "pagination_next": "button[aria-label*='next' i]",
}

# ========================================
# FILES
# ========================================
BROWSER_DATA_DIR = "./browser_data"
USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
STATE_FILE = "autoapply_state.json"
LOG_FILE = "log.jsonl"
