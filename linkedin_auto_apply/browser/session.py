"""Browser session management"""

from playwright.sync_api import sync_playwright

import linkedin_auto_apply.config as config


def launch_browser(headless=False, user_data_dir=None):
    """
    Launch persistent browser context and return (playwright, context, page).
    Reuses login session across runs.
    """
    print("Launching browser...")

    p = sync_playwright().start()

    context = p.chromium.launch_persistent_context(
        user_data_dir=user_data_dir or config.BROWSER_DATA_DIR,
        headless=headless,
        args=["--disable-blink-features=AutomationControlled"],
        viewport={"width": 1280, "height": 720},
        user_agent=config.USER_AGENT,
        ignore_default_args=["--enable-automation"],
    )

    page = context.pages[0] if context.pages else context.new_page()

    return p, context, page


def close_browser(p, context):
    try:
        context.close()
    finally:
        p.stop()
