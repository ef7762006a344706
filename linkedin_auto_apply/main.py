#!/usr/bin/env python3
"""
LinkedIn Auto Apply - Main Orchestration
Walks a job search, applying to every one-click (Easy Apply) listing
"""

import argparse

from linkedin_auto_apply.browser.session import close_browser, launch_browser
from linkedin_auto_apply.browser.site import LinkedInSite
from linkedin_auto_apply.data.field_configs import FieldConfigStore
from linkedin_auto_apply.data.store import JsonStore, KEY_STOP_ON_MISSING
from linkedin_auto_apply.engine.form_filler import FormFiller
from linkedin_auto_apply.engine.jobs import JobIterator
from linkedin_auto_apply.engine.pagination import SessionLoop
from linkedin_auto_apply.engine.runner import AutoApplyRunner
from linkedin_auto_apply.engine.wizard import WizardNavigator
from linkedin_auto_apply.interaction.notify import Notifier
from linkedin_auto_apply.messaging.channel import MessageChannel
from linkedin_auto_apply.messaging.coordinator import BackgroundCoordinator
from linkedin_auto_apply.state.run_state import Lifecycle
import linkedin_auto_apply.config as config


def build_parser():
    parser = argparse.ArgumentParser(
        description="LinkedIn Auto Apply - walk a job search and submit Easy Apply applications",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Speed Modes:
  --speed dev       40-50%% faster (1.5x-2x speed) - balanced testing
  --speed super     70-80%% faster (3x-5x speed) - maximum safe speed
  (default)         Production speed - safest, most human-like

Settings file (--settings) is a JSON object merged into the state file, e.g.
  {"userEmail": "me@example.com",
   "defaultFields": {"FirstName": "Ada", "City": "Berlin", ...},
   "titleSkipWords": ["senior"], "badWords": ["unpaid"]}

Examples:
  python -m linkedin_auto_apply.main "https://www.linkedin.com/jobs/search/?keywords=python"
  python -m linkedin_auto_apply.main --loop --loop-delay 600 "https://www.linkedin.com/jobs/search/?keywords=python"
  python -m linkedin_auto_apply.main --settings settings.json
        """,
    )
    parser.add_argument(
        "search_url",
        nargs="?",
        help="LinkedIn job search URL (defaults to the last search or a pending restart)",
    )
    parser.add_argument(
        "--speed",
        choices=["dev", "super"],
        help="Speed mode: dev (1.5x-2x) or super (3x-5x)",
    )
    parser.add_argument(
        "--loop",
        action=argparse.BooleanOptionalAction,
        help="Restart the search from page one when the last page is done (default: keep the saved setting)",
    )
    parser.add_argument(
        "--loop-delay",
        type=int,
        metavar="SECONDS",
        help="Wait this long before each loop restart (default: keep the saved setting)",
    )
    parser.add_argument(
        "--stop-on-missing",
        action="store_true",
        help="Stop the run when a question has no saved or profile answer",
    )
    parser.add_argument(
        "--state-file",
        default=config.STATE_FILE,
        help=f"Persisted state file (default: {config.STATE_FILE})",
    )
    parser.add_argument(
        "--settings",
        metavar="FILE",
        help="JSON settings merged into the state file (filters, profile fields, email)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run the browser without a window",
    )
    return parser


def wait_for_operator(page):
    """Keep the browser open until the operator is done with it"""
    print("\n⏸️  Browser left open for review")
    try:
        input("Press Enter to close browser...")
    except EOFError:
        # No console attached, so wait for the window to be closed instead
        page.wait_for_event("close", timeout=0)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.loop_delay is not None and args.loop_delay < 0:
        parser.error("--loop-delay must be zero or positive")

    config.apply_speed_mode(args.speed)
    if args.speed == "dev":
        print("⚡ DEV_TEST_SPEED enabled (1.5x-2x speed)\n")
    elif args.speed == "super":
        print("⚡⚡ SUPER_DEV_SPEED enabled (3x-5x speed)\n")

    store = JsonStore(args.state_file)
    if args.settings:
        merged = store.merge_file(args.settings)
        print(f"📋 Settings loaded from {args.settings}: {', '.join(merged)}\n")
    if args.stop_on_missing:
        store.set({KEY_STOP_ON_MISSING: True})

    field_configs = FieldConfigStore(store)
    notifier = Notifier()
    coordinator = BackgroundCoordinator(store, field_configs, notifier)
    channel = MessageChannel(coordinator.handle)
    lifecycle = Lifecycle(store, channel, notifier)
    lifecycle.configure_loop(args.loop, args.loop_delay)

    state = lifecycle.state()
    resuming = not args.search_url and state.should_restart and state.restart_url
    start_url = args.search_url or (state.restart_url if resuming else state.last_search_url)
    if not start_url:
        parser.error("No search URL given and no previous search saved")
    if args.search_url:
        lifecycle.clear_restart()

    p, context, page = launch_browser(headless=args.headless)
    site = LinkedInSite(page)
    page.on("close", lambda _page: lifecycle.on_unload())

    form_filler = FormFiller(site, lifecycle, field_configs, channel, notifier, store)
    wizard = WizardNavigator(site, lifecycle, form_filler)
    jobs = JobIterator(site, lifecycle, wizard, channel, store)
    session_loop = SessionLoop(site, lifecycle)
    runner = AutoApplyRunner(site, store, lifecycle, channel, notifier, jobs, session_loop)

    print("=" * 60)
    print("LinkedIn Auto Apply")
    print("=" * 60)
    print(f"\nNavigating to {start_url}...")

    try:
        site.navigate(start_url)
        site.wait_for_load_complete()
        if resuming:
            runner.resume()
        else:
            runner.run()
        if runner.waiting_for_operator():
            wait_for_operator(page)
    except KeyboardInterrupt:
        print("\n⏹️  Interrupted - stopping")
        lifecycle.stop()
    finally:
        channel.invalidate()
        close_browser(p, context)


if __name__ == "__main__":
    main()
