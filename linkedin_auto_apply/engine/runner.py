"""Run prelude and the page-by-page run loop"""

import time

import linkedin_auto_apply.config as config
from linkedin_auto_apply.data.answer_bank import load_default_fields
from linkedin_auto_apply.engine.pagination import (
    ADVANCE_NEXT_PAGE,
    ADVANCE_RESTARTED,
    LOAD_REDIRECT,
    LOAD_RESUME,
    is_search_url,
)
from linkedin_auto_apply.messaging.channel import ChannelUnavailable
from linkedin_auto_apply.messaging.coordinator import ACTION_OPEN_DEFAULT_INPUT
from linkedin_auto_apply.utils.logging import format_elapsed_time, log_result
from linkedin_auto_apply.utils.timing import pace


class AutoApplyRunner:
    def __init__(self, site, store, lifecycle, channel, notifier, jobs, session_loop):
        self.site = site
        self.store = store
        self.lifecycle = lifecycle
        self.channel = channel
        self.notifier = notifier
        self.jobs = jobs
        self.session_loop = session_loop
        self.pages_processed = 0
        self.limit_reached = False

    def prepare(self):
        """
        Start the run and check it may iterate: profile fields present and no
        daily-limit banner. Returns True when the results list should be walked.
        """
        pace("run_prelude")

        url = self.site.current_url()
        if is_search_url(url):
            self.lifecycle.remember_search_url(url)

        self.lifecycle.start()
        if not self.lifecycle.is_running():
            return False

        if load_default_fields(self.store) is None:
            print("  ⚠️ Profile fields not set")
            self.channel.send(ACTION_OPEN_DEFAULT_INPUT)
            return False

        banner = self.site.limit_banner()
        if banner is not None:
            print(f"  ⚠️ {config.DAILY_LIMIT_TEXT}")
            self.site.highlight(banner)
            self.limit_reached = True
            self.notifier.alert(config.DAILY_LIMIT_ALERT)
            return False

        return True

    def run(self):
        """Process results pages until the run stops; never raises ChannelUnavailable"""
        start_time = time.time()
        try:
            self._run()
        except ChannelUnavailable as e:
            print(f"\n❌ Coordinator unreachable - aborting: {e}")
            self.lifecycle.stop(notify=False)
        except Exception as e:
            print(f"\n❌ Run failed: {e}")
            self.lifecycle.stop()

        elapsed = time.time() - start_time
        print(f"⏱️  Total time: {format_elapsed_time(elapsed)}")
        log_result(
            self.site.current_url(),
            "DAILY_LIMIT" if self.limit_reached else "RUN_STOPPED",
            pages=self.pages_processed,
            elapsed_seconds=round(elapsed, 1),
        )

    def resume(self):
        """Entry point after a reload with a restart pending"""
        if self.resume_after_navigation():
            self.run()

    def waiting_for_operator(self):
        """The daily-limit banner is up and the page stays open for review"""
        return self.limit_reached and self.lifecycle.is_running()

    def _run(self):
        if not self.prepare():
            return

        while self.lifecycle.is_running():
            if not self.jobs.process_page():
                break
            self.pages_processed += 1

            result = self.session_loop.advance()
            if result == ADVANCE_NEXT_PAGE:
                continue
            if result != ADVANCE_RESTARTED:
                break

            self.jobs.dedup.clear()
            if not self.resume_after_navigation():
                break
            if not self.prepare():
                break

    def resume_after_navigation(self):
        """Follow the load hook through redirects; True when the run should resume"""
        for _ in range(config.MAX_RESTART_REDIRECTS + 1):
            self.site.wait_for_load_complete()
            outcome = self.session_loop.on_page_load()
            if outcome == LOAD_RESUME:
                return True
            if outcome != LOAD_REDIRECT:
                return False
        print("  ⚠️ Too many redirects while restarting")
        self.lifecycle.stop()
        return False
