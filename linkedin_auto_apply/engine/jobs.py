"""Iterates the results list: filter, open, de-duplicate and apply"""

import uuid
from dataclasses import dataclass, asdict

from linkedin_auto_apply.data.field_configs import now_ms
from linkedin_auto_apply.messaging.channel import ChannelUnavailable
from linkedin_auto_apply.messaging.coordinator import ACTION_RECORD_APPLIED
from linkedin_auto_apply.reasoning.filters import FilterSettings, find_bad_word, title_skip_reason
from linkedin_auto_apply.reasoning.normalize import normalize_text
from linkedin_auto_apply.utils.logging import log_result

# apply_to() outcomes
OUTCOME_NO_DETAIL = "no_detail_pane"
OUTCOME_BAD_WORD = "bad_word"
OUTCOME_STOPPED = "stopped"
OUTCOME_NO_EASY_APPLY = "no_easy_apply"


@dataclass
class AppliedJobEvent:
    id: str
    title: str
    companyName: str
    link: str
    timestamp: int

    def to_dict(self):
        return asdict(self)


class DedupCache:
    """In-memory record of jobs already forwarded during this page session"""

    def __init__(self):
        self._keys = set()

    @staticmethod
    def key(title, company_name, url):
        return f"{normalize_text(title)}::{normalize_text(company_name)}::{url}"

    def add(self, title, company_name, url):
        """Returns True the first time a job is seen, False for a repeat"""
        key = self.key(title, company_name, url)
        if key in self._keys:
            return False
        self._keys.add(key)
        return True

    def clear(self):
        self._keys.clear()

    def __len__(self):
        return len(self._keys)


class JobIterator:
    def __init__(self, site, lifecycle, wizard, channel, store, dedup=None):
        self.site = site
        self.lifecycle = lifecycle
        self.wizard = wizard
        self.channel = channel
        self.store = store
        self.dedup = dedup if dedup is not None else DedupCache()

    def process_page(self):
        """
        Walk every listing on the current results page.

        Returns True when the page was finished with the run still active,
        False when the run stopped part-way.
        """
        settings = FilterSettings.from_store(self.store)
        items = self.site.wait_for_list_items()
        if not items:
            print("  ⚠️ No job listings found on this page")

        for index, item in enumerate(items, 1):
            if not self.lifecycle.sleep("list_item"):
                return False

            self.site.close_application_sent_modal()

            listing = self.site.read_listing(item)
            if listing is None:
                print(f"  ⚠️ Listing {index}: no title link - skipping")
                continue
            if listing.has_applied_badge:
                print(f"  ⏭️  Already applied: {listing.title}")
                continue
            if not listing.title:
                continue

            reason = title_skip_reason(listing.title, settings)
            if reason:
                log_result(listing.link, "SKIPPED", reason, title=listing.title)
                continue

            if not self.lifecycle.is_running():
                return False

            print(f"\n[{index}/{len(items)}] {listing.title} @ {listing.company_name}")
            try:
                self.apply_to(listing, settings)
            except ChannelUnavailable:
                raise
            except Exception as e:
                print(f"  ⚠️ Error processing listing: {e}")

        return self.lifecycle.is_running()

    def apply_to(self, listing, settings):
        """Open one listing and run the application wizard on it"""
        if not self.site.open_listing(listing):
            print("  ⚠️ Job details did not load")
            return OUTCOME_NO_DETAIL

        if settings.bad_words_enabled:
            word = find_bad_word(self.site.job_description_text(), settings.bad_words)
            if word:
                log_result(listing.link, "SKIPPED", f"bad word: {word}", title=listing.title)
                return OUTCOME_BAD_WORD

        if not self.lifecycle.sleep("job_open"):
            return OUTCOME_STOPPED

        self.forward_applied(listing)

        buttons = self.site.easy_apply_buttons()
        if not buttons:
            print("  ⏭️  No Easy Apply button")
            return OUTCOME_NO_EASY_APPLY
        if not self.lifecycle.is_running():
            return OUTCOME_STOPPED

        self.site.click(buttons[0])
        result = self.wizard.run()

        if result.submitted:
            log_result(listing.link, "SUBMITTED", title=listing.title, steps=len(result.history))
        elif result.error:
            log_result(listing.link, "DISCARDED", "validation errors", title=listing.title)
        elif result.timed_out:
            log_result(listing.link, "INCOMPLETE", "wizard timed out", title=listing.title)
        return result.outcome

    def forward_applied(self, listing):
        """Send the job to the coordinator once per page session"""
        page_url = self.site.current_url()
        if not self.dedup.add(listing.title, listing.company_name, page_url):
            return False

        event = AppliedJobEvent(
            id=str(uuid.uuid4()),
            title=listing.title,
            companyName=listing.company_name,
            link=page_url,
            timestamp=now_ms(),
        )
        self.channel.send(ACTION_RECORD_APPLIED, {"job": event.to_dict()})
        return True
