"""Job listing detection in the search results list"""

from dataclasses import dataclass
from typing import Any, Optional

from linkedin_auto_apply.config import SELECTORS, APPLIED_BADGE_TEXT

_READ_CARD_JS = """(item, selectors) => {
    const footer = item.querySelector(selectors.footer);
    const subtitle = item.querySelector(selectors.subtitle);
    return {
        footer: footer ? footer.textContent.trim() : "",
        company: subtitle ? subtitle.textContent.trim() : "",
    };
}"""

_READ_TITLE_JS = """(link) => {
    const visible = link.querySelector('span[aria-hidden="true"]');
    if (visible && visible.textContent.trim().length > 0) {
        return visible.textContent.trim();
    }
    return link.getAttribute("aria-label") || "";
}"""


@dataclass
class JobListing:
    title: str
    company_name: str
    link: str
    has_applied_badge: bool
    link_element: Any = None


def read_job_listing(item, title_link) -> Optional[JobListing]:
    """Build a JobListing from a results-list item and its resolved title link"""
    if title_link is None:
        return None

    card = item.evaluate(
        _READ_CARD_JS,
        {"footer": SELECTORS["card_footer"], "subtitle": SELECTORS["card_subtitle"]},
    )
    title = title_link.evaluate(_READ_TITLE_JS) or ""
    href = title_link.get_attribute("href") or ""

    return JobListing(
        title=title.strip().lower(),
        company_name=card["company"],
        link=href,
        has_applied_badge=card["footer"] == APPLIED_BADGE_TEXT,
        link_element=title_link,
    )
