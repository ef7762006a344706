"""Pagination, loop restart and page-load resumption"""

from urllib.parse import parse_qs, urlencode, urlsplit

import linkedin_auto_apply.config as config
from linkedin_auto_apply.utils.timing import pace

# advance() results
ADVANCE_NEXT_PAGE = "next_page"
ADVANCE_RESTARTED = "restarted"
ADVANCE_STOPPED = "stopped"
ADVANCE_BUSY = "busy"

# on_page_load() results
LOAD_RESUME = "resume"
LOAD_REDIRECT = "redirect"
LOAD_STOP = "stop"
LOAD_IDLE = "idle"


def _query(url):
    return parse_qs(urlsplit(url).query, keep_blank_values=True)


def build_restart_url(url):
    """
    Rebuild a search URL keeping only the allow-listed parameters, in a
    fixed order, with the result offset reset to the first page.
    """
    parts = urlsplit(url)
    params = _query(url)
    kept = [(name, params[name][0]) for name in config.RESTART_PARAMS if name in params]
    kept.append(("start", config.RESTART_START_OFFSET))
    return f"{parts.scheme}://{parts.netloc}{parts.path}?{urlencode(kept)}"


def is_search_url(url):
    return config.SEARCH_PATH_MARKER in urlsplit(url).path and "keywords" in _query(url)


class SessionLoop:
    def __init__(self, site, lifecycle):
        self.site = site
        self.lifecycle = lifecycle
        self._navigating = False

    def advance(self):
        """Go to the next results page, or restart/stop at the last one"""
        if self._navigating:
            return ADVANCE_BUSY
        self._navigating = True
        try:
            return self._advance()
        except Exception as e:
            print(f"  ❌ Could not advance to the next page: {e}")
            self.lifecycle.stop()
            return ADVANCE_STOPPED
        finally:
            self._navigating = False

    def _advance(self):
        next_button = self.site.next_page_button()
        if next_button is None:
            if self.lifecycle.state().loop_enabled:
                print("\n🔁 Last page reached - restarting search")
                return ADVANCE_RESTARTED if self.restart_search() else ADVANCE_STOPPED
            print("\n🏁 Last page reached")
            self.lifecycle.stop()
            return ADVANCE_STOPPED

        self.site.scroll_into_view(next_button)
        if not self.lifecycle.sleep("page_settle"):
            return ADVANCE_STOPPED
        self.site.click(next_button)

        self.site.wait_for_list_items()
        if not self.lifecycle.sleep("page_settle"):
            return ADVANCE_STOPPED
        self.site.scroll_list_to_bottom()
        self.site.wait_for_load_complete()
        print(f"\n📄 Results page {self.site.active_page_label() or '?'}")
        return ADVANCE_NEXT_PAGE

    def restart_search(self):
        """Persist a restart request, wait the loop delay and reload page one"""
        try:
            state = self.lifecycle.state()
            url = build_restart_url(state.last_search_url or self.site.current_url())
            if "keywords" not in _query(url):
                print("  ⚠️ No search keywords to restart with - stopping")
                self.lifecycle.stop()
                return False
            self.lifecycle.request_restart(url)
            if not self.lifecycle.sleep_for(state.loop_delay_seconds):
                return False
            self.lifecycle.on_unload()
            self.site.navigate(url)
            return True
        except Exception as e:
            print(f"  ❌ Restart failed: {e}")
            self.lifecycle.stop()
            return False

    def on_page_load(self):
        """Decide what a freshly loaded page means for a pending restart"""
        state = self.lifecycle.state()
        if not (state.should_restart and state.restart_url):
            self.lifecycle.on_unload()
            return LOAD_IDLE

        url = self.site.current_url()
        params = _query(url)
        has_keywords = "keywords" in params or "keywords" in _query(state.restart_url)
        start = params.get("start", [config.RESTART_START_OFFSET])[0]

        if (
            config.SEARCH_PATH_MARKER in urlsplit(url).path
            and has_keywords
            and start == config.RESTART_START_OFFSET
        ):
            self.lifecycle.clear_restart()
            pace("restart_settle")
            return LOAD_RESUME

        if config.RECOMMENDATIONS_MARKER in url:
            print("  ↪️  Redirected to recommendations - returning to search")
            pace("redirect_settle")
            self.site.navigate(state.restart_url)
            return LOAD_REDIRECT

        self.lifecycle.clear_restart()
        self.lifecycle.on_unload()
        return LOAD_STOP
