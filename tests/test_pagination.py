"""Pagination, loop restart and the page-load hook"""

import pytest

from conftest import SEARCH_URL, FakeListingItem, FakeSite
from linkedin_auto_apply.engine.pagination import (
    ADVANCE_BUSY,
    ADVANCE_NEXT_PAGE,
    ADVANCE_RESTARTED,
    ADVANCE_STOPPED,
    LOAD_IDLE,
    LOAD_REDIRECT,
    LOAD_RESUME,
    LOAD_STOP,
    SessionLoop,
    build_restart_url,
    is_search_url,
)

RESTART_URL = "https://www.linkedin.com/jobs/search/?keywords=engineer&geoId=1&start=1"


def test_restart_url_keeps_allow_listed_params_only():
    url = "https://www.linkedin.com/jobs/search/?keywords=engineer&geoId=1&foo=bar&start=25"
    assert build_restart_url(url) == RESTART_URL


def test_restart_url_uses_fixed_param_order():
    url = (
        "https://www.linkedin.com/jobs/search/?refresh=true&sortBy=DD&currentJobId=9"
        "&f_TPR=r86400&origin=JOBS_HOME_SEARCH_BUTTON&keywords=data%20engineer"
    )
    assert build_restart_url(url) == (
        "https://www.linkedin.com/jobs/search/?keywords=data+engineer&f_TPR=r86400"
        "&sortBy=DD&origin=JOBS_HOME_SEARCH_BUTTON&refresh=true&start=1"
    )


def test_restart_url_without_params():
    assert build_restart_url("https://www.linkedin.com/jobs/search/") == (
        "https://www.linkedin.com/jobs/search/?start=1"
    )


def test_is_search_url():
    assert is_search_url(SEARCH_URL)
    assert not is_search_url("https://www.linkedin.com/jobs/search/?geoId=1")
    assert not is_search_url("https://www.linkedin.com/jobs/collections/recommended/?keywords=a")


@pytest.fixture
def two_pages():
    return FakeSite(pages=[[FakeListingItem("A")], [FakeListingItem("B", job_id="2")]])


def test_advance_to_next_page(two_pages, lifecycle):
    loop = SessionLoop(two_pages, lifecycle)
    assert loop.advance() == ADVANCE_NEXT_PAGE
    assert two_pages.page_index == 1
    assert lifecycle.is_running()


def test_last_page_without_loop_stops(site, lifecycle):
    assert SessionLoop(site, lifecycle).advance() == ADVANCE_STOPPED
    assert not lifecycle.is_running()
    assert site.navigations == []


def test_last_page_with_loop_restarts(site, lifecycle):
    lifecycle.remember_search_url(
        "https://www.linkedin.com/jobs/search/?keywords=engineer&geoId=1&foo=bar&start=75"
    )
    lifecycle.configure_loop(True, 0)

    assert SessionLoop(site, lifecycle).advance() == ADVANCE_RESTARTED
    assert site.navigations == [RESTART_URL]
    state = lifecycle.state()
    assert state.should_restart
    assert state.restart_url == RESTART_URL
    assert not state.running


def test_restart_falls_back_to_current_url(site, lifecycle):
    lifecycle.configure_loop(True)
    site.url = "https://www.linkedin.com/jobs/search/?keywords=engineer&geoId=1&start=50"

    assert SessionLoop(site, lifecycle).restart_search()
    assert site.navigations == [RESTART_URL]


def test_restart_is_cancelled_by_stop_during_delay(site, lifecycle, monkeypatch):
    lifecycle.configure_loop(True, 60)
    monkeypatch.setattr("time.sleep", lambda seconds: lifecycle.stop())

    assert SessionLoop(site, lifecycle).advance() == ADVANCE_STOPPED
    assert site.navigations == []
    assert not lifecycle.state().should_restart


def test_failed_navigation_stops_the_run(site, lifecycle):
    lifecycle.configure_loop(True)

    def broken(url):
        raise RuntimeError("net::ERR_ABORTED")

    site.navigate = broken
    assert SessionLoop(site, lifecycle).advance() == ADVANCE_STOPPED
    assert not lifecycle.state().should_restart


def test_advance_is_latched(site, lifecycle):
    loop = SessionLoop(site, lifecycle)
    loop._navigating = True
    assert loop.advance() == ADVANCE_BUSY
    assert lifecycle.is_running()


def test_page_load_resumes_restarted_search(site, lifecycle):
    lifecycle.request_restart(RESTART_URL)
    lifecycle.on_unload()
    site.url = RESTART_URL

    assert SessionLoop(site, lifecycle).on_page_load() == LOAD_RESUME
    assert not lifecycle.state().should_restart


def test_page_load_resumes_when_start_is_absent(site, lifecycle):
    lifecycle.request_restart(RESTART_URL)
    site.url = SEARCH_URL
    assert SessionLoop(site, lifecycle).on_page_load() == LOAD_RESUME


def test_page_load_redirects_from_recommendations(site, lifecycle):
    lifecycle.request_restart(RESTART_URL)
    site.url = "https://www.linkedin.com/jobs/collections/?origin=JOBS_HOME_JYMBII"

    assert SessionLoop(site, lifecycle).on_page_load() == LOAD_REDIRECT
    assert site.navigations == [RESTART_URL]
    assert lifecycle.state().should_restart


def test_page_load_elsewhere_abandons_restart(site, lifecycle):
    lifecycle.request_restart(RESTART_URL)
    site.url = "https://www.linkedin.com/feed/"

    assert SessionLoop(site, lifecycle).on_page_load() == LOAD_STOP
    state = lifecycle.state()
    assert not state.should_restart
    assert not state.running


def test_page_load_without_restart_is_idle(site, lifecycle):
    assert SessionLoop(site, lifecycle).on_page_load() == LOAD_IDLE
    assert not lifecycle.is_running()


def test_failed_next_page_click_stops_without_raising(two_pages, lifecycle):
    def broken(element):
        raise RuntimeError("element is not attached to the DOM")

    two_pages.click = broken
    loop = SessionLoop(two_pages, lifecycle)

    assert loop.advance() == ADVANCE_STOPPED
    assert not lifecycle.is_running()
    assert not loop._navigating


def test_restart_needs_search_keywords(site, lifecycle):
    lifecycle.configure_loop(True)
    site.url = "https://www.linkedin.com/jobs/search/?geoId=1"

    assert SessionLoop(site, lifecycle).advance() == ADVANCE_STOPPED
    assert site.navigations == []
    assert not lifecycle.state().should_restart
