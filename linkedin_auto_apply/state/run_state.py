"""Run flag and lifecycle - persisted so it survives full page navigations"""

from dataclasses import dataclass
from typing import Optional

from linkedin_auto_apply.data.store import (
    KEY_RUNNING,
    KEY_LAST_SEARCH_URL,
    KEY_RESTART_URL,
    KEY_SHOULD_RESTART,
    KEY_LOOP_ENABLED,
    KEY_LOOP_DELAY,
)
from linkedin_auto_apply.messaging.channel import ChannelUnavailable
from linkedin_auto_apply.messaging.coordinator import ACTION_RUNNING, ACTION_STOP
from linkedin_auto_apply.utils.timing import pace, sleep_seconds


@dataclass
class RunState:
    running: bool = False
    last_search_url: Optional[str] = None
    restart_url: Optional[str] = None
    should_restart: bool = False
    loop_enabled: bool = False
    loop_delay_seconds: int = 0

    @classmethod
    def load(cls, store):
        data = store.get(
            [
                KEY_RUNNING,
                KEY_LAST_SEARCH_URL,
                KEY_RESTART_URL,
                KEY_SHOULD_RESTART,
                KEY_LOOP_ENABLED,
                KEY_LOOP_DELAY,
            ]
        )
        try:
            delay = int(data.get(KEY_LOOP_DELAY) or 0)
        except (TypeError, ValueError):
            delay = 0
        return cls(
            running=bool(data.get(KEY_RUNNING)),
            last_search_url=data.get(KEY_LAST_SEARCH_URL) or None,
            restart_url=data.get(KEY_RESTART_URL) or None,
            should_restart=bool(data.get(KEY_SHOULD_RESTART)),
            loop_enabled=bool(data.get(KEY_LOOP_ENABLED)),
            loop_delay_seconds=max(delay, 0),
        )


class Lifecycle:
    """
    Start/stop/is_running over the persisted run flag.

    Cancellation is cooperative: callers poll is_running() at step
    boundaries, and sleep() checks the flag before and after every pause.
    """

    def __init__(self, store, channel, notifier):
        self.store = store
        self.channel = channel
        self.notifier = notifier

    def start(self):
        self.channel.send(ACTION_RUNNING)
        self.store.set({KEY_RUNNING: True})
        self.notifier.hide_blocked_prompt()

    def stop(self, notify=True):
        self.store.set({KEY_RUNNING: False})
        self.clear_restart()
        self.notifier.hide_running_indicator()
        if notify:
            try:
                self.channel.send(ACTION_STOP)
            except ChannelUnavailable as e:
                print(f"  ⚠️ Could not notify coordinator of stop: {e}")

    def is_running(self):
        return bool(self.store.get(KEY_RUNNING))

    def on_unload(self):
        """Page is going away - never leave the flag set across an unexpected reload"""
        self.store.set({KEY_RUNNING: False})

    def state(self):
        return RunState.load(self.store)

    def sleep(self, name):
        """Pace for the named delay; returns False if the run was stopped before or after"""
        if not self.is_running():
            return False
        pace(name)
        return self.is_running()

    def sleep_for(self, seconds):
        if not self.is_running():
            return False
        sleep_seconds(seconds)
        return self.is_running()

    def remember_search_url(self, url):
        self.store.set({KEY_LAST_SEARCH_URL: url})

    def configure_loop(self, enabled=None, delay_seconds=None):
        """Persist the loop settings that were given; None keeps the saved value"""
        values = {}
        if enabled is not None:
            values[KEY_LOOP_ENABLED] = bool(enabled)
        if delay_seconds is not None:
            values[KEY_LOOP_DELAY] = int(delay_seconds)
        if values:
            self.store.set(values)

    def request_restart(self, url):
        self.store.set({KEY_RESTART_URL: url, KEY_SHOULD_RESTART: True})

    def clear_restart(self):
        self.store.remove([KEY_RESTART_URL, KEY_SHOULD_RESTART])
