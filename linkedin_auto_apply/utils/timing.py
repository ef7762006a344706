"""Timing utilities"""

import time
import random

import linkedin_auto_apply.config as config


def human_delay(min_ms=300, max_ms=800):
    """Random human-like delay"""
    delay = random.uniform(min_ms, max_ms) / 1000
    time.sleep(delay)


def pace(name):
    """Sleep for the named pacing delay of the active timing profile"""
    human_delay(config.TIMING[f"{name}_min"], config.TIMING[f"{name}_max"])


def sleep_seconds(seconds):
    if seconds > 0:
        time.sleep(seconds)
