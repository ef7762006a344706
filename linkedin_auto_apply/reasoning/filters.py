"""Job title and description filtering"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from linkedin_auto_apply.reasoning.normalize import normalize_text


@dataclass
class FilterSettings:
    bad_words: List[str] = field(default_factory=list)
    title_filter_words: List[str] = field(default_factory=list)
    title_skip_words: List[str] = field(default_factory=list)
    bad_words_enabled: bool = True
    title_filter_enabled: bool = True
    title_skip_enabled: bool = True

    @classmethod
    def from_store(cls, store):
        """Read filter rules from the persisted store, defaulting missing values"""
        data = store.get(
            [
                "badWords",
                "titleFilterWords",
                "titleSkipWords",
                "badWordsEnabled",
                "titleFilterEnabled",
                "titleSkipEnabled",
            ]
        )

        def enabled(key):
            value = data.get(key)
            return True if value is None else bool(value)

        return cls(
            bad_words=list(data.get("badWords") or []),
            title_filter_words=list(data.get("titleFilterWords") or []),
            title_skip_words=list(data.get("titleSkipWords") or []),
            bad_words_enabled=enabled("badWordsEnabled"),
            title_filter_enabled=enabled("titleFilterEnabled"),
            title_skip_enabled=enabled("titleSkipEnabled"),
        )


def _clean_words(words):
    return [
        normalize_text(word)
        for word in words or []
        if isinstance(word, str) and word.strip()
    ]


def title_skip_reason(job_title, settings):
    """
    Apply the title skip and title require rules.

    Returns a skip reason string, or None when the title passes.
    """
    if not job_title or not isinstance(job_title, str):
        return None

    title = normalize_text(job_title)

    if settings.title_skip_enabled:
        for word in _clean_words(settings.title_skip_words):
            if word in title:
                return f"skip word: {word}"

    if settings.title_filter_enabled:
        required = _clean_words(settings.title_filter_words)
        if required and not any(word in title for word in required):
            return "no title filter word matched"

    return None


def bad_word_pattern(word):
    # Every metacharacter is escaped; words that start or end with a
    # non-word character (e.g. "c++") still need a word character on the
    # other side of the boundary to match.
    return re.compile(r"\b" + re.escape(word.strip()) + r"\b", re.IGNORECASE)


def find_bad_word(text, bad_words) -> Optional[str]:
    """Return the first configured bad word found as a whole word in text"""
    if not text:
        return None
    for word in bad_words or []:
        if not isinstance(word, str) or not word.strip():
            continue
        if bad_word_pattern(word).search(text):
            return word
    return None
