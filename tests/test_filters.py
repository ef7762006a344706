"""Title and description filters"""

from linkedin_auto_apply.reasoning.filters import FilterSettings, find_bad_word, title_skip_reason


def test_settings_default_to_enabled_with_no_words(store):
    settings = FilterSettings.from_store(store)
    assert settings.bad_words == []
    assert settings.bad_words_enabled
    assert settings.title_filter_enabled
    assert settings.title_skip_enabled


def test_settings_read_from_store(store):
    store.set({"titleSkipWords": ["Senior"], "titleSkipEnabled": False, "badWords": ["unpaid"]})
    settings = FilterSettings.from_store(store)
    assert settings.title_skip_words == ["Senior"]
    assert not settings.title_skip_enabled
    assert settings.bad_words == ["unpaid"]


def test_title_skip_word_skips():
    settings = FilterSettings(title_skip_words=["Senior"])
    assert title_skip_reason("senior python engineer", settings) == "skip word: senior"
    assert title_skip_reason("python engineer", settings) is None


def test_title_filter_words_require_one_match():
    settings = FilterSettings(title_filter_words=["python", "django"])
    assert title_skip_reason("python engineer", settings) is None
    assert title_skip_reason("java engineer", settings) == "no title filter word matched"


def test_disabled_rules_are_ignored():
    settings = FilterSettings(
        title_skip_words=["senior"],
        title_filter_words=["python"],
        title_skip_enabled=False,
        title_filter_enabled=False,
    )
    assert title_skip_reason("senior java engineer", settings) is None


def test_blank_words_are_ignored():
    settings = FilterSettings(title_skip_words=["", "  "], title_filter_words=[" "])
    assert title_skip_reason("anything", settings) is None


def test_bad_word_matches_whole_words_only():
    assert find_bad_word("This is an unpaid internship", ["unpaid"]) == "unpaid"
    assert find_bad_word("Unpaid role", ["unpaid"]) == "unpaid"
    assert find_bad_word("We are unpaidless", ["unpaid"]) is None


def test_bad_word_metacharacters_are_literal():
    assert find_bad_word("strong node.js skills", ["node.js"]) == "node.js"
    assert find_bad_word("strong nodexjs skills", ["node.js"]) is None
    assert find_bad_word("any text", ["(unclosed"]) is None


def test_bad_word_empty_text():
    assert find_bad_word("", ["unpaid"]) is None
