"""Text normalization utilities"""

import re

_SEPARATOR_RUNS = re.compile(r"[\s\-_]+")


def normalize_label(text):
    """Normalize a question label for matching - lowercase, drop whitespace/hyphen/underscore runs"""
    if not text:
        return ""
    return _SEPARATOR_RUNS.sub("", text.lower())


def normalize_text(text):
    """Lowercase and trim; used for titles, company names and filter words"""
    if not text:
        return ""
    return text.strip().lower()


def edit_distance(a, b):
    """Levenshtein distance with unit insert/delete/substitute costs"""
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(
                    min(previous[j - 1] + 1, current[j - 1] + 1, previous[j] + 1)
                )
        previous = current
    return previous[-1]
