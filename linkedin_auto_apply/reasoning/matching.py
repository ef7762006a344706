"""Fuzzy label matching against known answer keys"""

import linkedin_auto_apply.config as config
from linkedin_auto_apply.reasoning.normalize import normalize_label, edit_distance


def match_score(normalized_label, normalized_key):
    """Edit distance scaled by the longer of the two strings (0.0 = identical)"""
    longest = max(len(normalized_label), len(normalized_key))
    if longest == 0:
        return 0.0
    return edit_distance(normalized_label, normalized_key) / longest


def _best_key(normalized_label, keys):
    best_key = None
    best_score = float("inf")
    for key in keys:
        score = match_score(normalized_label, normalize_label(key))
        if score < best_score:
            best_score = score
            best_key = key
    if best_key is not None and best_score <= config.MATCH_THRESHOLD:
        return best_key
    return None


def find_closest_key(known_fields, label):
    """
    Return the key of known_fields that best matches label, or None.

    Substring hits (either direction, after normalization) win outright when
    there is exactly one; several hits are ranked by match_score. With no
    substring hits every key is ranked the same way. A ranked winner is only
    accepted at or below MATCH_THRESHOLD.
    """
    normalized_label = normalize_label(label)
    if not normalized_label or not known_fields:
        return None

    substring_matches = []
    for key in known_fields:
        normalized_key = normalize_label(key)
        if not normalized_key:
            continue
        if normalized_key in normalized_label or normalized_label in normalized_key:
            substring_matches.append(key)

    if len(substring_matches) == 1:
        return substring_matches[0]
    if substring_matches:
        return _best_key(normalized_label, substring_matches)
    return _best_key(normalized_label, list(known_fields))


def find_closest_field(known_fields, label):
    """Return the value stored under the best-matching key, or None for no match"""
    key = find_closest_key(known_fields, label)
    if key is None:
        return None
    return known_fields[key]
