"""Headline similarity scoring"""
from collections import Counter

from config.match_tables import TRUSTED_BONUS, TRUSTED_HOSTS
from .text import normalize_text


def _bigrams(text):
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def dice_coefficient(a, b):
    """Sørensen-Dice coefficient over character bigrams (case-insensitive)"""
    a = a.lower()
    b = b.lower()
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0

    bigrams_a = _bigrams(a)
    bigrams_b = _bigrams(b)
    overlap = sum((bigrams_a & bigrams_b).values())
    return 2.0 * overlap / (sum(bigrams_a.values()) + sum(bigrams_b.values()))


def penalized_similarity(a, b):
    """Dice similarity scaled by the length ratio of the two strings.

    A short string buried in a long one can score high on bigram overlap
    alone; the length ratio pulls those cases down.
    """
    norm_a = normalize_text(a)
    norm_b = normalize_text(b)
    if not norm_a or not norm_b:
        return 0.0
    length_ratio = min(len(norm_a), len(norm_b)) / max(len(norm_a), len(norm_b))
    return dice_coefficient(norm_a, norm_b) * length_ratio


def score_candidate(query, candidate_title, source_host, match_config=None):
    """Length-penalized similarity, boosted when the source host is trusted"""
    if match_config is None:
        trusted_hosts, bonus = TRUSTED_HOSTS, TRUSTED_BONUS
    else:
        trusted_hosts, bonus = match_config['trusted_hosts'], match_config['trusted_bonus']

    multiplier = bonus if source_host and source_host in trusted_hosts else 1.0
    return penalized_similarity(query, candidate_title) * multiplier
