"""Keyword extraction and the keyword-overlap gate"""
import math
import re

from config.match_tables import STOPWORDS
from .text import normalize_text

_NON_KEYWORD_CHARS = re.compile(r'[^A-Za-z0-9 $.\-]')
_TICKER = re.compile(r'^\$?[A-Z]{1,5}$')

MIN_KEYWORD_LENGTH = 4


def extract_keywords(title, stopwords=None):
    """Return the set of lowercase discriminating terms in a headline.

    Short tokens survive only when they look like a ticker in the original
    casing ("FDA", "$TSLA"); the lowercase form is what gets returned.
    """
    if stopwords is None:
        stopwords = STOPWORDS

    tokens = _NON_KEYWORD_CHARS.sub(' ', normalize_text(title)).split()

    keywords = set()
    for token in tokens:
        lowered = token.lower()
        if lowered in stopwords:
            continue
        if len(lowered) >= MIN_KEYWORD_LENGTH or _TICKER.match(token):
            keywords.add(lowered)
    return keywords


def count_keyword_hits(title, keywords):
    """Number of keywords found as substrings of the normalized title"""
    text = normalize_text(title).lower()
    return sum(1 for k in keywords if k in text)


def required_hit_count(keyword_count):
    """All keywords for short headlines, ~60% (at least 2) for longer ones"""
    if keyword_count <= 2:
        return keyword_count
    return max(2, math.ceil(keyword_count * 0.6))


def passes_keyword_gate(title, keywords):
    """Check a title carries enough of the required keywords (none required passes)"""
    if not keywords:
        return True
    return count_keyword_hits(title, keywords) >= required_hit_count(len(keywords))
