"""Alternate search phrasings for a headline"""
import re

from config.match_tables import GENERIC_QUERIES
from .text import normalize_text

MIN_VARIANT_LENGTH = 15
MIN_VARIANT_WORDS = 3

_SCRUB = re.compile(r'[^a-zA-Z0-9 %$]')


def _scrubbed(text):
    return ' '.join(_SCRUB.sub(' ', text).split())


def _is_usable(variant, generic_queries):
    plain = variant.replace('"', '').lower()
    if plain in generic_queries:
        return False
    return len(variant) >= MIN_VARIANT_LENGTH and len(plain.split()) >= MIN_VARIANT_WORDS


def variants_for_query(title, generic_queries=None):
    """
    Build search queries for one headline, most literal first:
    raw title, normalized title, the parts around the first colon
    ("Category: subject" headlines), a quoted exact phrase and an
    alphanumeric-only scrub. Duplicates and near-empty queries are dropped.
    """
    if generic_queries is None:
        generic_queries = GENERIC_QUERIES

    original = title or ''
    cleaned = normalize_text(original)

    candidates = [original, cleaned]

    colon_idx = cleaned.find(':')
    if -1 < colon_idx < len(cleaned) - 1:
        candidates.append(cleaned[colon_idx + 1:])
    if colon_idx > 0:
        candidates.append(cleaned[:colon_idx])

    candidates.append(f'"{cleaned}"')
    candidates.append(_scrubbed(cleaned))

    variants = []
    for candidate in candidates:
        variant = candidate.strip()
        if not variant or variant in variants:
            continue
        if _is_usable(variant, generic_queries):
            variants.append(variant)
    return variants
