"""Headline matching module"""
from .text import normalize_text, hostname_of
from .keywords import extract_keywords, passes_keyword_gate
from .query_variants import variants_for_query
from .candidate_filter import filter_candidates
from .similarity import score_candidate
from .matcher import find_recent_article, SCORE_THRESHOLD
from .pipeline import resolve_headline, resolve_headlines

__all__ = [
    'normalize_text',
    'hostname_of',
    'extract_keywords',
    'passes_keyword_gate',
    'variants_for_query',
    'filter_candidates',
    'score_candidate',
    'find_recent_article',
    'SCORE_THRESHOLD',
    'resolve_headline',
    'resolve_headlines',
]
