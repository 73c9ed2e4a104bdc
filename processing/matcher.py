"""Pick the single best recent article for a headline.

Every query variant is searched in turn; candidates are filtered against the
variant's keywords, scored against the original headline, and folded into
one running best. Acceptance re-checks the keyword gate against the original
headline's keywords, since a loose variant can admit look-alike titles.
"""
import logging

import requests

from config.match_tables import default_match_config
from data.news_search import search_once
from .candidate_filter import filter_candidates, publisher_host
from .keywords import extract_keywords, passes_keyword_gate
from .query_variants import variants_for_query
from .similarity import score_candidate

logger = logging.getLogger(__name__)

SCORE_THRESHOLD = 0.60


def _is_acceptable(scored, best, original_keywords):
    if scored['score'] < SCORE_THRESHOLD:
        return False
    if best is not None and scored['score'] <= best['score']:
        return False
    return passes_keyword_gate(scored['article']['title'], original_keywords)


def _score_variant(query, variant, candidates, match_config, score_fn):
    variant_keywords = extract_keywords(variant, match_config['stopwords'])
    filtered = filter_candidates(candidates, variant_keywords, match_config)
    return [
        {
            'article': article,
            'score': score_fn(query, article['title'], publisher_host(article), match_config),
            'variant': variant,
        }
        for article in filtered
    ]


def find_recent_article(query, window_min=60, lang='en-US', region='US',
                        match_config=None, search_fn=None, score_fn=None):
    """
    Return the best-scoring recent article for a headline, or None.

    Result shape: {'article': candidate dict, 'score': float, 'variant': str}.
    A network failure on one variant only drops that variant's candidates.
    """
    if match_config is None:
        match_config = default_match_config()
    if search_fn is None:
        search_fn = search_once
    if score_fn is None:
        score_fn = score_candidate

    variants = variants_for_query(query, match_config['generic_queries'])
    original_keywords = extract_keywords(query, match_config['stopwords'])

    best = None
    for variant in variants:
        try:
            candidates = search_fn(variant, window_min, lang, region)
        except requests.RequestException as e:
            logger.warning("Search failed for variant %r: %s", variant, e)
            continue

        if not candidates:
            continue

        scored = _score_variant(query, variant, candidates, match_config, score_fn)
        logger.debug("Variant %r: %d candidates, %d after filter",
                     variant, len(candidates), len(scored))

        for entry in scored:
            if _is_acceptable(entry, best, original_keywords):
                best = entry

    if best is None:
        logger.info("No match for %r (%d variants tried)", query, len(variants))
    else:
        logger.info("Matched %r -> %r (score %.3f, variant %r)",
                    query, best['article']['title'], best['score'], best['variant'])
    return best
