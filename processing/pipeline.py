"""Headline resolution pipeline - matches source headlines to recent articles"""
import functools

from config.loader import get_config
from config.match_tables import build_match_config
from data.news_search import search_once
from .matcher import find_recent_article


def _fallback(row):
    return {
        'headline': row['title'],
        'article_url': row.get('titleLink') or '',
        'article_title': row['title'],
        'source': '',
        'published_time': None,
        'score': None,
        'variant': None,
        'matched': False,
    }


def configured_collaborators(config=None):
    """Match tables and a timeout-bound search function from runtime config"""
    if config is None:
        config = get_config()
    match_config = build_match_config(config['EXTRA_TRUSTED_HOSTS'], config['EXTRA_BLOCKED_HOSTS'])
    search_fn = functools.partial(search_once, timeout=config['SEARCH_TIMEOUT'])
    return match_config, search_fn


def resolve_headline(row, window_min=None, lang=None, region=None,
                     match_config=None, search_fn=None):
    """
    Resolve one headline record ({title, titleLink, rawCategory, tickers,
    publishDatetime}) to the article downstream steps should read.

    Falls back to the headline itself and its own link when nothing matches.
    """
    title = (row.get('title') or '').strip()
    if not title:
        raise ValueError("Headline row has no title")

    config = get_config()
    if window_min is None:
        window_min = config['SEARCH_WINDOW_MIN']
    configured_tables, configured_search = configured_collaborators(config)
    if match_config is None:
        match_config = configured_tables
    if search_fn is None:
        search_fn = configured_search

    match = find_recent_article(
        title,
        window_min=window_min,
        lang=lang or config['SEARCH_LANG'],
        region=region or config['SEARCH_REGION'],
        match_config=match_config,
        search_fn=search_fn,
    )

    result = _fallback(dict(row, title=title))
    if match is None:
        return result

    article = match['article']
    result.update({
        'article_url': article['link'],
        'article_title': article['title'],
        'source': article.get('source', ''),
        'published_time': article['published_time'],
        'score': match['score'],
        'variant': match['variant'],
        'matched': True,
    })
    return result


def resolve_headlines(rows, window_min=None, lang=None, region=None,
                      match_config=None, search_fn=None):
    """Resolve a batch of headline records and report match stats"""
    results = [
        resolve_headline(row, window_min=window_min, lang=lang, region=region,
                         match_config=match_config, search_fn=search_fn)
        for row in rows
    ]
    matched = sum(1 for r in results if r['matched'])

    return {
        'count': len(results),
        'results': results,
        'match_stats': {
            'headlines': len(results),
            'matched': matched,
            'fallback': len(results) - matched,
        }
    }
