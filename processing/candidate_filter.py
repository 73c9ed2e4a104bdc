"""Source blocklist and keyword-overlap filtering for search candidates"""
from config.match_tables import BLOCKED_HOSTS
from .keywords import passes_keyword_gate
from .text import hostname_of, source_path_of


def publisher_host(article):
    """Host credited for an article: the feed's publisher URL, else the link"""
    return hostname_of(article.get('source_url', '')) or hostname_of(article.get('link', ''))


def is_blocked_source(article, blocked_hosts=None):
    """True if the link or publisher host, or a blocked host+path section, is listed"""
    if blocked_hosts is None:
        blocked_hosts = BLOCKED_HOSTS

    link = article.get('link', '')
    hosts = {hostname_of(link), hostname_of(article.get('source_url', ''))}
    hosts.discard('')
    if hosts & blocked_hosts:
        return True

    path = source_path_of(link)
    return any(
        '/' in entry and (path == entry or path.startswith(entry + '/'))
        for entry in blocked_hosts
    )


def filter_candidates(candidates, required_keywords, match_config=None):
    """Drop blocked sources and titles that miss too many required keywords"""
    blocked_hosts = match_config['blocked_hosts'] if match_config else None

    kept = []
    for article in candidates:
        if is_blocked_source(article, blocked_hosts):
            continue
        if not passes_keyword_gate(article.get('title', ''), required_keywords):
            continue
        kept.append(article)
    return kept
