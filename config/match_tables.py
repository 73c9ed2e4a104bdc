"""Constant tables used by candidate filtering and scoring.

Nothing reads these directly: callers build a match config dict and pass it
into the filter, scorer and selector, so tests can swap in their own tables.
"""

STOPWORDS = frozenset([
    'the', 'a', 'an', 'and', 'or', 'of', 'for', 'on', 'in', 'to', 'from', 'with',
    'by', 'at', 'as', 'is', 'are',
    'short', 'report', 'breaking', 'update', 'news', 'latest', 'today',
    'stocks', 'market', 'hot', 'fly',
])

TRUSTED_HOSTS = frozenset([
    'reuters.com', 'bloomberg.com', 'cnbc.com', 'finance.yahoo.com',
    'seekingalpha.com', 'wsj.com', 'marketwatch.com', 'thestreet.com',
    'investors.com', 'fool.com', 'apnews.com', 'prnewswire.com',
    'businesswire.com', 'globenewswire.com', 'thefly.com', 'barrons.com',
])

# Entries containing "/" block a path prefix on that host only
BLOCKED_HOSTS = frozenset([
    'news.stocktradersdaily.com',
    'seekingalpha.com/instablog',
])

GENERIC_QUERIES = frozenset([
    'short report', 'report', 'breaking news', 'breaking',
])

TRUSTED_BONUS = 1.05


def build_match_config(extra_trusted=None, extra_blocked=None):
    """Return a fresh match config, optionally widening the host tables"""
    return {
        'stopwords': STOPWORDS,
        'trusted_hosts': TRUSTED_HOSTS | frozenset(h.lower() for h in (extra_trusted or [])),
        'blocked_hosts': BLOCKED_HOSTS | frozenset(h.lower() for h in (extra_blocked or [])),
        'generic_queries': GENERIC_QUERIES,
        'trusted_bonus': TRUSTED_BONUS,
    }


def default_match_config():
    """Match tables with no runtime additions"""
    return build_match_config()
