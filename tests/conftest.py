"""Shared fixtures: RSS feed builders, candidate factories and a fixed clock."""
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from xml.sax.saxutils import escape

import pytest
import pytz

from config.loader import reset_config

ET_TZ = pytz.timezone('US/Eastern')
NOW = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc).astimezone(ET_TZ)

ACME_QUERY = "Acme Corp announces $50M contract with Navy"


def rss_date(minutes_ago, now=NOW):
    """RFC-2822 date string for a moment minutes_ago before now."""
    moment = (now - timedelta(minutes=minutes_ago)).astimezone(timezone.utc)
    return format_datetime(moment, usegmt=True)


def rss_item(title, minutes_ago=5, link='https://news.google.com/rss/articles/abc',
             source='Reuters', source_url='https://www.reuters.com', now=NOW):
    return {
        'title': title,
        'link': link,
        'pub_date': rss_date(minutes_ago, now) if minutes_ago is not None else None,
        'source': source,
        'source_url': source_url,
    }


def build_rss(items):
    """Render item dicts as a Google News style RSS document (bytes)."""
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<rss version="2.0"><channel><title>Google News</title>',
    ]
    for item in items:
        parts.append('<item>')
        if item.get('title'):
            parts.append(f"<title>{escape(item['title'])}</title>")
        if item.get('link'):
            parts.append(f"<link>{escape(item['link'])}</link>")
        if item.get('pub_date'):
            parts.append(f"<pubDate>{escape(item['pub_date'])}</pubDate>")
        if item.get('source'):
            url = escape(item.get('source_url') or '', {'"': '&quot;'})
            parts.append(f'<source url="{url}">{escape(item["source"])}</source>')
        parts.append('</item>')
    parts.append('</channel></rss>')
    return ''.join(parts).encode('utf-8')


def make_article(title, link='https://www.reuters.com/business/acme-navy',
                 minutes_ago=5.0, source='Reuters', source_url='https://www.reuters.com'):
    """Candidate dict shaped like parse_search_feed output."""
    return {
        'title': title,
        'link': link,
        'published_time': NOW - timedelta(minutes=minutes_ago),
        'minutes_ago': minutes_ago,
        'source': source,
        'source_url': source_url,
    }


class FakeResponse:
    """Just enough of requests.Response for search_once."""

    def __init__(self, content=b'', status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        import requests
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error", response=self)


@pytest.fixture
def now():
    return NOW


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from default configuration."""
    for name in ('SEARCH_WINDOW_MIN', 'SEARCH_LANG', 'SEARCH_REGION', 'SEARCH_TIMEOUT',
                 'EXTRA_TRUSTED_HOSTS', 'EXTRA_BLOCKED_HOSTS'):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
