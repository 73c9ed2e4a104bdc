"""Google News RSS search for recent articles"""
import logging
import xml.etree.ElementTree as ET
from datetime import datetime

import pytz
import requests
from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

ET_TZ = pytz.timezone('US/Eastern')
SEARCH_URL = 'https://news.google.com/rss/search'
USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'
DEFAULT_TIMEOUT = 20


def build_search_params(query, lang, region):
    """Google News RSS search query string for one query in one edition"""
    return {
        'q': query,
        'hl': lang,
        'gl': region,
        'ceid': f"{region}:{lang}",
    }


def _text(item, tag):
    elem = item.find(tag)
    if elem is None or not elem.text:
        return ''
    return elem.text.strip()


def _parse_pub_date(raw):
    if not raw:
        return None
    try:
        pub_time = date_parser.parse(raw)
    except (ValueError, OverflowError):
        return None
    if pub_time.tzinfo is None:
        pub_time = pytz.utc.localize(pub_time)
    return pub_time.astimezone(ET_TZ)


def parse_search_feed(content, window_min, now=None):
    """Turn an RSS body into candidate dicts published within window_min minutes"""
    if now is None:
        now = datetime.now(ET_TZ)

    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        logger.warning("Malformed search feed, treating as empty: %s", e)
        return []

    articles = []
    for item in root.iter('item'):
        title = _text(item, 'title')
        link = _text(item, 'link')
        pub_time = _parse_pub_date(_text(item, 'pubDate'))
        if not title or not link or pub_time is None:
            continue

        minutes_ago = (now - pub_time).total_seconds() / 60
        if minutes_ago > window_min:
            continue

        source_elem = item.find('source')
        source = ''
        source_url = ''
        if source_elem is not None:
            source = (source_elem.text or '').strip()
            source_url = (source_elem.get('url') or '').strip()

        articles.append({
            'title': title,
            'link': link,
            'published_time': pub_time,
            'minutes_ago': minutes_ago,
            'source': source,
            'source_url': source_url,
        })

    return articles


def search_once(query, window_min, lang, region, timeout=DEFAULT_TIMEOUT, now=None):
    """
    Run one query against the Google News RSS search feed.

    Returns candidate dicts no older than window_min minutes; an empty feed
    is an empty list. Transport and HTTP errors propagate as
    requests.RequestException so the caller decides whether to skip.
    """
    params = build_search_params(query, lang, region)
    logger.debug("RSS search: %s params=%s", SEARCH_URL, params)

    response = requests.get(
        SEARCH_URL,
        params=params,
        timeout=timeout,
        headers={'User-Agent': USER_AGENT}
    )
    response.raise_for_status()

    articles = parse_search_feed(response.content, window_min, now=now)
    if not articles:
        logger.debug("No fresh items for query %r", query)
    return articles
