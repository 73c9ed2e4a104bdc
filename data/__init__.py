"""Data fetching module"""
from .news_search import search_once, parse_search_feed, build_search_params

__all__ = [
    'search_once',
    'parse_search_feed',
    'build_search_params',
]
