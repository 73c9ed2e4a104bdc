"""Text normalization shared by every matching stage"""
import re
from urllib.parse import urlparse

_QUOTE_CHARS = re.compile(r'[«»“”"‘’]')


def normalize_text(text):
    """Replace quote artifacts with spaces and collapse whitespace"""
    if not text:
        return ''
    cleaned = _QUOTE_CHARS.sub(' ', text)
    return ' '.join(cleaned.split())


def hostname_of(url):
    """Lowercase hostname without a leading www., or '' if unparsable"""
    if not url:
        return ''
    try:
        host = urlparse(url.strip()).hostname or ''
    except ValueError:
        return ''
    if host.startswith('www.'):
        host = host[4:]
    return host


def source_path_of(url):
    """hostname + path, used for path-scoped blocklist entries"""
    host = hostname_of(url)
    if not host:
        return ''
    try:
        path = urlparse(url.strip()).path.rstrip('/')
    except ValueError:
        path = ''
    return f"{host}{path}"
