"""Configuration loader for the recent-article matcher"""
import os


def _int_env(name, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}")


def _list_env(name):
    raw = os.environ.get(name) or ''
    return [item.strip().lower() for item in raw.split(',') if item.strip()]


def load_config():
    """Load configuration from environment variables"""
    config = {
        'SEARCH_WINDOW_MIN': _int_env('SEARCH_WINDOW_MIN', 60),
        'SEARCH_LANG': os.environ.get('SEARCH_LANG') or 'en-US',
        'SEARCH_REGION': os.environ.get('SEARCH_REGION') or 'US',
        'SEARCH_TIMEOUT': _int_env('SEARCH_TIMEOUT', 20),
        'EXTRA_TRUSTED_HOSTS': _list_env('EXTRA_TRUSTED_HOSTS'),
        'EXTRA_BLOCKED_HOSTS': _list_env('EXTRA_BLOCKED_HOSTS'),
    }

    invalid = [k for k in ('SEARCH_WINDOW_MIN', 'SEARCH_TIMEOUT') if config[k] <= 0]
    if invalid:
        raise ValueError(f"Environment variables must be positive: {', '.join(invalid)}")

    return config


# Global config instance (loaded lazily)
_CONFIG = None


def get_config():
    """Get the global config instance (lazy loading)"""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_config()
    return _CONFIG


def reset_config():
    """Drop the cached config so the next get_config() re-reads the environment"""
    global _CONFIG
    _CONFIG = None
