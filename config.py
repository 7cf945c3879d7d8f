#!/usr/bin/env python
# config.py
import os

# This assumes config.py is at the root of your project
basedir = os.path.abspath(os.path.dirname(__file__))


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


class Config:
    # Server
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = _get_int('PORT', 3001)

    # iTunes Search API
    ITUNES_SEARCH_URL = os.getenv('ITUNES_SEARCH_URL', 'https://itunes.apple.com/search')
    # Upstream default page size is 50; it accepts up to 200
    ITUNES_SEARCH_LIMIT = _get_int('ITUNES_SEARCH_LIMIT', 50)
    ITUNES_TIMEOUT_SECONDS = _get_float('ITUNES_TIMEOUT_SECONDS', 10.0)

    # Search response caching
    SEARCH_CACHE_TTL_SECONDS = _get_int('SEARCH_CACHE_TTL_SECONDS', 3600)
    SEARCH_CACHE_MAXSIZE = max(1, _get_int('SEARCH_CACHE_MAXSIZE', 1024))

    # Runtime behavior
    # Turn Flask debug on/off from env; default off to avoid noisy console
    DEBUG = _get_bool('DEBUG', False)
    # Control console logging; when disabled, logs go only to file
    ENABLE_CONSOLE_LOGS = _get_bool('ENABLE_CONSOLE_LOGS', False)
    LOG_DIR = os.getenv('LOG_DIR', os.path.join(basedir, 'log'))
