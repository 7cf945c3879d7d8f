import importlib

import pytest
from pydantic import ValidationError

from bandtracks.settings import load_app_settings


def test_load_app_settings_uses_current_config(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SEARCH_CACHE_TTL_SECONDS", "120")
    monkeypatch.setenv("ITUNES_SEARCH_LIMIT", "25")
    monkeypatch.setenv("ITUNES_SEARCH_URL", "http://catalog.local/search ")

    import config as _config
    importlib.reload(_config)
    import bandtracks.settings as settings
    importlib.reload(settings)

    s = settings.load_app_settings()

    assert s.port == 8080
    assert s.cache_ttl_seconds == 120
    assert s.itunes_search_limit == 25
    assert s.itunes_search_url == "http://catalog.local/search"


def test_defaults_without_environment(monkeypatch):
    for name in ("PORT", "SEARCH_CACHE_TTL_SECONDS", "ITUNES_SEARCH_LIMIT", "ITUNES_SEARCH_URL"):
        monkeypatch.delenv(name, raising=False)

    import config as _config
    importlib.reload(_config)
    import bandtracks.settings as settings
    importlib.reload(settings)

    s = settings.load_app_settings()
    assert s.port == 3001
    assert s.cache_ttl_seconds == 3600
    assert s.itunes_search_url == "https://itunes.apple.com/search"


def test_limit_is_clamped_and_invalid_ttl_rejected():
    assert load_app_settings({"itunes_search_limit": 1000}).itunes_search_limit == 200
    with pytest.raises(ValidationError):
        load_app_settings({"cache_ttl_seconds": 0})
