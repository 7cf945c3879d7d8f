import os
import sys

import pytest

# Ensure project root is on sys.path so 'app', 'config', and 'bandtracks' import correctly
_TESTS_DIR = os.path.dirname(__file__)
_ROOT_DIR = os.path.abspath(os.path.join(_TESTS_DIR, os.pardir))
if _ROOT_DIR not in sys.path:
    sys.path.insert(0, _ROOT_DIR)

from tests.support import factories as test_factories
from tests.support import stubs as test_stubs


@pytest.fixture
def clock():
    return test_stubs.FakeClock()


@pytest.fixture
def itunes_stub():
    return test_stubs.ITunesClientStub()


@pytest.fixture
def search_service(itunes_stub, clock):
    from bandtracks.domain.catalog import TrackSearchService
    from bandtracks.utils.cache import TTLCache

    return TrackSearchService(
        client=itunes_stub,
        cache=TTLCache(maxsize=64, ttl=3600, timer=clock),
        upstream_limit=50,
    )


@pytest.fixture
def registry():
    from bandtracks.domain.favorites import FavoritesRegistry

    return FavoritesRegistry()


@pytest.fixture
def app(search_service, registry):
    import app as app_module

    application = app_module.create_app(search_service=search_service, favorites_registry=registry)
    application.config.update(TESTING=True)
    yield application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def factories():
    yield test_factories
