"""Shared test stubs for the iTunes client and the cache clock."""

from typing import Any, Dict, List, Optional, Sequence

import requests

from bandtracks.errors import UpstreamError


class ITunesClientStub:
    """Stands in for ITunesClient; records every search it receives."""

    def __init__(self, results: Optional[Sequence[Dict[str, Any]]] = None,
                 error: Optional[Exception] = None):
        self.results: List[Dict[str, Any]] = list(results or [])
        self.error = error
        self.calls: List[tuple] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def search(self, term, limit=None):
        self.calls.append((term, limit))
        if self.error is not None:
            raise self.error
        return list(self.results)


def upstream_failure(message: str = "boom") -> UpstreamError:
    return UpstreamError(message)


class FakeClock:
    """Manually advanced monotonic clock for TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, json_error: Optional[Exception] = None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class FakeSession:
    """Minimal requests.Session replacement capturing GET calls."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response or FakeResponse(payload={"results": []})
        self.error = error
        self.requests: List[Dict[str, Any]] = []

    def get(self, url, params=None, timeout=None):
        self.requests.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response
