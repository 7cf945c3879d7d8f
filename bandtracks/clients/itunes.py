import logging
from typing import Any, Dict, List, Optional

import requests

from bandtracks.errors import UpstreamError

logger = logging.getLogger(__name__)

ITUNES_SEARCH_URL = "https://itunes.apple.com/search"


class ITunesClient:
    """Thin wrapper over the iTunes Search API."""

    def __init__(
        self,
        base_url: str = ITUNES_SEARCH_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def search(self, term: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Run a catalog search and return the raw ``results`` records.

        Raises UpstreamError on transport failures, non-2xx statuses and
        bodies that do not carry a ``results`` list.
        """
        params: Dict[str, Any] = {"term": term}
        if limit:
            params["limit"] = limit

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise UpstreamError(f"iTunes search failed for {term!r}: {exc}") from exc
        except ValueError as exc:
            raise UpstreamError(f"iTunes returned a non-JSON body for {term!r}") from exc

        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise UpstreamError(f"iTunes response for {term!r} has no results list")
        logger.debug("iTunes search %r returned %d records", term, len(results))
        return results


__all__ = ["ITunesClient", "ITUNES_SEARCH_URL"]
