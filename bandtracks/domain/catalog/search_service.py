import logging
import time
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from bandtracks.clients import ITunesClient
from bandtracks.errors import InvalidRequest, UpstreamError
from bandtracks.models.dto import MAX_TRACKS, SearchResponse, TrackResult
from bandtracks.observability.metrics import (
    record_search_cache_hit,
    record_search_cache_miss,
    record_upstream_failure,
    observe_upstream_latency,
)
from bandtracks.utils.cache import MISSING, TTLCache

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "search_"


def _is_artist_song(record: Dict[str, Any], artist_folded: str) -> bool:
    if record.get("wrapperType") != "track" or record.get("kind") != "song":
        return False
    artist = record.get("artistName")
    return isinstance(artist, str) and artist.lower() == artist_folded


def select_artist_songs(records: Iterable[Dict[str, Any]], band_name: str,
                        limit: int = MAX_TRACKS) -> List[Dict[str, Any]]:
    """Keep songs whose artist matches band_name exactly (case-insensitive), in upstream order."""
    folded = band_name.lower()
    songs = [record for record in records if isinstance(record, dict) and _is_artist_song(record, folded)]
    return songs[:limit]


class TrackSearchService:
    def __init__(self, client: Optional[ITunesClient] = None,
                 cache: Optional[TTLCache] = None,
                 upstream_limit: Optional[int] = None):
        """Search proxy with a time-bounded response cache.

        Keys are the verbatim query, so "Queen" and "queen" are cached
        separately even though matching ignores case.
        """
        self.client = client or ITunesClient()
        self._cache = cache if cache is not None else TTLCache(maxsize=1024, ttl=3600)
        self.upstream_limit = upstream_limit

    @staticmethod
    def cache_key(band_name: str) -> str:
        return f"{CACHE_KEY_PREFIX}{band_name}"

    @property
    def cache(self) -> TTLCache:
        return self._cache

    def search_tracks(self, band_name) -> SearchResponse:
        if not band_name or not isinstance(band_name, str):
            raise InvalidRequest("El parámetro 'name' es obligatorio")

        key = self.cache_key(band_name)
        cached = self._cache.get(key, MISSING)
        if cached is not MISSING:
            record_search_cache_hit()
            logger.debug("Cache hit for %s", key)
            return cached
        record_search_cache_miss()

        started = time.perf_counter()
        try:
            records = self.client.search(band_name, limit=self.upstream_limit)
        except UpstreamError as exc:
            record_upstream_failure()
            logger.error("Error al consultar la API de iTunes: %s", exc, exc_info=True)
            raise
        finally:
            observe_upstream_latency(time.perf_counter() - started)

        tracks = []
        for song in select_artist_songs(records, band_name):
            try:
                tracks.append(TrackResult.from_itunes(song))
            except ValidationError as exc:
                logger.warning(
                    "Skipping malformed iTunes record for %r: %s",
                    band_name, exc.errors(include_url=False),
                )

        response = SearchResponse.from_tracks(tracks)
        self._cache.set(key, response)
        logger.info(
            "Cached %d tracks across %d albums for %r",
            response.total_tracks, response.total_albums, band_name,
        )
        return response

    def clear_cache(self) -> None:
        self._cache.clear()


__all__ = ["TrackSearchService", "select_artist_songs", "CACHE_KEY_PREFIX"]
