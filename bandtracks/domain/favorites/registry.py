from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Tuple

from pydantic import ValidationError

from bandtracks.errors import InvalidRequest
from bandtracks.models.dto import FavoriteEntry, favorite_key
from bandtracks.observability.metrics import record_favorite_toggle

logger = logging.getLogger(__name__)

INCOMPLETE_DATA_MESSAGE = "Datos incompletos en la solicitud"
INVALID_TYPES_MESSAGE = (
    "Tipos de datos inválidos: nombre_banda debe ser texto y cancion_id un entero"
)


@dataclass(frozen=True)
class ToggleResult:
    action: Literal["added", "removed"]
    entry: FavoriteEntry

    @property
    def added(self) -> bool:
        return self.action == "added"


class FavoritesRegistry:
    """Process-lifetime favorites keyed by (track_id, lowercased band_name).

    Toggling an existing identity removes it; anything else is appended.
    The read-modify-write runs under a lock so racing toggles on the same
    identity cannot leave duplicates behind.
    """

    def __init__(self) -> None:
        self._entries: Dict[Tuple[int, str], FavoriteEntry] = {}
        self._lock = threading.RLock()

    def toggle_favorite(self, band_name: Any, track_id: Any, user: Any, ranking: Any) -> ToggleResult:
        if not band_name or not track_id or not user or not ranking:
            raise InvalidRequest(INCOMPLETE_DATA_MESSAGE)
        try:
            candidate = FavoriteEntry(
                band_name=band_name,
                track_id=track_id,
                user=user,
                ranking=ranking,
            )
        except ValidationError as exc:
            logger.info("Rejected favorite payload: %s", exc.errors(include_url=False))
            raise InvalidRequest(INVALID_TYPES_MESSAGE) from exc

        key = favorite_key(candidate.band_name, candidate.track_id)
        with self._lock:
            existing = self._entries.pop(key, None)
            if existing is not None:
                result = ToggleResult(action="removed", entry=existing)
            else:
                self._entries[key] = candidate
                result = ToggleResult(action="added", entry=candidate)

        record_favorite_toggle(result.action)
        logger.info(
            "Favorite %s: track %s of %r for %r",
            result.action, result.entry.track_id, result.entry.band_name, result.entry.user,
        )
        return result

    def list_favorites(self) -> List[FavoriteEntry]:
        with self._lock:
            return list(self._entries.values())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["FavoritesRegistry", "ToggleResult", "INCOMPLETE_DATA_MESSAGE", "INVALID_TYPES_MESSAGE"]
