#!/usr/bin/env python
"""
Pydantic DTOs for the search proxy and the favorites list.

Attributes use English names; the JSON aliases keep the wire format the
frontend already consumes (``cancion_id``, ``nombre_banda``...). Build by
either name, dump with ``by_alias=True``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator

PRICE_NOT_AVAILABLE = "N/A"
MAX_TRACKS = 25


class Price(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: Union[float, int, str] = Field(default=PRICE_NOT_AVAILABLE, alias="valor")
    currency: Optional[str] = Field(default=None, alias="moneda")


class TrackResult(BaseModel):
    """A single song as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    track_id: int = Field(alias="cancion_id")
    album_name: Optional[str] = Field(default=None, alias="nombre_album")
    track_name: Optional[str] = Field(default=None, alias="nombre_tema")
    preview_url: Optional[str] = None
    release_date: Optional[str] = Field(default=None, alias="fecha_lanzamiento")
    price: Price = Field(default_factory=Price, alias="precio")

    @classmethod
    def from_itunes(cls, record: Dict[str, Any]) -> "TrackResult":
        amount = record.get("trackPrice")
        return cls(
            track_id=record.get("trackId"),
            album_name=record.get("collectionName"),
            track_name=record.get("trackName"),
            preview_url=record.get("previewUrl"),
            release_date=record.get("releaseDate"),
            price=Price(
                amount=PRICE_NOT_AVAILABLE if amount is None else amount,
                currency=record.get("currency"),
            ),
        )


class SearchResponse(BaseModel):
    """Normalized, capped search result for one band name."""

    model_config = ConfigDict(populate_by_name=True)

    total_albums: int = Field(ge=0, alias="total_albumes")
    total_tracks: int = Field(ge=0, le=MAX_TRACKS, alias="total_canciones")
    albums: List[Optional[str]] = Field(default_factory=list, alias="albumes")
    tracks: List[TrackResult] = Field(default_factory=list, alias="canciones")

    @model_validator(mode="after")
    def _check_totals(self) -> "SearchResponse":
        if self.total_tracks != len(self.tracks):
            raise ValueError("total_tracks must equal the number of tracks")
        if self.total_albums != len(self.albums):
            raise ValueError("total_albums must equal the number of albums")
        return self

    @classmethod
    def from_tracks(cls, tracks: List[TrackResult]) -> "SearchResponse":
        # dict keeps first-occurrence order
        albums = list(dict.fromkeys(track.album_name for track in tracks))
        return cls(
            total_albums=len(albums),
            total_tracks=len(tracks),
            albums=albums,
            tracks=tracks,
        )


class FavoriteEntry(BaseModel):
    """A user-marked favorite track."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    band_name: StrictStr = Field(alias="nombre_banda")
    track_id: StrictInt = Field(alias="cancion_id")
    user: Any = Field(alias="usuario")
    ranking: Any = None

    @property
    def key(self) -> Tuple[int, str]:
        """Identity of the favorite: exact track id, case-folded band name."""
        return favorite_key(self.band_name, self.track_id)


def favorite_key(band_name: str, track_id: int) -> Tuple[int, str]:
    return (track_id, band_name.lower())


__all__ = [
    "Price",
    "TrackResult",
    "SearchResponse",
    "FavoriteEntry",
    "favorite_key",
    "PRICE_NOT_AVAILABLE",
    "MAX_TRACKS",
]
