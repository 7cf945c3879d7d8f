"""Typed models for search responses and favorites."""

from .dto import FavoriteEntry, Price, SearchResponse, TrackResult

__all__ = ["FavoriteEntry", "Price", "SearchResponse", "TrackResult"]
