"""Catalog domain services (track search)."""

from .search_service import TrackSearchService

__all__ = ["TrackSearchService"]
