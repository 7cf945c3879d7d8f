"""In-memory favorites list with toggle semantics."""

from .registry import FavoritesRegistry, ToggleResult

__all__ = ["FavoritesRegistry", "ToggleResult"]
