"""Route blueprints exposed via Flask."""

from .search import search_bp
from .favorites import favorite_bp
from .health import health_bp

__all__ = [
    "search_bp",
    "favorite_bp",
    "health_bp",
]
