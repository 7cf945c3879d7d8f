"""Band track search proxy with an in-memory favorites list."""

__version__ = "0.1.0"
