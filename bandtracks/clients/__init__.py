"""Upstream API clients."""

from .itunes import ITunesClient

__all__ = ["ITunesClient"]
