"""Error kinds raised by the domain services and mapped to HTTP responses."""

from __future__ import annotations


class BandTracksError(Exception):
    """Base class for errors surfaced at the request boundary."""

    status_code = 500
    public_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class InvalidRequest(BandTracksError):
    """Missing or malformed client input. Not retried."""

    status_code = 400
    public_message = "Invalid request"


class UpstreamError(BandTracksError):
    """The catalog API call failed; details stay in the server log."""

    status_code = 500
    public_message = "Error al consultar la API de iTunes"


__all__ = ["BandTracksError", "InvalidRequest", "UpstreamError"]
