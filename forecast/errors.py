"""Error types raised by the forecast client."""

from __future__ import annotations

from typing import Any

import httpx

# Transport failures are surfaced exactly as httpx raises them.
TransportFailure = httpx.RequestError


class ForecastError(RuntimeError):
    """Base error for the forecast client."""


class MalformedResponse(ForecastError):
    """Raised when a response body does not match the expected JSON shape."""

    def __init__(self, message: str, path: tuple[Any, ...] = ()) -> None:
        super().__init__(message)
        self.path = path


class UnrecognizedTag(MalformedResponse, ValueError):
    """Raised when an enumerated wire value matches no known variant."""

    def __init__(self, enum: str, value: Any, path: tuple[Any, ...] = ()) -> None:
        location = f" at {'.'.join(str(part) for part in path)}" if path else ""
        super().__init__(f"Unrecognized {enum} tag {value!r}{location}", path=path)
        self.enum = enum
        self.value = value


__all__ = ["ForecastError", "MalformedResponse", "TransportFailure", "UnrecognizedTag"]
