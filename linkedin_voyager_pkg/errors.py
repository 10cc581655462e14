from typing import Any


class VoyagerError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(VoyagerError, ValueError):
    """A required argument is missing or malformed.

    Raised before any request goes out, so callers can treat it as a
    programming error rather than a network problem.
    """


class HttpError(VoyagerError):
    """A non-2xx response from the transport layer.

    The original response is kept so callers can inspect the status or
    body. It is never retried.
    """

    def __init__(self, response: Any, message: str = ""):
        self.response = response
        self.status = getattr(response, "status", None)
        url = getattr(response, "url", "")
        super().__init__(message or f"HTTP {self.status} for {url}")


class ExtractionError(VoyagerError):
    """An expected marker was not found in a fetched HTML document."""
