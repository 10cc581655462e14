"""Client and normalizers for LinkedIn's internal Voyager API.

Raw profile, contact-info and company payloads are fetched through a
Playwright request context and scrubbed into stable backend records.
"""
from .errors import ExtractionError, HttpError, InvalidArgumentError, VoyagerError
from .transport import APIClient
from .voyager import VoyagerClient, build_request_headers

__all__ = [
    "APIClient",
    "ExtractionError",
    "HttpError",
    "InvalidArgumentError",
    "VoyagerClient",
    "VoyagerError",
    "build_request_headers",
]
