import asyncio
import logging
import re
from typing import Any, Dict, Optional
from urllib.parse import unquote

from pydantic import ValidationError

from .config import PROFILE_RESOURCES, VOYAGER_BASE_URL
from .errors import ExtractionError, InvalidArgumentError
from .scrubbers import scrub_company, scrub_full_profile
from .transport import APIClient

logger = logging.getLogger(__name__)

_PUBLIC_PROFILE_URL_RE = re.compile(r'"publicProfileUrl":"(.*?)",')
_PROFILE_PATH_RE = re.compile(r"/voyager/api/identity/profiles/([^/\"?]+)/")


def build_request_headers(csrf_token: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Build Voyager request headers.

    The ``csrf-token`` header is always present; ``headers`` is merged in
    only when it is a dict.
    """
    h = {"csrf-token": csrf_token}
    if isinstance(headers, dict):
        h.update(headers)
    return h


class VoyagerClient:
    """Client for LinkedIn's internal Voyager API.

    Holds a transport by composition and the anti-CSRF token (the
    ``JSESSIONID`` cookie value) captured at construction.
    """

    def __init__(self, transport: APIClient, csrf_token: str, base_url: str = VOYAGER_BASE_URL):
        self._transport = transport
        self._csrf_token = csrf_token
        self._base_url = base_url.rstrip("/")

    @property
    def csrf_token(self) -> str:
        return self._csrf_token

    def _request_options(self, **extra: Any) -> Dict[str, Any]:
        options = {
            "method": "GET",
            "credentials": "same-origin",
            "headers": build_request_headers(self._csrf_token),
        }
        options.update(extra)
        return options

    async def get_full_profile(self, public_identifier: str) -> Dict[str, Any]:
        """Fetch and scrub a full profile.

        The profile view, contact info and highlights are fetched
        concurrently. A failing sub-resource contributes nothing instead of
        failing the call, so the result may be partial.

        Raises ``InvalidArgumentError`` for an empty identifier.
        """
        if not public_identifier:
            raise InvalidArgumentError("a public identifier is required")

        responses = await asyncio.gather(
            *(self._fetch_profile_resource(public_identifier, r) for r in PROFILE_RESOURCES)
        )

        full_profile: Dict[str, Any] = {"publicIdentifier": public_identifier}
        for response in responses:
            full_profile.update(response)

        try:
            return scrub_full_profile(full_profile).to_dict()
        except ValidationError as e:
            logger.error("Profile payload for %r could not be normalized: %s", public_identifier, e)
            return scrub_full_profile({"publicIdentifier": public_identifier}).to_dict()

    async def get_company(self, universal_name: str) -> Dict[str, Any]:
        """Look up a company by universal name.

        Returns an empty dict when the lookup fails for any reason.
        """
        url = f"{self._base_url}/organization/companies"
        params = {"q": "universalName", "universalName": universal_name}
        try:
            response = await self._transport.send(url, self._request_options(params=params))
            return scrub_company(response["elements"][0]).to_dict()
        except Exception as e:
            logger.error("Company lookup failed for %r: %s", universal_name, e)
            return {}

    async def scrape_sales_nav_full_profile(self, sales_nav_profile_url: str) -> Dict[str, Any]:
        """Resolve a Sales Navigator profile page to a full profile.

        The Sales Navigator HTML embeds the public profile URL; that page in
        turn references the Voyager identity path, which yields the public
        identifier passed to ``get_full_profile``.
        """
        if not sales_nav_profile_url:
            raise InvalidArgumentError("a Sales Navigator profile URL is required")

        response = await self._transport.send(sales_nav_profile_url, self._request_options(raw=True))
        profile_url = self._get_public_profile_url_from_text(await response.text())
        logger.info("Sales Navigator profile resolved to %s", profile_url)

        response = await self._transport.send(profile_url, self._request_options(raw=True))
        public_identifier = self._get_public_identifier_from_text(await response.text())

        return await self.get_full_profile(public_identifier)

    @staticmethod
    def _get_public_profile_url_from_text(text: str) -> str:
        match = _PUBLIC_PROFILE_URL_RE.search(text)
        if not match:
            raise ExtractionError("publicProfileUrl not found in Sales Navigator page")
        return unquote(match.group(1))

    @staticmethod
    def _get_public_identifier_from_text(text: str) -> str:
        match = _PROFILE_PATH_RE.search(text)
        if not match:
            raise ExtractionError("identity profile path not found in profile page")
        return match.group(1)

    async def _fetch_profile_resource(self, public_identifier: str, resource: Optional[str] = None) -> Dict[str, Any]:
        """Fetch one identity/profiles sub-resource.

        Never raises: errors are logged and an empty dict is returned so one
        failing sub-resource does not abort the whole profile.
        """
        url = f"{self._base_url}/identity/profiles/{public_identifier}/{resource or 'profileView'}"
        try:
            response = await self._transport.send(url, self._request_options())
        except Exception as e:
            logger.error("Fetching %s for %s failed: %s", resource, public_identifier, e)
            return {}

        if not isinstance(response, dict):
            logger.error("Unexpected %s payload for %s: %r", resource, public_identifier, type(response))
            return {}
        return response
