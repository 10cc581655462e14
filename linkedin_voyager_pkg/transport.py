import json
import logging
from typing import Any, Dict

from playwright.async_api import APIRequestContext

from .errors import HttpError, InvalidArgumentError

logger = logging.getLogger(__name__)


class APIClient:
    """Thin fetch abstraction over a Playwright request context.

    The request context carries the session cookie jar, so requests behave
    like same-origin browser fetches. Everything above this class deals in
    parsed JSON; pass ``raw=True`` to get the ``APIResponse`` back instead
    (for example to read HTML with ``await response.text()``).
    """

    def __init__(self, request_context: APIRequestContext):
        self._request = request_context

    async def send(self, url: str, options: Dict[str, Any]) -> Any:
        """Send a request and return parsed JSON, or the raw response.

        Raises ``InvalidArgumentError`` when ``options`` is not a non-empty
        dict and ``HttpError`` on any non-2xx status.
        """
        if not isinstance(options, dict) or not options:
            raise InvalidArgumentError("A request options dict is required")

        body = options.get("body")
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)

        # "credentials" needs no handling: the request context always sends its
        # own cookie jar, which is the same-origin behavior.
        method = options.get("method", "GET")
        logger.debug("%s %s", method, url)
        response = await self._request.fetch(
            url,
            method=method,
            headers=options.get("headers"),
            params=options.get("params"),
            data=body,
        )

        if not response.ok:
            raise HttpError(response)

        if options.get("raw"):
            return response

        return await response.json()
