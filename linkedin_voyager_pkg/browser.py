import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from playwright.async_api import APIRequestContext, Browser, Playwright, async_playwright

from .config import CDP_URL, COOKIES_FILE, PROXY, USE_CDP, random_user_agent
from .cookies_auth import csrf_token_from_cookies, has_session_cookie, load_cookies, to_storage_state
from .transport import APIClient
from .voyager import VoyagerClient

logger = logging.getLogger(__name__)

LINKEDIN_ORIGIN = "https://www.linkedin.com"


async def new_request_context(
    playwright: Playwright,
    cookies: list,
    user_agent: Optional[str] = None,
    proxy: Optional[str] = None,
) -> APIRequestContext:
    """Create a standalone request context seeded with the session cookies.

    No browser is launched; the context keeps its own cookie jar so
    requests carry the LinkedIn session like same-origin fetches.
    """
    return await playwright.request.new_context(
        user_agent=user_agent or random_user_agent(),
        proxy={"server": proxy} if proxy else None,
        storage_state=to_storage_state(cookies),
        extra_http_headers={
            "Accept": "application/vnd.linkedin.normalized+json+2.1, application/json",
            "Accept-Language": "en-US,en;q=0.9",
            "x-restli-protocol-version": "2.0.0",
        },
    )


async def connect_over_cdp(playwright: Playwright, cdp_url: str) -> Browser:
    """Connect to an existing Chrome instance via CDP.

    This reuses a real user's logged-in session (Chrome started with
    `--remote-debugging-port=9222`), cookies included.
    """
    return await playwright.chromium.connect_over_cdp(cdp_url)


@asynccontextmanager
async def voyager_session(
    cookies_path: str = COOKIES_FILE,
    use_cdp: bool = USE_CDP,
    cdp_url: str = CDP_URL,
    proxy: Optional[str] = PROXY,
) -> AsyncIterator[VoyagerClient]:
    """Yield a ready ``VoyagerClient`` and release Playwright on exit.

    With ``use_cdp`` the client rides on the first context of a running
    Chrome; the browser itself is left open. Otherwise cookies are read
    from ``cookies_path``.
    """
    playwright = await async_playwright().start()
    request_context = None
    try:
        if use_cdp:
            logger.info("Connecting via CDP: %s", cdp_url)
            browser = await connect_over_cdp(playwright, cdp_url)
            context = browser.contexts[0] if browser.contexts else await browser.new_context()
            cookies = await context.cookies(LINKEDIN_ORIGIN)
            transport = APIClient(context.request)
        else:
            cookies = await load_cookies(cookies_path)
            request_context = await new_request_context(playwright, cookies, proxy=proxy)
            transport = APIClient(request_context)

        if not has_session_cookie(cookies):
            logger.warning("li_at cookie not found. Voyager requests will likely fail.")
        csrf_token = csrf_token_from_cookies(cookies)
        if not csrf_token:
            logger.warning("JSESSIONID cookie not found. Requests will be rejected as CSRF.")

        yield VoyagerClient(transport, csrf_token)
    finally:
        if request_context is not None:
            await request_context.dispose()
        await playwright.stop()
