#!/usr/bin/env python3
"""
Helper script to capture a LinkedIn session for the Voyager client.
Opens a persistent browser window for you to log in to LinkedIn, then
writes the LinkedIn cookies (li_at for the session, JSESSIONID for the
csrf-token header) to cookies.json.
"""

import argparse
import asyncio
import json
from pathlib import Path

from playwright.async_api import async_playwright

from linkedin_voyager_pkg.config import COOKIES_FILE
from linkedin_voyager_pkg.cookies_auth import csrf_token_from_cookies, has_session_cookie

LOGGED_IN_MARKERS = ["/feed", "/mynetwork", "/in/", "/messaging"]


async def wait_for_login(page, max_polls: int = 150) -> bool:
    """Poll the page URL until it lands on a logged-in LinkedIn page."""
    for i in range(max_polls):
        await asyncio.sleep(2)
        if any(k in page.url for k in LOGGED_IN_MARKERS):
            print(f"\n✅ Login detected! (URL: {page.url[:60]})")
            return True
        if i % 15 == 0 and i > 0:
            print(f"   Still waiting... ({i*2}s elapsed)")
    return False


async def main(output: str, user_data_dir: str):
    print("🔐 Opening browser for LinkedIn login...")
    print("   Please log in to LinkedIn in the browser window.\n")

    p = await async_playwright().start()
    context = await p.chromium.launch_persistent_context(
        str(Path(user_data_dir)),
        headless=False,
        args=["--disable-blink-features=AutomationControlled"],
        viewport={"width": 1280, "height": 900},
        locale="en-US",
    )

    page = context.pages[0] if context.pages else await context.new_page()
    await page.goto("https://www.linkedin.com/login")

    print("⏳ Waiting for login...")
    logged_in = await wait_for_login(page)
    if not logged_in:
        print("❌ Timed out waiting for login; saving whatever cookies exist.")

    cookies = await context.cookies()
    linkedin_cookies = [c for c in cookies if "linkedin.com" in c.get("domain", "")]

    with open(output, "w", encoding="utf-8") as f:
        json.dump(linkedin_cookies, f, indent=2)

    print(f"\n📁 Saved {output} ({len(linkedin_cookies)} cookies)")
    print(f"   li_at cookie: {'✅ Found' if has_session_cookie(linkedin_cookies) else '❌ Not found'}")
    print(f"   JSESSIONID (csrf): {'✅ Found' if csrf_token_from_cookies(linkedin_cookies) else '❌ Not found'}")

    await context.close()
    await p.stop()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Save LinkedIn session cookies for the Voyager client")
    parser.add_argument("--output", "-o", default=COOKIES_FILE, help="Where to write cookies.json")
    parser.add_argument("--user-data-dir", default="browser_data", help="Persistent browser profile directory")
    args = parser.parse_args()
    asyncio.run(main(args.output, args.user_data_dir))
