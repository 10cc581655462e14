import json
import os
import re
from typing import Any, Dict, List

from .config import COOKIES_FILE

# Voyager expects the JSESSIONID value, quotes stripped, as the csrf-token header.
CSRF_COOKIE = "JSESSIONID"
SESSION_COOKIE = "li_at"


async def load_cookies(path: str = COOKIES_FILE) -> List[dict]:
    """Load and sanitize cookies JSON for LinkedIn domains only.

    - Removes whitespace from values
    - Normalizes domain to start with `.linkedin.com`
    - Normalizes `sameSite` values
    - Maps browser-extension `expirationDate` to Playwright's `expires`
    - Filters out entries missing name/value
    """
    if not os.path.exists(path):
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            cookies = json.load(f)
    except (OSError, ValueError):
        return []

    clean: List[dict] = []
    for c in cookies if isinstance(cookies, list) else []:
        if not isinstance(c, dict):
            continue
        if "value" in c and isinstance(c["value"], str):
            c["value"] = re.sub(r"\s+", "", c["value"])
        domain = c.get("domain", "")
        if domain and not domain.startswith("."):
            domain = "." + domain
        if "linkedin.com" not in domain:
            continue
        c["domain"] = domain

        ss = str(c.get("sameSite", "lax")).lower()
        if ss in ["no_restriction", "none"]:
            c["sameSite"] = "None"
        elif ss in ["lax", "strict"]:
            c["sameSite"] = ss.capitalize()
        else:
            c["sameSite"] = "Lax"

        if "expirationDate" in c and "expires" not in c:
            c["expires"] = c["expirationDate"]
        for k in ["hostOnly", "session", "storeId", "id", "expirationDate"]:
            c.pop(k, None)

        if not c.get("name") or not c.get("value"):
            continue

        c.setdefault("path", "/")
        c.setdefault("expires", -1)
        c.setdefault("httpOnly", False)
        c.setdefault("secure", True)
        clean.append(c)
    return clean


def csrf_token_from_cookies(cookies: List[Dict[str, Any]]) -> str:
    """Return the anti-CSRF token derived from the JSESSIONID cookie.

    LinkedIn stores it quoted (``"ajax:123..."``); the header wants it bare.
    """
    for c in cookies:
        if c.get("name") == CSRF_COOKIE:
            return str(c.get("value", "")).replace('"', "")
    return ""


def has_session_cookie(cookies: List[Dict[str, Any]]) -> bool:
    """The presence of `li_at` is a strong indicator of an authenticated session."""
    return any(c.get("name") == SESSION_COOKIE for c in cookies)


def to_storage_state(cookies: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Wrap cookies in the storage-state shape Playwright request contexts accept."""
    return {"cookies": cookies, "origins": []}
