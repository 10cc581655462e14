import os
import random


COOKIES_FILE = os.environ.get("LINKEDIN_COOKIES_PATH", "cookies.json")
VOYAGER_BASE_URL = os.environ.get("VOYAGER_BASE_URL", "https://www.linkedin.com/voyager/api")
LINKEDIN_CDN_URL = os.environ.get("LINKEDIN_CDN_URL", "https://media-exp2.licdn.com/media")
USE_CDP = os.environ.get("SCRAPER_USE_CDP", "false").lower() in ["1", "true", "yes"]
CDP_URL = os.environ.get("SCRAPER_CDP_URL", "http://127.0.0.1:9222")
PROXY = os.environ.get("SCRAPER_PROXY") or None
LOG_LEVEL = os.environ.get("SCRAPER_LOG_LEVEL", "INFO").upper()

# Sub-resources merged into a full profile, in merge order.
PROFILE_RESOURCES = ("profileView", "profileContactInfo", "highlights")


def user_agents():
    """Return a curated pool of desktop Chrome user agents.

    Voyager rejects requests whose user agent does not look like a real
    browser, so the standalone request context picks one of these.
    """
    return [
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    ]


def random_user_agent():
    """Pick a random user agent from the pool."""
    pool = user_agents()
    return random.choice(pool)
