#!/usr/bin/env python3
"""
LinkedIn Voyager Scraper - CLI Standalone Version

Fetches a full profile, a company, or a Sales Navigator profile through
LinkedIn's internal Voyager API and prints the normalized record as JSON.
Uses cookies exported by save_cookies.py, or a running Chrome over CDP.

Usage:
    python scraper.py profile <PUBLIC_IDENTIFIER_OR_URL> [OPTIONS]
    python scraper.py company <UNIVERSAL_NAME> [OPTIONS]
    python scraper.py sales-nav <SALES_NAV_URL> [OPTIONS]

Example:
    python scraper.py profile https://www.linkedin.com/in/johndoe/
    python scraper.py company microsoft --use-cdp --cdp-url http://localhost:9222
"""

import argparse
import asyncio
import json
import sys

from linkedin_voyager_pkg.browser import voyager_session
from linkedin_voyager_pkg.config import CDP_URL, COOKIES_FILE, PROXY
from linkedin_voyager_pkg.errors import VoyagerError
from linkedin_voyager_pkg.scraper_logging import configure_logging
from linkedin_voyager_pkg.utils import get_public_identifier


async def run(args: argparse.Namespace) -> dict:
    """Open a session and dispatch to the requested Voyager operation."""
    async with voyager_session(
        cookies_path=args.cookies,
        use_cdp=args.use_cdp,
        cdp_url=args.cdp_url,
        proxy=args.proxy,
    ) as client:
        if args.command == "profile":
            target = args.target
            if "linkedin.com" in target:
                target = get_public_identifier(target)
            print(f"🚀 Fetching profile: {target}", file=sys.stderr)
            return await client.get_full_profile(target)
        if args.command == "company":
            print(f"🚀 Fetching company: {args.target}", file=sys.stderr)
            return await client.get_company(args.target)
        print(f"🚀 Resolving Sales Navigator profile: {args.target}", file=sys.stderr)
        return await client.scrape_sales_nav_full_profile(args.target)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="LinkedIn Voyager Scraper - Fetch normalized profiles and companies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s profile johndoe
  %(prog)s profile https://www.linkedin.com/in/johndoe/ -o johndoe.json
  %(prog)s company microsoft --debug
  %(prog)s sales-nav https://www.linkedin.com/sales/people/ACwAAA... --use-cdp
        """
    )

    parser.add_argument(
        "command",
        choices=["profile", "company", "sales-nav"],
        help="Operation to run"
    )
    parser.add_argument(
        "target",
        help="Public identifier or profile URL, company universal name, or Sales Navigator URL"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--use-cdp",
        action="store_true",
        help="Reuse a running Chrome session via the Chrome DevTools Protocol (CDP)"
    )
    parser.add_argument(
        "--cdp-url",
        default=CDP_URL,
        help=f"CDP endpoint URL (default: {CDP_URL})"
    )
    parser.add_argument(
        "--proxy",
        default=PROXY,
        help="Proxy URL to use for requests (e.g., http://proxy.example.com:8080)"
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Output file path (JSON format). If not specified, prints to stdout"
    )
    parser.add_argument(
        "--cookies",
        default=COOKIES_FILE,
        help=f"Path to cookies.json file (default: {COOKIES_FILE})"
    )

    args = parser.parse_args()
    configure_logging("DEBUG" if args.debug else None)

    try:
        result = asyncio.run(run(args))
    except KeyboardInterrupt:
        print("\n⚠️ Interrupted by user", file=sys.stderr)
        sys.exit(130)
    except VoyagerError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(result, f, indent=2)
        print(f"\n📁 Results saved to: {args.output}", file=sys.stderr)
    else:
        print(json.dumps(result, indent=2))

    sys.exit(0 if result else 1)


if __name__ == "__main__":
    main()
