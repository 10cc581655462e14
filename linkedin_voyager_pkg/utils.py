import re
import unicodedata
from urllib.parse import urlparse

import tldextract

# Offline extractor: use the suffix list bundled with tldextract instead of
# fetching it on first use.
_tld_extract = tldextract.TLDExtract(suffix_list_urls=())

# "LinkedIn Open Networker" marker some members append to their name.
_LION_MARKERS = ("LION", "(LION)")

_EMOJI_RE = re.compile(
    "(?:[#0-9]\u20e3)"
    "|[\xa9\xae\u203c\u2047-\u2049\u2122\u2139\u3030\u303d\u3297\u3299][\ufe00-\ufeff]?"
    "|[\u2190-\u21ff\u2300-\u23ff\u2460-\u24ff\u25a0-\u25ff\u2600-\u27bf\u2900-\u297f\u2b00-\u2bf0][\ufe00-\ufeff]?"
    "|[\U0001f000-\U0001faff][\ufe00-\ufeff]?"
)

# Letters NFKD does not decompose into base + combining mark.
_LIGATURES = {
    "Æ": "AE", "æ": "ae", "Ø": "O", "ø": "o", "Œ": "OE", "œ": "oe",
    "Đ": "D", "đ": "d", "Ł": "L", "ł": "l", "ß": "s", "Ħ": "H", "ħ": "h",
    "ı": "i", "Ŧ": "T", "ŧ": "t",
}


def get_public_identifier(profile_url: str) -> str:
    """Extract the public identifier (handle) from a LinkedIn profile URL.

    ``/in/<handle>/...`` returns the handle. Legacy ``/pub/<name>/<a>/<b>/<c>``
    URLs return ``<name>-<c><b><a>``. Anything else returns an empty string.
    """
    if not profile_url:
        return ""

    if "linkedin.com/in/" in profile_url:
        handle = profile_url.split("/in/", 1)[1]
        return handle.split("/", 1)[0]

    if "linkedin.com/pub/" in profile_url:
        pieces = profile_url.split("/pub/", 1)[1].split("/")
        username = pieces.pop(0) if pieces else ""
        return f"{username}-{''.join(reversed(pieces))}"

    return ""


def extract_root_domain(url: str) -> str:
    """Return the registrable domain of a URL, e.g. ``example.co.uk``.

    Values without a scheme are returned untouched; the company page URL is
    occasionally a bare domain already.
    """
    if not url:
        return ""
    if "://" not in url:
        return url

    host = urlparse(url).hostname or ""
    ext = _tld_extract(host)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return host


def replace_diacritics(text: str) -> str:
    """Strip accents so names can be used in email pattern generation."""
    text = "".join(_LIGATURES.get(ch, ch) for ch in text)
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def remove_emojis(text: str) -> str:
    """Remove emojis and pictographic symbols. Not exhaustive."""
    return _EMOJI_RE.sub("", text)


def scrub_name(dirty_name: str) -> str:
    """Reduce a display name to "First Last" for email pattern generation.

    - Diacritics and emojis are stripped, commas removed.
    - With three or more words a trailing LION marker is dropped; when the
      second word is an initial ("J" or "J.") the last word is the surname,
      otherwise the second word is.
    """
    if not dirty_name:
        raise ValueError("Name cannot be empty")

    words = replace_diacritics(remove_emojis(dirty_name)).split(" ")
    first = words[0]

    if len(words) >= 3:
        if words[-1].strip() in _LION_MARKERS:
            words.pop()
        middle = words[1]
        if len(middle) == 1 or (len(middle) == 2 and "." in middle):
            last = words[-1]
        else:
            last = middle
        name = f"{first} {last}"
    elif len(words) == 2:
        name = f"{words[0]} {words[1]}"
    else:
        name = first

    return name.replace(",", "")


def get_cookie_value(cookies: str, key: str) -> str:
    """Read one value from a ``Cookie`` header string, quotes removed."""
    if not cookies or not key:
        return ""

    prefix = f"{key}="
    for chunk in cookies.split(";"):
        chunk = chunk.lstrip(" ")
        if chunk.startswith(prefix):
            return chunk[len(prefix):].replace('"', "")
    return ""
