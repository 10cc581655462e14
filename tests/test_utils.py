import pytest

from linkedin_voyager_pkg.utils import (
    extract_root_domain,
    get_cookie_value,
    get_public_identifier,
    remove_emojis,
    replace_diacritics,
    scrub_name,
)


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.linkedin.com/in/johndoe/", "johndoe"),
        ("https://www.linkedin.com/in/johndoe", "johndoe"),
        ("https://www.linkedin.com/in/johndoe/details/skills/", "johndoe"),
        ("https://www.linkedin.com/pub/john-doe/1/2b/345", "john-doe-3452b1"),
        ("https://www.linkedin.com/company/acme/", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_get_public_identifier(url, expected):
    assert get_public_identifier(url) == expected


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.example.com/about", "example.com"),
        ("http://example.com", "example.com"),
        ("https://shop.example.co.uk/", "example.co.uk"),
        ("example.com", "example.com"),
        ("", ""),
        (None, ""),
    ],
)
def test_extract_root_domain(url, expected):
    assert extract_root_domain(url) == expected


def test_replace_diacritics():
    assert replace_diacritics("José Müller") == "Jose Muller"
    assert replace_diacritics("Łukasz Øster") == "Lukasz Oster"
    assert replace_diacritics("plain") == "plain"


def test_remove_emojis():
    assert remove_emojis("Ann🚀") == "Ann"
    assert remove_emojis("Bob ☕") == "Bob "
    assert remove_emojis("no emoji") == "no emoji"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("John Smith", "John Smith"),
        ("John", "John"),
        ("John A Smith", "John Smith"),
        ("John A. Smith", "John Smith"),
        ("John Michael Smith", "John Michael"),
        ("Jane Doe LION", "Jane Doe"),
        ("Jane Doe (LION)", "Jane Doe"),
        ("Doe, John", "Doe John"),
        ("Zoë Ångström", "Zoe Angstrom"),
    ],
)
def test_scrub_name(name, expected):
    assert scrub_name(name) == expected


def test_scrub_name_rejects_empty():
    with pytest.raises(ValueError):
        scrub_name("")


def test_get_cookie_value():
    cookies = 'lang=v=2&lang=en-us; JSESSIONID="ajax:123"; li_at=AQED'
    assert get_cookie_value(cookies, "JSESSIONID") == "ajax:123"
    assert get_cookie_value(cookies, "li_at") == "AQED"
    assert get_cookie_value(cookies, "missing") == ""
    assert get_cookie_value("", "li_at") == ""
