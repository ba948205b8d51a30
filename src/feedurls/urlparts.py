"""Best-effort derived parts of a URL (root origin, host, https-ness).

These helpers feed display and grouping code, so they never raise: on
malformed input they fall back to the closest string they already have.
"""
from __future__ import annotations

from .errors import URLError
from .parsing import parse_url, authority_host, URLParseError
from .urlnorm import absolute_url

WWW_PREFIX = "www."


def root_url(website_url: str) -> str:
    """Return ``scheme://host/`` for ``website_url``."""
    if website_url.startswith("//"):
        website_url = "https://" + website_url[2:]

    try:
        absolute = absolute_url(website_url, "")
    except URLError:
        return website_url

    try:
        parts = parse_url(absolute)
    except URLParseError:
        return absolute

    host = authority_host(parts)
    if not parts.scheme or not host:
        return absolute
    return f"{parts.scheme}://{host}/"


def is_https(website_url: str) -> bool:
    try:
        parts = parse_url(website_url)
    except URLParseError:
        return False
    return parts.scheme.lower() == "https"


def domain(website_url: str) -> str:
    """Host (with port, if any) of ``website_url``; the input itself if unparsable."""
    try:
        parts = parse_url(website_url)
    except URLParseError:
        return website_url
    return authority_host(parts)


def domain_without_www(website_url: str) -> str:
    return domain(website_url).removeprefix(WWW_PREFIX)
