from __future__ import annotations
from typing import NamedTuple, Optional
from urllib.parse import SplitResult

from .errors import InvalidInputError, InvalidBaseError
from .parsing import parse_url, unparse_url, remove_dot_segments, has_authority_form, URLParseError

ABSOLUTE_PREFIXES = ("https://", "http://")


class AbsoluteForm(NamedTuple):
    """Result of :func:`get_absolute_form`.

    ``url`` is set when the input is already absolute; otherwise ``parsed``
    holds the relative reference that still needs a base.
    """
    url: str
    parsed: Optional[SplitResult]


def is_absolute_url(link: str) -> bool:
    try:
        parts = parse_url(link)
    except URLParseError:
        return False
    return has_authority_form(parts)


def get_absolute_form(link: str) -> AbsoluteForm:
    """Return the absolute form of ``link`` if it has one, else its parsed form.

    Protocol-relative links (``//host/path``) are assumed to be served over
    https. Literal ``http://`` / ``https://`` links are returned untouched
    without reparsing.
    """
    if link.startswith("//"):
        return AbsoluteForm("https:" + link, None)
    if link.startswith(ABSOLUTE_PREFIXES):
        return AbsoluteForm(link, None)

    try:
        parts = parse_url(link)
    except URLParseError as exc:
        raise InvalidInputError(f"unable to parse input URL: {exc}") from exc

    if has_authority_form(parts):
        return AbsoluteForm(unparse_url(parts), None)
    return AbsoluteForm("", parts)


def _merge(base: SplitResult, ref_path: str) -> str:
    if base.netloc and not base.path:
        return "/" + ref_path
    return base.path[:base.path.rfind("/") + 1] + ref_path


def resolve_reference(base: SplitResult, ref: SplitResult) -> SplitResult:
    """RFC 3986 section 5.2.2 for a scheme-less reference; works for any base scheme."""
    if ref.netloc:
        return SplitResult(base.scheme, ref.netloc, remove_dot_segments(ref.path), ref.query, ref.fragment)
    if not ref.path:
        return SplitResult(base.scheme, base.netloc, base.path, ref.query or base.query, ref.fragment)
    if ref.path.startswith("/"):
        path = remove_dot_segments(ref.path)
    else:
        path = remove_dot_segments(_merge(base, ref.path))
    return SplitResult(base.scheme, base.netloc, path, ref.query, ref.fragment)


def absolute_url(base_url: str, link: str) -> str:
    """Resolve ``link`` against ``base_url`` (RFC 3986 reference resolution).

    Absolute links are returned as-is and the base is never looked at.
    An empty link resolves to the base itself, minus its fragment. The
    result is percent-encoded where the input was not.
    """
    form = get_absolute_form(link)
    if form.url:
        return form.url

    try:
        base = parse_url(base_url)
    except URLParseError as exc:
        raise InvalidBaseError(f"unable to parse base URL: {exc}") from exc
    if not has_authority_form(base):
        raise InvalidBaseError(f"base URL is not absolute: {base_url!r}")

    if form.parsed.scheme:
        # e.g. "http:foo": a scheme without the host it needs
        raise InvalidInputError(f"input URL has a scheme but no host: {link!r}")

    resolved = unparse_url(resolve_reference(base, form.parsed))
    if not is_absolute_url(resolved):
        raise InvalidBaseError(f"unable to resolve {link!r} against base URL {base_url!r}")
    return resolved
