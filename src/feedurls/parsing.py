from __future__ import annotations
import re
from urllib.parse import quote, urlsplit, urlunsplit, SplitResult

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class URLParseError(ValueError):
    pass


def parse_url(raw: str) -> SplitResult:
    """Split ``raw`` into components, rejecting strings that are not valid URLs.

    ``urlsplit`` accepts almost anything; on top of it this refuses control
    characters, malformed percent escapes (outside the query), a colon in the
    first segment of a scheme-less reference, non-numeric ports and broken
    IPv6 brackets. Nothing is normalized beyond ``urlsplit``'s own scheme
    lowercasing.
    """
    if _CONTROL_CHARS.search(raw):
        raise URLParseError(f"invalid control character in URL {raw!r}")
    try:
        parts = urlsplit(raw)
    except ValueError as exc:
        raise URLParseError(f"{exc} in URL {raw!r}") from exc

    for name in ("netloc", "path", "fragment"):
        if _BAD_ESCAPE.search(getattr(parts, name)):
            raise URLParseError(f"invalid URL escape in {name} of {raw!r}")

    if not parts.scheme and not parts.netloc:
        first_segment = parts.path.split("/", 1)[0]
        if ":" in first_segment:
            raise URLParseError(f"first path segment in URL cannot contain colon: {raw!r}")

    if parts.netloc:
        try:
            parts.port
        except ValueError as exc:
            raise URLParseError(f"invalid port in URL {raw!r}") from exc
    return parts


def authority_host(parts: SplitResult) -> str:
    """Host of the authority component, port included, userinfo dropped."""
    return parts.netloc.rpartition("@")[2]


def has_authority_form(parts: SplitResult) -> bool:
    """True when ``parts`` is an absolute URL.

    A scheme is always required; ``http`` and ``https`` additionally need a host.
    """
    if not parts.scheme:
        return False
    if parts.scheme in ("http", "https"):
        return bool(authority_host(parts))
    return True


# RFC 3986 pchar plus "/" for paths, plus "?" for query and fragment; "%" is
# kept so existing escapes survive (bad escapes are rejected by parse_url).
_PATH_SAFE = "/:@!$&'()*+,;=%~"
_QUERY_SAFE = _PATH_SAFE + "?"


def unparse_url(parts: SplitResult) -> str:
    """``urlunsplit`` with path, query and fragment percent-encoded where needed."""
    return urlunsplit((
        parts.scheme,
        parts.netloc,
        quote(parts.path, safe=_PATH_SAFE),
        quote(parts.query, safe=_QUERY_SAFE),
        quote(parts.fragment, safe=_QUERY_SAFE),
    ))


def remove_dot_segments(path: str) -> str:
    """RFC 3986 section 5.2.4."""
    output: list[str] = []
    while path:
        if path.startswith("../"):
            path = path[3:]
        elif path.startswith("./"):
            path = path[2:]
        elif path.startswith("/./"):
            path = path[2:]
        elif path == "/.":
            path = "/"
        elif path.startswith("/../") or path == "/..":
            path = "/" + path[4:]
            if output:
                output.pop()
        elif path in (".", ".."):
            path = ""
        else:
            end = path.find("/", 1)
            if end == -1:
                end = len(path)
            output.append(path[:end])
            path = path[end:]
    return "".join(output)
