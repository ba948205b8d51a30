from __future__ import annotations
from urllib.parse import SplitResult

from .errors import EmptyBaseError, EmptyPathError, InvalidBaseError, JoinFailedError
from .parsing import parse_url, unparse_url, URLParseError


def _clean_path(path: str) -> str:
    """Collapse duplicate slashes and resolve ``.``/``..`` segments of a rooted path."""
    segs: list[str] = []
    for seg in path.split("/"):
        if seg in ("", "."):
            continue
        if seg == "..":
            if segs:
                segs.pop()
            continue
        segs.append(seg)
    return "/" + "/".join(segs)


def _join_segments(base_path: str, rel: str) -> str:
    joined = _clean_path(base_path + "/" + rel)
    if not base_path.startswith("/"):
        joined = joined[1:]
    if rel.endswith("/") and not joined.endswith("/"):
        joined += "/"
    return joined


def join_base_url_and_path(base_url: str, path: str) -> str:
    """Append ``path`` to the path of ``base_url``.

    A query or fragment on ``path`` replaces the base's; otherwise the base's
    are kept. Characters not allowed in a URL are percent-encoded; existing
    escapes are left alone. The result is only as absolute as ``base_url`` is.
    """
    if base_url == "":
        raise EmptyBaseError("empty base URL")
    if path == "":
        raise EmptyPathError("empty path")

    try:
        base = parse_url(base_url)
    except URLParseError as exc:
        raise InvalidBaseError(f"invalid base URL: {exc}") from exc

    rest, has_fragment, fragment = path.partition("#")
    rel, has_query, query = rest.partition("?")

    joined = unparse_url(SplitResult(
        base.scheme,
        base.netloc,
        _join_segments(base.path, rel),
        query if has_query else base.query,
        fragment if has_fragment else base.fragment,
    ))

    try:
        parse_url(joined)
    except URLParseError as exc:
        raise JoinFailedError(base_url, path, str(exc)) from exc
    return joined
