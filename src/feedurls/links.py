from __future__ import annotations
import logging
from typing import TypedDict, Callable, Dict, Any, Iterator, Tuple
from bs4 import BeautifulSoup

from .config import ResolveConfig
from .errors import URLError
from .urlnorm import absolute_url

logger = logging.getLogger(__name__)

class LinkRecord(TypedDict):
    url: str
    original: str
    tag: str
    attribute: str

def _skippable(value: str, blocked_schemes: tuple[str, ...]) -> bool:
    if not value or value.startswith("#"):
        return True
    return value.lower().startswith(blocked_schemes)

def _parse_srcset(value: str) -> list[tuple[str, str]]:
    """Split a ``srcset`` value into ``(url, descriptor)`` candidates.

    A candidate URL runs to the next whitespace, so commas inside it
    (``w_300,c_fill``, ``data:...;base64,...``) stay part of the URL.
    """
    out = []
    pos, n = 0, len(value)
    while pos < n:
        while pos < n and (value[pos].isspace() or value[pos] == ","):
            pos += 1
        start = pos
        while pos < n and not value[pos].isspace():
            pos += 1
        url = value[start:pos]
        descriptor = ""
        if url.endswith(","):
            url = url.rstrip(",")
        else:
            start = pos
            while pos < n and value[pos] != ",":
                pos += 1
            descriptor = value[start:pos].strip()
        if url:
            out.append((url, descriptor))
    return out

def _iter_candidates(soup: BeautifulSoup, config: ResolveConfig) -> Iterator[Tuple[Any, str, str, bool]]:
    """Yield ``(node, tag, attribute, is_srcset)`` for every configured attribute present."""
    pairs = [(t, a, False) for t, a in config.link_attributes] + [(t, a, True) for t, a in config.srcset_attributes]
    wanted: Dict[str, list] = {}
    for tag, attr, is_srcset in pairs:
        wanted.setdefault(tag, []).append((attr, is_srcset))
    for node in soup.find_all(list(wanted)):
        for attr, is_srcset in wanted[node.name]:
            if node.has_attr(attr):
                yield node, node.name, attr, is_srcset

def _resolve(
    base_url: str,
    value: str,
    stats: Dict[str, int],
    event_cb: Callable[[Dict[str, Any]], None] | None,
) -> str | None:
    try:
        resolved = absolute_url(base_url, value)
    except URLError as e:
        stats["links_skipped"] += 1
        logger.debug("Skipping link %r (base %r): %s", value, base_url, e)
        if event_cb:
            event_cb({"type": "link_skipped", "link": value, "base": base_url, "error": str(e)})
        return None
    stats["links_resolved"] += 1
    return resolved

def _init_stats(stats: Dict[str, int] | None) -> Dict[str, int]:
    if stats is None:
        stats = {}
    stats.setdefault("links_resolved", 0)
    stats.setdefault("links_skipped", 0)
    stats.setdefault("links_duplicate", 0)
    return stats

def extract_links(
    html: str,
    base_url: str,
    config: ResolveConfig | None = None,
    stats: Dict[str, int] | None = None,
    event_cb: Callable[[Dict[str, Any]], None] | None = None,
) -> list[LinkRecord]:
    """Collect every link/media URL in ``html`` resolved against ``base_url``.

    Links that cannot be resolved are skipped and counted; they never abort
    the extraction. Order is document order, de-duplicated on the resolved
    URL when ``config.dedupe_links`` is set, and capped at ``config.per_entry_cap``.
    """
    config = config or ResolveConfig(site_url=base_url)
    stats = _init_stats(stats)
    if not html:
        return []
    soup = BeautifulSoup(html, "lxml")
    links: list[LinkRecord] = []
    seen: set[str] = set()
    for node, tag, attr, is_srcset in _iter_candidates(soup, config):
        raw = node.get(attr) or ""
        values = [u for u, _ in _parse_srcset(raw)] if is_srcset else [raw.strip()]
        for value in values:
            if _skippable(value, config.blocked_schemes):
                continue
            resolved = _resolve(base_url, value, stats, event_cb)
            if resolved is None:
                continue
            if config.dedupe_links:
                if resolved in seen:
                    stats["links_duplicate"] += 1
                    continue
                seen.add(resolved)
            links.append(LinkRecord(url=resolved, original=value, tag=tag, attribute=attr))
            if config.per_entry_cap is not None and len(links) >= config.per_entry_cap:
                return links
    return links

def rewrite_links(
    html: str,
    base_url: str,
    config: ResolveConfig | None = None,
    stats: Dict[str, int] | None = None,
    event_cb: Callable[[Dict[str, Any]], None] | None = None,
) -> str:
    """Return ``html`` with every resolvable link attribute made absolute.

    Unresolvable values are left exactly as they were.
    """
    config = config or ResolveConfig(site_url=base_url)
    stats = _init_stats(stats)
    if not html:
        return html
    soup = BeautifulSoup(html, "lxml")
    for node, _tag, attr, is_srcset in _iter_candidates(soup, config):
        raw = node.get(attr) or ""
        if is_srcset:
            rebuilt = []
            for url, descriptor in _parse_srcset(raw):
                if not _skippable(url, config.blocked_schemes):
                    url = _resolve(base_url, url, stats, event_cb) or url
                rebuilt.append(f"{url} {descriptor}" if descriptor else url)
            node[attr] = ", ".join(rebuilt)
            continue
        value = raw.strip()
        if _skippable(value, config.blocked_schemes):
            continue
        resolved = _resolve(base_url, value, stats, event_cb)
        if resolved is not None:
            node[attr] = resolved
    # lxml wraps fragments in <html><body>; hand fragments back as fragments
    if "<html" not in html.lower() and soup.body is not None:
        return soup.body.decode_contents()
    return str(soup)
