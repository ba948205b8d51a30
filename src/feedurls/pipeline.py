from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import TypedDict, Optional, Iterable, Iterator, Callable, Dict, Any, List

from .config import ResolveConfig
from .errors import URLError
from .links import LinkRecord, extract_links, rewrite_links
from .urlnorm import absolute_url
from .urlparts import root_url, domain_without_www, is_https

logger = logging.getLogger(__name__)

class EntryRecord(TypedDict, total=False):
    id: Any
    url: Optional[str]
    enclosures: List[str]
    links: List[LinkRecord]
    siteRoot: str
    siteHost: str
    https: bool
    rewrittenContent: str

def _enclosure_urls(raw: Any) -> list[str]:
    """Enclosures may be given as plain strings or ``{"url": ...}`` mappings.

    Anything else, including a non-list ``enclosures`` value, is ignored.
    """
    if not isinstance(raw, (list, tuple)):
        raw = [raw] if raw else []
    out: list[str] = []
    for enc in raw:
        if isinstance(enc, Mapping):
            enc = enc.get("url")
        if isinstance(enc, str) and enc.strip():
            out.append(enc.strip())
    return out

def _entry_problem(entry: Any) -> str | None:
    if not isinstance(entry, Mapping):
        return f"entry is a {type(entry).__name__}, not an object"
    for key in ("url", "content"):
        value = entry.get(key)
        if value is not None and not isinstance(value, str):
            return f"{key} is a {type(value).__name__}, not a string"
    return None

def resolve_entries(
    entries: Iterable[Mapping[str, Any]],
    config: ResolveConfig,
    stats: Dict[str, int] | None = None,
    event_cb: Callable[[Dict[str, Any]], None] | None = None,
) -> Iterator[EntryRecord]:
    """Yield one EntryRecord per entry with its URLs made absolute.

    The entry URL and enclosures are resolved against ``config.site_url``;
    links inside the content are resolved against the entry URL when it
    resolved, the site URL otherwise. A URL that fails to resolve is
    dropped from that entry only; an entry that is not an object, or whose
    url/content is not a string, is skipped and counted in ``errors_entry``.
    """
    if stats is None:
        stats = {}
    stats.setdefault('entries', 0)
    stats.setdefault('errors_resolve', 0)
    stats.setdefault('errors_entry', 0)
    stats.setdefault('links_resolved', 0)
    stats.setdefault('links_skipped', 0)
    stats.setdefault('links_duplicate', 0)

    site = config.site_url
    site_root = root_url(site)
    site_host = domain_without_www(site_root)
    site_https = is_https(site_root)

    def _resolve_or_none(value: str, what: str) -> str | None:
        try:
            return absolute_url(site, value)
        except URLError as e:
            stats['errors_resolve'] += 1
            logger.debug("Unable to resolve %s %r against %r: %s", what, value, site, e)
            if event_cb:
                event_cb({"type": "error", "phase": "resolve", "field": what, "url": value, "error": str(e)})
            return None

    for entry in entries:
        stats['entries'] += 1
        problem = _entry_problem(entry)
        if problem:
            stats['errors_entry'] += 1
            logger.warning("Skipping entry %d: %s", stats['entries'] - 1, problem)
            if event_cb:
                event_cb({"type": "error", "phase": "entry", "index": stats['entries'] - 1, "error": problem})
            continue
        raw_url = (entry.get("url") or "").strip()
        entry_url = _resolve_or_none(raw_url, "url") if raw_url else None

        enclosures = []
        for enc in _enclosure_urls(entry.get("enclosures")):
            resolved = _resolve_or_none(enc, "enclosure")
            if resolved is not None:
                enclosures.append(resolved)

        content = entry.get("content") or ""
        link_base = entry_url or site
        record = EntryRecord(
            id=entry.get("id"),
            url=entry_url,
            enclosures=enclosures,
            links=extract_links(content, link_base, config, stats=stats, event_cb=event_cb),
            siteRoot=site_root,
            siteHost=site_host,
            https=site_https,
        )
        if config.rewrite_content:
            # extract_links above already counted and reported these links;
            # no stats or events here so each skip is reported once
            record["rewrittenContent"] = rewrite_links(content, link_base, config)
        if event_cb:
            event_cb({"type": "resolved", "id": record["id"], "url": entry_url, "links": len(record["links"])})
        yield record
