"""Inspect a single URL from the command line.

Without options prints its absolute form, root, domain and https flag as
JSON. ``--base`` resolves it against a base URL, ``--join`` appends a path.
Errors from resolution or joining exit with status 2.
"""
from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path
_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from feedurls.errors import URLError
from feedurls.pathjoin import join_base_url_and_path
from feedurls.urlnorm import absolute_url, get_absolute_form, is_absolute_url
from feedurls.urlparts import root_url, domain, domain_without_www, is_https


def describe(url: str) -> dict:
    form = get_absolute_form(url)
    return {
        "url": url,
        "isAbsolute": is_absolute_url(url),
        "absolute": form.url or None,
        "root": root_url(url),
        "domain": domain(url),
        "domainWithoutWWW": domain_without_www(url),
        "https": is_https(url),
    }


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Resolve, join or describe a URL")
    ap.add_argument("url", help="URL or relative reference")
    g = ap.add_mutually_exclusive_group()
    g.add_argument("--base", help="Resolve URL against this base URL")
    g.add_argument("--join", metavar="PATH", help="Join PATH onto URL (URL is the base)")
    args = ap.parse_args(argv)

    try:
        if args.base is not None:
            out = {"url": args.url, "base": args.base, "absolute": absolute_url(args.base, args.url)}
        elif args.join is not None:
            out = {"base": args.url, "path": args.join, "joined": join_base_url_and_path(args.url, args.join)}
        else:
            out = describe(args.url)
    except URLError as e:
        sys.stderr.write(f"{type(e).__name__}: {e}\n")
        return 2
    print(json.dumps(out, ensure_ascii=False))
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
