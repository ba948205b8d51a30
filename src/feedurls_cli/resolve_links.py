from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
# Ensure src root is on path if running as a script (python src/feedurls_cli/resolve_links.py ...)
_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from feedurls.config import ResolveConfig
from feedurls.iojsonl import read_jsonl, write_jsonl
from feedurls.pipeline import resolve_entries

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Resolve entry, enclosure and content URLs of feed entries against the site URL")
    ap.add_argument("--base", required=True, help="Site URL the feed belongs to (resolution base)")
    ap.add_argument("--in", dest="inp", required=True, help="Input entries JSONL (keys: id, url, content, enclosures)")
    ap.add_argument("--out", required=True, help="Output JSONL file path")
    ap.add_argument("--perEntryLinkCap", type=int, default=100, help="Max links kept per entry (0 disables the cap)")
    ap.add_argument("--rewrite", action="store_true", help="Also emit rewrittenContent with links made absolute")
    ap.add_argument("--noDedupe", action="store_true", help="Keep duplicate links within an entry")
    ap.add_argument("--echo", action="store_true", help="Also print each JSON record to stdout as it's written")
    ap.add_argument("--stats", action="store_true", help="Print resolution stats JSON to stderr at end")
    ap.add_argument("--verbose", action="store_true", help="Print per-entry / per-link events to stderr")
    ap.add_argument("--logEvents", help="Write JSONL event log to this file")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    stats: dict[str, int] = {}
    event_fp = None
    if args.logEvents:
        event_log_file = Path(args.logEvents)
        event_log_file.parent.mkdir(parents=True, exist_ok=True)
        event_fp = event_log_file.open("w", encoding="utf-8")

    def event_cb(ev):
        line = json.dumps(ev, ensure_ascii=False)
        if args.verbose:
            sys.stderr.write(line + "\n")
        if event_fp:
            event_fp.write(line + "\n")

    cfg = ResolveConfig(
        site_url=args.base,
        per_entry_cap=args.perEntryLinkCap or None,
        rewrite_content=args.rewrite,
        dedupe_links=not args.noDedupe,
    )
    records_iter = resolve_entries(
        read_jsonl(args.inp),
        cfg,
        stats=stats,
        event_cb=event_cb if (args.verbose or event_fp) else None,
    )
    try:
        if args.echo:
            with open(out_path, "w", encoding="utf-8") as f:
                for rec in records_iter:
                    line = json.dumps(rec, ensure_ascii=False)
                    f.write(line + "\n")
                    print(line)
        else:
            write_jsonl(records_iter, out_path)
    finally:
        if event_fp:
            event_fp.close()
    if args.stats:
        sys.stderr.write(json.dumps(stats) + "\n")
    return 0

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
