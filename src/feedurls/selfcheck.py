"""Environment self-check for feed-urls.

Prints as JSON:
 - Package version
 - Module file locations and whether each imports
 - A resolution smoke check against fixed inputs
"""
from __future__ import annotations
import importlib, json
from importlib import metadata

MODULES = [
    'feedurls.urlnorm', 'feedurls.urlparts', 'feedurls.pathjoin',
    'feedurls.links', 'feedurls.pipeline',
    'feedurls_cli.resolve_links', 'feedurls_cli.urlinfo',
]

def collect() -> dict:
    out = {}
    try:
        out['version'] = metadata.version('feed-urls')
    except metadata.PackageNotFoundError:
        out['version'] = 'unknown'
    info = []
    for m in MODULES:
        try:
            mod = importlib.import_module(m)
            info.append({'module': m, 'file': getattr(mod, '__file__', None), 'ok': True})
        except ImportError as e:
            info.append({'module': m, 'error': str(e), 'ok': False})
    out['modules'] = info
    from feedurls.urlnorm import absolute_url
    out['smoke'] = absolute_url("https://example.com/a/b", "../c") == "https://example.com/c"
    return out

def main() -> int:
    out = collect()
    print(json.dumps(out, indent=2))
    return 0 if out['smoke'] and all(m['ok'] for m in out['modules']) else 1

if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
