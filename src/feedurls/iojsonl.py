from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Iterable, Mapping, Iterator, Any

logger = logging.getLogger(__name__)

def write_jsonl(records_iterable: Iterable[Mapping], out_path: str | Path) -> int:
    """Write mapping records to a UTF-8 JSONL file; return how many were written."""
    count = 0
    with open(out_path, "w", encoding="utf-8") as f:
        for rec in records_iterable:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")
            count += 1
    return count

def read_jsonl(path: str | Path) -> Iterator[Any]:
    """Yield Python objects from a JSONL file lazily, skipping undecodable lines."""
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning("Skipping %s:%d: %s", path, lineno, e)
                continue
