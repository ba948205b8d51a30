import logging
from feedurls.iojsonl import read_jsonl, write_jsonl


def test_write_then_read_skips_bad_lines(tmp_path, caplog):
    path = tmp_path / "entries.jsonl"
    n = write_jsonl([{"url": "/a"}, {"url": "/é"}], path)
    assert n == 2
    with open(path, "a", encoding="utf-8") as f:
        f.write("{not json\n\n")
    with caplog.at_level(logging.WARNING, logger="feedurls.iojsonl"):
        rows = list(read_jsonl(path))
    assert rows == [{"url": "/a"}, {"url": "/é"}]
    assert any("Skipping" in r.message for r in caplog.records)
