import pytest
from feedurls.parsing import parse_url, authority_host, has_authority_form, URLParseError


def test_parse_splits_components():
    p = parse_url("HTTPS://u:pw@Example.com:8443/a/b?x=1#f")
    assert p.scheme == "https"
    assert p.path == "/a/b"
    assert p.query == "x=1"
    assert p.fragment == "f"
    assert authority_host(p) == "Example.com:8443"


@pytest.mark.parametrize("raw", [
    "http://exa mple.com/\x7f",
    "a\tb",
    "/a/%g0",
    "http://example.com/#%",
    ":foo",
    "1:foo/bar",
    "http://[::1",
    "http://example.com:port/",
])
def test_parse_rejects_invalid(raw):
    with pytest.raises(URLParseError):
        parse_url(raw)


def test_query_escapes_not_validated():
    assert parse_url("https://example.com/?q=100%").query == "q=100%"


def test_colon_allowed_after_first_segment():
    assert parse_url("a/b:c").path == "a/b:c"
    assert parse_url("./a:b").path == "./a:b"


def test_has_authority_form():
    assert has_authority_form(parse_url("https://example.com"))
    assert not has_authority_form(parse_url("https:/path-only"))
    assert has_authority_form(parse_url("urn:isbn:0451450523"))
    assert not has_authority_form(parse_url("/a"))
