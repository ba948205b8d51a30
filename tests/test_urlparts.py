from feedurls.urlparts import root_url, is_https, domain, domain_without_www


def test_root_url_strips_path_query_fragment():
    assert root_url("https://example.com/path?q=1") == "https://example.com/"
    assert root_url("https://example.com/a/b#frag") == "https://example.com/"
    assert root_url("https://example.com") == "https://example.com/"


def test_root_url_protocol_relative_defaults_to_https():
    assert root_url("//example.com/path") == "https://example.com/"


def test_root_url_keeps_port_drops_userinfo():
    assert root_url("http://user:pw@example.com:8080/x") == "http://example.com:8080/"


def test_root_url_falls_back_to_input():
    assert root_url("example.com") == "example.com"
    assert root_url("http://[::1") == "http://[::1"
    assert root_url("") == ""


def test_is_https_case_insensitive():
    assert is_https("HTTPS://example.com")
    assert is_https("https://example.com/a")
    assert not is_https("http://example.com")
    assert not is_https("//example.com")


def test_is_https_false_on_garbage():
    assert is_https("") is False
    assert is_https("http://[::1") is False


def test_domain_includes_port():
    assert domain("https://www.example.com:8443/a") == "www.example.com:8443"


def test_domain_fallbacks():
    assert domain("http://[::1") == "http://[::1"
    assert domain("/relative/path") == ""


def test_domain_without_www_prefix_only():
    assert domain_without_www("https://www.example.com") == "example.com"
    assert domain_without_www("https://wwwexample.com") == "wwwexample.com"
    assert domain_without_www("https://wwww.example.com") == "wwww.example.com"
    assert domain_without_www("https://xwww.example.com") == "xwww.example.com"
    assert domain_without_www("https://WWW.example.com") == "WWW.example.com"
    assert domain_without_www("https://sub.www.example.com") == "sub.www.example.com"
