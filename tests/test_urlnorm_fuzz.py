import random, string
from feedurls.urlnorm import absolute_url, is_absolute_url

SEED = "https://example.com/blog/"

ALPH = string.ascii_letters + string.digits


def rand_path():
    segs = []
    for _ in range(random.randint(1, 5)):
        r = random.random()
        if r < 0.15:
            segs.append("..")
        elif r < 0.25:
            segs.append(".")
        else:
            segs.append("".join(random.choice(ALPH) for _ in range(random.randint(1, 8))))
    path = "/".join(segs)
    if random.random() < 0.3:
        path = "/" + path
    return path


def rand_query():
    if random.random() < 0.5:
        return ""
    pairs = []
    for _ in range(random.randint(1, 3)):
        k = "".join(random.choice(ALPH.lower()) for _ in range(random.randint(1, 6)))
        v = "".join(random.choice(ALPH) for _ in range(random.randint(0, 4)))
        pairs.append(f"{k}={v}")
    return "?" + "&".join(pairs)


def test_resolved_relative_links_are_absolute_and_stable():
    random.seed(1234)
    for _ in range(500):
        href = rand_path() + rand_query()
        resolved = absolute_url(SEED, href)
        assert is_absolute_url(resolved), f"{href} => {resolved}"
        assert resolved.startswith("https://example.com/")
        assert "/./" not in resolved and "/../" not in resolved
        # resolving an absolute URL again, against any base, is a no-op
        assert absolute_url("https://other.org/x/", resolved) == resolved
