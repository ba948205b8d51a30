from __future__ import annotations


class URLError(ValueError):
    """Base class for URL resolution and joining failures."""


class InvalidInputError(URLError):
    """The input reference could not be parsed as a URL."""


class InvalidBaseError(URLError):
    """The base URL could not be parsed, or is not absolute."""


class EmptyBaseError(URLError):
    pass


class EmptyPathError(URLError):
    pass


class JoinFailedError(URLError):
    """Base and path parsed fine but could not be combined into a valid URL."""

    def __init__(self, base_url: str, path: str, reason: str = "") -> None:
        self.base_url = base_url
        self.path = path
        msg = f"unable to join base URL {base_url} and path {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
