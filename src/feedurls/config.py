from __future__ import annotations
from dataclasses import dataclass

DEFAULT_LINK_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("a", "href"),
    ("img", "src"),
    ("audio", "src"),
    ("video", "src"),
    ("video", "poster"),
    ("source", "src"),
    ("iframe", "src"),
)
DEFAULT_SRCSET_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("img", "srcset"),
    ("source", "srcset"),
)

@dataclass(frozen=True)
class ResolveConfig:
    site_url: str = ""
    link_attributes: tuple[tuple[str, str], ...] = DEFAULT_LINK_ATTRIBUTES
    srcset_attributes: tuple[tuple[str, str], ...] = DEFAULT_SRCSET_ATTRIBUTES
    blocked_schemes: tuple[str, ...] = ("mailto:", "tel:", "javascript:", "data:")
    per_entry_cap: int | None = 100  # None disables the cap
    rewrite_content: bool = False  # also emit entry HTML with links made absolute
    dedupe_links: bool = True
