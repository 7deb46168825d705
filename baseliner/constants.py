"""Constants used across baseliner."""

from __future__ import annotations

from typing import Final

FEATURE_DATA_URL: Final[str] = "https://unpkg.com/web-features/data.json"

SUPPORTED_LANGUAGES: Final[tuple[str, ...]] = ("html", "css", "scss", "less")
CSS_LANGUAGES: Final[frozenset[str]] = frozenset({"css", "scss", "less"})

LANGUAGE_BY_SUFFIX: Final[dict[str, str]] = {
    ".html": "html",
    ".htm": "html",
    ".css": "css",
    ".scss": "scss",
    ".less": "less",
}

# Obsolete or non-standard elements reported when the dataset has no entry for them.
DEPRECATED_HTML_TAGS: Final[tuple[str, ...]] = (
    "acronym",
    "applet",
    "basefont",
    "bgsound",
    "big",
    "blink",
    "center",
    "dir",
    "font",
    "frame",
    "frameset",
    "isindex",
    "keygen",
    "listing",
    "marquee",
    "menuitem",
    "nobr",
    "noembed",
    "noframes",
    "plaintext",
    "spacer",
    "strike",
    "tt",
    "xmp",
)

STATUS_ICON_MAP: Final[dict[str, str]] = {
    "not-baseline": "❌",
    "deprecated": "⚠",
    "baseline": "✅",
}

STATUS_STYLE_MAP: Final[dict[str, str]] = {
    "not-baseline": "bold red",
    "deprecated": "bold yellow",
    "baseline": "green",
}

ISSUE_MESSAGE_TEMPLATE: Final[str] = 'Feature "{token}" is {status} in Baseline'
FALLBACK_BANNER_TITLE: Final[str] = "AI fallback rewrite applied."
FALLBACK_BANNER_SUBTITLE: Final[str] = "Non-Baseline features detected:"

DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0
