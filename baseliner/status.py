"""Baseline status resolution."""

from __future__ import annotations

from collections.abc import Iterable
import re

from .constants import DEPRECATED_HTML_TAGS
from .model import BaselineStatus, FeatureDatabase, FeatureRecord
from .util.text import normalize_names

TagOverrides = dict[str, BaselineStatus]

_DEPRECATED_MATURITY_RE = re.compile(r"^(deprecated|obsolete)$", re.IGNORECASE)


def is_deprecated(record: FeatureRecord) -> bool:
    """Discouraged, flagged deprecated, or deprecated/obsolete maturity."""
    if record.discouraged:
        return True
    status = record.status
    if status is None:
        return False
    if status.deprecated:
        return True
    return bool(_DEPRECATED_MATURITY_RE.match(status.maturity or ""))


def resolve_status(database: FeatureDatabase, feature_id: str) -> BaselineStatus:
    """Classify a feature id.

    Unknown ids are treated as not-baseline. Deprecation is checked before
    baseline coverage, and a record without baseline data counts as baseline.
    """
    record = database.get(feature_id)
    if record is None:
        return "not-baseline"
    if is_deprecated(record):
        return "deprecated"

    baseline = record.status.baseline if record.status else None
    if baseline in ("high", "low"):
        return "baseline"
    if baseline is False:
        return "not-baseline"
    return "baseline"


def build_tag_overrides(extra_tags: Iterable[str] | None = None) -> TagOverrides:
    """Return the obsolete-element table merged with caller-supplied tags."""
    overrides: TagOverrides = {tag: "deprecated" for tag in DEPRECATED_HTML_TAGS}
    for tag in normalize_names(extra_tags):
        overrides[tag] = "deprecated"
    return overrides
