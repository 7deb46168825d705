"""Data models for feature data, lookup tables and scan results."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Literal

BaselineStatus = Literal["baseline", "not-baseline", "deprecated"]
BaselineLevel = Literal["high", "low", False]
IssueStatus = Literal["not-baseline", "deprecated"]


@dataclass(frozen=True)
class FeatureStatus:
    baseline: BaselineLevel | None = None
    deprecated: bool = False
    maturity: str | None = None


@dataclass(frozen=True)
class FeatureRecord:
    feature_id: str
    status: FeatureStatus | None
    compat_features: tuple[str, ...] = ()
    discouraged: bool = False
    name: str | None = None


@dataclass(frozen=True)
class FeatureDatabase:
    """Feature records keyed by id, in dataset order."""

    records: Mapping[str, FeatureRecord]
    version: str = ""

    def get(self, feature_id: str) -> FeatureRecord | None:
        return self.records.get(feature_id)

    def __iter__(self) -> Iterator[FeatureRecord]:
        return iter(self.records.values())

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, feature_id: object) -> bool:
        return feature_id in self.records


@dataclass(frozen=True)
class LookupTables:
    css: dict[str, str] = field(default_factory=dict)
    html_tags: dict[str, str] = field(default_factory=dict)
    html_tag_attrs: dict[str, str] = field(default_factory=dict)
    html_tag_attr_values: dict[str, str] = field(default_factory=dict)
    html_global_attrs: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Candidate:
    """A recognized token with its absolute offsets in the scanned text."""

    token: str
    feature_id: str
    start: int
    end: int
    status: BaselineStatus | None = None


@dataclass(frozen=True)
class IssueRange:
    line: int
    start: int
    end: int


@dataclass(frozen=True)
class ScanIssue:
    range: IssueRange
    feature_id: str
    status: IssueStatus
    message: str

    @property
    def line(self) -> int:
        return self.range.line

    @property
    def start_column(self) -> int:
        return self.range.start

    @property
    def end_column(self) -> int:
        return self.range.end


@dataclass(frozen=True)
class ScanOptions:
    deprecated_tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class ScanResult:
    issues: list[ScanIssue] = field(default_factory=list)
