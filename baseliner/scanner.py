"""Scan entry point: turns matcher candidates into positioned issues."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .constants import CSS_LANGUAGES, ISSUE_MESSAGE_TEMPLATE, SUPPORTED_LANGUAGES
from .index import FeatureIndex
from .matcher import iter_css_candidates, iter_html_candidates
from .model import (
    Candidate,
    FeatureDatabase,
    IssueStatus,
    LookupTables,
    ScanIssue,
    ScanOptions,
    ScanResult,
)
from .positions import PositionMapper
from .status import build_tag_overrides, resolve_status


def format_message(token: str, status: IssueStatus) -> str:
    return ISSUE_MESSAGE_TEMPLATE.format(token=token, status=status)


def iter_candidates(
    text: str, language: str, tables: LookupTables, options: ScanOptions
) -> Iterator[Candidate]:
    if language in CSS_LANGUAGES:
        yield from iter_css_candidates(text, tables)
    elif language == "html":
        overrides = build_tag_overrides(options.deprecated_tags)
        yield from iter_html_candidates(text, tables, overrides)


def collect_issues(
    text: str, candidates: Iterable[Candidate], database: FeatureDatabase
) -> list[ScanIssue]:
    """Resolve candidates and keep the non-baseline ones, in discovery order."""
    mapper = PositionMapper(text)
    issues: list[ScanIssue] = []
    for candidate in candidates:
        status = candidate.status or resolve_status(database, candidate.feature_id)
        if status == "baseline":
            continue
        issues.append(
            ScanIssue(
                range=mapper.span(candidate.start, candidate.end),
                feature_id=candidate.feature_id,
                status=status,
                message=format_message(candidate.token, status),
            )
        )
    return issues


def scan(
    text: str,
    language: str,
    options: ScanOptions | None = None,
    *,
    database: FeatureDatabase,
    index: FeatureIndex | None = None,
) -> ScanResult:
    """Scan ``text`` for features outside Baseline.

    ``language`` is one of ``html``, ``css``, ``scss`` or ``less``; anything else
    yields an empty result. Pass a shared ``index`` to reuse lookup tables across
    scans of the same dataset.
    """
    if language not in SUPPORTED_LANGUAGES:
        return ScanResult(issues=[])

    tables = (index or FeatureIndex()).tables(database)
    candidates = iter_candidates(text, language, tables, options or ScanOptions())
    return ScanResult(issues=collect_issues(text, candidates, database))


class Scanner:
    """A dataset, its cached index and default options for repeated scans."""

    def __init__(
        self,
        database: FeatureDatabase,
        options: ScanOptions | None = None,
        index: FeatureIndex | None = None,
    ) -> None:
        self.database = database
        self.options = options or ScanOptions()
        self.index = index or FeatureIndex()

    def scan(self, text: str, language: str, options: ScanOptions | None = None) -> ScanResult:
        return scan(
            text,
            language,
            options or self.options,
            database=self.database,
            index=self.index,
        )

    def reload(self, database: FeatureDatabase) -> None:
        """Swap datasets; tables are rebuilt on the next scan if the version differs."""
        self.database = database
