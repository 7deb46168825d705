"""Rewrite collaborators.

The scanner never edits documents. A :class:`Rewriter` turns a document and its
issues into replacement text; when none is configured, or it fails,
:func:`rewrite_rule_based` annotates the document with the issue list instead.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .constants import FALLBACK_BANNER_SUBTITLE, FALLBACK_BANNER_TITLE
from .exceptions import BaselinerError
from .model import ScanIssue
from .util.debug import debug_log


class Rewriter(Protocol):
    def __call__(self, text: str, language: str, issues: Sequence[ScanIssue]) -> str: ...


def wrap_comment(language: str, message: str) -> str:
    if language == "html":
        return f"<!-- {message} -->"
    return f"/* {message} */"


def summarize_issues(issues: Sequence[ScanIssue]) -> list[str]:
    """One ``- id (status) at line N`` entry per issue, 1-based lines."""
    return [f"- {issue.feature_id} ({issue.status}) at line {issue.line + 1}" for issue in issues]


def rewrite_rule_based(text: str, language: str, issues: Sequence[ScanIssue]) -> str:
    """Prepend a comment listing the issues; the document body is left untouched."""
    if not issues:
        return text
    header = "\n".join(
        [FALLBACK_BANNER_TITLE, FALLBACK_BANNER_SUBTITLE, *summarize_issues(issues)]
    )
    return f"{wrap_comment(language, header)}\n{text}"


def rewrite_with_fallback(
    text: str,
    language: str,
    issues: Sequence[ScanIssue],
    rewriter: Rewriter | None = None,
) -> tuple[str, bool]:
    """Rewrite with ``rewriter`` if given, else fall back to the rule-based rewrite.

    Returns the new text and whether the collaborator produced it.
    """
    if rewriter is not None:
        try:
            rewritten = rewriter(text, language, issues)
        except BaselinerError as exc:
            debug_log(f"rewriter failed, using fallback: {exc}")
        else:
            if rewritten.strip():
                return rewritten, True
            debug_log("rewriter returned empty text, using fallback")
    return rewrite_rule_based(text, language, issues), False
