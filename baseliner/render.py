"""Issue renderers for terminal and JSON output."""

from __future__ import annotations

from collections.abc import Sequence
import json

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .constants import STATUS_ICON_MAP, STATUS_STYLE_MAP
from .model import ScanIssue
from .util.text import ellipsize


def _issue_line(issue: ScanIssue, width: int) -> Text:
    line = Text(f"  {issue.line + 1}:{issue.start_column + 1} ")
    icon = STATUS_ICON_MAP.get(issue.status, "")
    line.append(f"{icon} {issue.status}", style=STATUS_STYLE_MAP.get(issue.status, ""))
    line.append(f"  {ellipsize(issue.message, max(width, 20))}")
    line.append(f"  [{issue.feature_id}]", style="dim")
    return line


def render_issues(label: str, issues: Sequence[ScanIssue], width: int = 100) -> Panel:
    """Render the issues of one document as a Rich panel."""
    if not issues:
        body = Group(Text("No non-Baseline features found.", style="green"))
        return Panel(body, border_style="green", title=label)

    lines = [_issue_line(issue, width) for issue in issues]
    deprecated = sum(1 for issue in issues if issue.status == "deprecated")
    summary = (
        f"{len(issues)} issue(s): "
        f"{len(issues) - deprecated} not-baseline, {deprecated} deprecated"
    )
    lines.append(Text(""))
    lines.append(Text(summary, style="bold"))
    return Panel(Group(*lines), border_style="blue", title=label)


def render_hover(issue: ScanIssue) -> Group:
    """Feature id and status detail for a single issue."""
    return Group(
        Text.assemble(("Feature ID: ", "bold"), issue.feature_id),
        Text.assemble(
            ("Status: ", "bold"), (issue.status, STATUS_STYLE_MAP.get(issue.status, ""))
        ),
    )


def issue_to_dict(issue: ScanIssue) -> dict[str, object]:
    return {
        "line": issue.line,
        "startColumn": issue.start_column,
        "endColumn": issue.end_column,
        "featureId": issue.feature_id,
        "status": issue.status,
        "message": issue.message,
    }


def issues_to_json(results: dict[str, Sequence[ScanIssue]]) -> str:
    """Serialize per-document issue lists keyed by document label."""
    payload = {
        label: {"issues": [issue_to_dict(issue) for issue in issues]}
        for label, issues in results.items()
    }
    return json.dumps(payload, indent=2)
