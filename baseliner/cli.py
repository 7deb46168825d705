"""Console script for baseliner."""

from __future__ import annotations

from pathlib import Path
import sys

import click
from rich.console import Console

from . import __version__ as _version
from .constants import (
    DEFAULT_TIMEOUT_SECONDS,
    FEATURE_DATA_URL,
    LANGUAGE_BY_SUFFIX,
    SUPPORTED_LANGUAGES,
)
from .dataset import fetch_feature_database, load_feature_database
from .exceptions import BaselinerError
from .model import FeatureDatabase, ScanIssue, ScanOptions
from .render import issues_to_json, render_issues
from .rewrite import rewrite_rule_based
from .scanner import Scanner
from .util.debug import configure_logging

_STDIN = Path("-")


def _load_database(data_path: Path | None, data_url: str, timeout: float) -> FeatureDatabase:
    if data_path is not None:
        return load_feature_database(data_path)
    return fetch_feature_database(data_url, timeout=timeout)


def _read_source(path: Path) -> str:
    if path == _STDIN:
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise click.FileError(str(path), hint=str(exc)) from exc


def _language_for(path: Path, language: str | None) -> str | None:
    if language:
        return language
    return LANGUAGE_BY_SUFFIX.get(path.suffix.lower())


@click.argument(
    "paths",
    metavar="<path>",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
)
@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--data",
    "data_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="BASELINER_DATA",
    help="Local web-features data.json (skips the download).",
)
@click.option(
    "--data-url",
    default=FEATURE_DATA_URL,
    envvar="BASELINER_DATA_URL",
    show_default=True,
    help="Where to download web-features data.json from.",
)
@click.option(
    "--deprecated-tag",
    "deprecated_tags",
    multiple=True,
    envvar="BASELINER_DEPRECATED_TAGS",
    help="Extra HTML tag to report as deprecated (repeatable).",
)
@click.option(
    "-l",
    "--language",
    type=click.Choice(SUPPORTED_LANGUAGES),
    default=None,
    help="Language of every input (required for stdin).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(("text", "json")),
    default="text",
    show_default=True,
)
@click.option(
    "--annotate",
    is_flag=True,
    default=False,
    help="Prepend a comment listing the issues to each affected file.",
)
@click.option("--timeout", type=float, default=DEFAULT_TIMEOUT_SECONDS, show_default=True)
@click.version_option(_version, "-v", "--version")
def main(
    paths: tuple[Path, ...],
    data_path: Path | None,
    data_url: str,
    deprecated_tags: tuple[str, ...],
    language: str | None,
    output_format: str,
    annotate: bool,
    timeout: float,
) -> None:
    """
    Report HTML/CSS features that are not Baseline

    \b
    Example usages:
        baseliner index.html styles.css
        baseliner --data data.json --deprecated-tag my-widget page.html
        cat theme.scss | baseliner -l scss -
    """
    configure_logging()
    # An annotated stdin document owns stdout; diagnostics move to stderr.
    diagnostics_to_stderr = annotate and _STDIN in paths
    console = Console(stderr=diagnostics_to_stderr)

    if _STDIN in paths and language is None:
        raise click.UsageError("--language is required when reading from stdin.")

    try:
        scanner = Scanner(
            _load_database(data_path, data_url, timeout),
            ScanOptions(deprecated_tags=deprecated_tags),
        )
    except BaselinerError as exc:
        raise click.ClickException(str(exc)) from exc

    results: dict[str, list[ScanIssue]] = {}
    for path in paths:
        kind = _language_for(path, language)
        if kind is None:
            console.print(
                f"Skipping {path}: unsupported file type.", style="dim", soft_wrap=True
            )
            continue

        text = _read_source(path)
        issues = scanner.scan(text, kind).issues
        label = "<stdin>" if path == _STDIN else str(path)
        results[label] = issues

        if annotate and issues:
            rewritten = rewrite_rule_based(text, kind, issues)
            if path == _STDIN:
                click.echo(rewritten, nl=False)
            else:
                path.write_text(rewritten, encoding="utf-8")

        if output_format == "text":
            console.print(render_issues(label, issues))

    if output_format == "json":
        click.echo(issues_to_json(results), err=diagnostics_to_stderr)

    if any(results.values()):
        raise SystemExit(1)
