from __future__ import annotations

from pathlib import Path
import json
from typing import Any

from click.testing import CliRunner
from pytest import MonkeyPatch

from baseliner import __version__, cli
from baseliner.dataset import parse_feature_database
from baseliner.exceptions import NetworkError
from baseliner.model import FeatureDatabase


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--help"])
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_version() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_paths_required() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, [])
    assert result.exit_code != 0
    assert "Missing argument" in result.output


def test_clean_file_exits_zero(tmp_path: Path, data_file: Path) -> None:
    page = _write(tmp_path, "clean.css", ".a { color: red; }\n")

    result = CliRunner().invoke(cli.main, ["--data", str(data_file), str(page)])

    assert result.exit_code == 0
    assert "No non-Baseline features found." in result.output


def test_issues_exit_nonzero_with_summary(tmp_path: Path, data_file: Path) -> None:
    page = _write(tmp_path, "page.html", "<marquee>Hi</marquee>\n")

    result = CliRunner().invoke(cli.main, ["--data", str(data_file), str(page)])

    assert result.exit_code == 1
    assert "html.elements.marquee" in result.output
    assert "1 issue(s): 0 not-baseline, 1 deprecated" in result.output


def test_json_output(tmp_path: Path, data_file: Path) -> None:
    page = _write(tmp_path, "page.html", "<custom-tag popover></custom-tag>\n")
    styles = _write(tmp_path, "styles.scss", ".a {\n  text-box: trim;\n}\n")

    result = CliRunner().invoke(
        cli.main,
        [
            "--data",
            str(data_file),
            "--format",
            "json",
            "--deprecated-tag",
            "custom-tag",
            str(page),
            str(styles),
        ],
    )

    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert [i["featureId"] for i in payload[str(page)]["issues"]] == [
        "html.elements.custom-tag",
        "popover",
    ]
    assert payload[str(styles)]["issues"][0]["line"] == 1
    assert payload[str(styles)]["issues"][0]["startColumn"] == 2


def test_deprecated_tags_from_environment(
    tmp_path: Path, data_file: Path, monkeypatch: MonkeyPatch
) -> None:
    page = _write(tmp_path, "page.html", "<old-one></old-one><old-two>\n")
    monkeypatch.setenv("BASELINER_DATA", str(data_file))
    monkeypatch.setenv("BASELINER_DEPRECATED_TAGS", "old-one old-two")

    result = CliRunner().invoke(cli.main, ["--format", "json", str(page)])

    payload = json.loads(result.output)
    assert [i["featureId"] for i in payload[str(page)]["issues"]] == [
        "html.elements.old-one",
        "html.elements.old-two",
    ]


def test_unsupported_file_is_skipped(tmp_path: Path, data_file: Path) -> None:
    script = _write(tmp_path, "app.js", "const a = 1;\n")

    result = CliRunner().invoke(cli.main, ["--data", str(data_file), str(script)])

    assert result.exit_code == 0
    assert "unsupported file type" in result.output


def test_language_option_overrides_suffix(tmp_path: Path, data_file: Path) -> None:
    template = _write(tmp_path, "page.tpl", "<div popover>\n")

    result = CliRunner().invoke(
        cli.main, ["--data", str(data_file), "-l", "html", "--format", "json", str(template)]
    )

    payload = json.loads(result.output)
    assert payload[str(template)]["issues"][0]["featureId"] == "popover"


def test_stdin_requires_language(data_file: Path) -> None:
    result = CliRunner().invoke(cli.main, ["--data", str(data_file), "-"], input="<marquee>")

    assert result.exit_code != 0
    assert "--language is required" in result.output


def test_stdin_scan(data_file: Path) -> None:
    result = CliRunner().invoke(
        cli.main,
        ["--data", str(data_file), "-l", "css", "--format", "json", "-"],
        input="@scope (.a) {}",
    )

    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload["<stdin>"]["issues"][0]["featureId"] == "scope"


def test_annotate_stdin_keeps_json_on_stderr(data_file: Path) -> None:
    result = CliRunner().invoke(
        cli.main,
        ["--data", str(data_file), "-l", "html", "--format", "json", "--annotate", "-"],
        input="<marquee>Hi</marquee>",
    )

    assert result.exit_code == 1
    assert result.stdout == (
        "<!-- AI fallback rewrite applied.\nNon-Baseline features detected:\n"
        "- html.elements.marquee (deprecated) at line 1 -->\n<marquee>Hi</marquee>"
    )
    payload = json.loads(result.stderr)
    assert payload["<stdin>"]["issues"][0]["featureId"] == "html.elements.marquee"


def test_annotate_stdin_text_report_on_stderr(data_file: Path) -> None:
    result = CliRunner().invoke(
        cli.main,
        ["--data", str(data_file), "-l", "css", "--annotate", "-"],
        input=".a { text-box: trim; }",
    )

    assert result.exit_code == 1
    assert result.stdout.startswith("/* AI fallback rewrite applied.")
    assert result.stdout.endswith(".a { text-box: trim; }")
    assert "1 issue(s): 1 not-baseline, 0 deprecated" in result.stderr
    assert "issue(s)" not in result.stdout


def test_missing_file_reports_error(tmp_path: Path, data_file: Path) -> None:
    result = CliRunner().invoke(cli.main, ["--data", str(data_file), str(tmp_path / "gone.css")])

    assert result.exit_code != 0
    assert "gone.css" in result.output


def test_annotate_rewrites_files_with_issues(tmp_path: Path, data_file: Path) -> None:
    page = _write(tmp_path, "page.html", "<marquee>Hi</marquee>\n")
    clean = _write(tmp_path, "clean.css", ".a { color: red; }\n")

    result = CliRunner().invoke(
        cli.main, ["--data", str(data_file), "--annotate", str(page), str(clean)]
    )

    assert result.exit_code == 1
    assert page.read_text(encoding="utf-8").startswith(
        "<!-- AI fallback rewrite applied.\nNon-Baseline features detected:\n"
        "- html.elements.marquee (deprecated) at line 1 -->\n<marquee>"
    )
    assert clean.read_text(encoding="utf-8") == ".a { color: red; }\n"


def test_downloads_dataset_without_data_option(
    tmp_path: Path, monkeypatch: MonkeyPatch, feature_payload: dict[str, Any]
) -> None:
    page = _write(tmp_path, "styles.css", ".a { text-box: trim; }\n")
    calls: list[tuple[str, float]] = []

    def _fake_fetch(url: str, timeout: float = 30.0) -> FeatureDatabase:
        calls.append((url, timeout))
        return parse_feature_database(feature_payload, version="remote")

    monkeypatch.setattr(cli, "fetch_feature_database", _fake_fetch)

    result = CliRunner().invoke(
        cli.main, ["--data-url", "https://example.com/data.json", "--timeout", "5", str(page)]
    )

    assert result.exit_code == 1
    assert calls == [("https://example.com/data.json", 5.0)]


def test_dataset_errors_are_reported(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    page = _write(tmp_path, "styles.css", ".a {}\n")

    def _boom(url: str, timeout: float = 30.0) -> FeatureDatabase:
        raise NetworkError(url, cause="ConnectError")

    monkeypatch.setattr(cli, "fetch_feature_database", _boom)

    result = CliRunner().invoke(cli.main, [str(page)])

    assert result.exit_code != 0
    assert "Error: Unable to download feature data" in result.output
