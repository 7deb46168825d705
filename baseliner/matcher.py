"""Heuristic tokenizer for HTML and CSS sources.

No grammar is parsed: CSS properties, at-rules, HTML tags and attributes are
found with line-scoped regular expressions and looked up in
:class:`~baseliner.model.LookupTables`. Comments and quoted strings are not
stripped first, and tags spanning several lines only have their first line
inspected.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import re

from .model import Candidate, LookupTables
from .positions import region_lines
from .status import TagOverrides

CSS_PROPERTY_RE = re.compile(r"(^|[\s{;])([a-zA-Z-]+)\s*:")
CSS_AT_RULE_RE = re.compile(r"@([a-zA-Z-]+)")
STYLE_BLOCK_RE = re.compile(r"<style\b[^>]*>([\s\S]*?)</style>", re.IGNORECASE)
HTML_TAG_RE = re.compile(r"<(/?)\s*([a-zA-Z0-9:-]+)")
HTML_ATTR_VALUE_RE = re.compile(r"""([a-zA-Z:-]+)\s*=\s*("([^"]*)"|'([^']*)'|([^\s>]+))""")
HTML_BOOL_ATTR_RE = re.compile(r"\s([a-zA-Z:-]+)(?!\s*=)(?=\s|$|>)")


def iter_css_line(line: str, base: int, css_table: Mapping[str, str]) -> Iterator[Candidate]:
    for match in CSS_PROPERTY_RE.finditer(line):
        prop = match.group(2).lower()
        feature_id = css_table.get(prop)
        if feature_id:
            start = base + match.start(2)
            yield Candidate(prop, feature_id, start, start + len(prop))

    for match in CSS_AT_RULE_RE.finditer(line):
        rule = "@" + match.group(1).lower()
        feature_id = css_table.get(rule)
        if feature_id:
            start = base + match.start(1)
            yield Candidate(rule, feature_id, start, base + match.end(1))


def iter_css_candidates(text: str, tables: LookupTables, base: int = 0) -> Iterator[Candidate]:
    """Property and at-rule candidates of CSS-family text starting at ``base``."""
    for offset, line in region_lines(text, base):
        yield from iter_css_line(line, offset, tables.css)


def iter_style_blocks(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(content_offset, content)`` for every terminated ``<style>`` block."""
    for match in STYLE_BLOCK_RE.finditer(text):
        yield match.start(1), match.group(1)


def _lookup_attr(
    tables: LookupTables, tag: str, attr: str, value: str | None
) -> tuple[str, str] | None:
    if value is not None:
        feature_id = tables.html_tag_attr_values.get(f"{tag}:{attr}:{value}")
        if feature_id:
            return feature_id, f'{tag}[{attr}="{value}"]'
    feature_id = tables.html_tag_attrs.get(f"{tag}:{attr}")
    if feature_id:
        return feature_id, f"{tag}[{attr}]"
    feature_id = tables.html_global_attrs.get(attr)
    if feature_id:
        return feature_id, f"[{attr}]"
    return None


def _iter_attributes(
    region: str, base: int, tag: str, name_end: int, tables: LookupTables
) -> Iterator[Candidate]:
    for match in HTML_ATTR_VALUE_RE.finditer(region):
        attr = match.group(1).lower()
        raw = next((group for group in match.group(3, 4, 5) if group is not None), "")
        hit = _lookup_attr(tables, tag, attr, raw.lower())
        if hit:
            start = base + match.start(1)
            yield Candidate(hit[1], hit[0], start, start + len(attr))

    for match in HTML_BOOL_ATTR_RE.finditer(region, name_end):
        attr = match.group(1).lower()
        hit = _lookup_attr(tables, tag, attr, None)
        if hit:
            start = base + match.start(1)
            yield Candidate(hit[1], hit[0], start, start + len(attr))


def iter_html_line(
    line: str, base: int, tables: LookupTables, overrides: TagOverrides
) -> Iterator[Candidate]:
    for tag_match in HTML_TAG_RE.finditer(line):
        if tag_match.group(1):
            # Closing tags: the element was reported at its opening tag.
            continue
        tag = tag_match.group(2).lower()
        name_start = base + tag_match.start(2)
        name_end = name_start + len(tag)

        feature_id = tables.html_tags.get(tag)
        if feature_id:
            yield Candidate(tag, feature_id, name_start, name_end)
        else:
            override = overrides.get(tag)
            if override and override != "baseline":
                yield Candidate(tag, f"html.elements.{tag}", name_start, name_end, override)

        tag_start = tag_match.start()
        close = line.find(">", tag_start)
        region = line[tag_start : close if close != -1 else len(line)]
        yield from _iter_attributes(
            region, base + tag_start, tag, tag_match.end() - tag_start, tables
        )


def iter_html_candidates(
    text: str, tables: LookupTables, overrides: TagOverrides
) -> Iterator[Candidate]:
    """Candidates of an HTML document: embedded ``<style>`` CSS first, then markup."""
    for content_start, content in iter_style_blocks(text):
        yield from iter_css_candidates(content, tables, base=content_start)

    for offset, line in region_lines(text):
        yield from iter_html_line(line, offset, tables, overrides)
