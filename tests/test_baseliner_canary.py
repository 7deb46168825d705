from __future__ import annotations

import pytest

from baseliner.dataset import fetch_feature_database
from baseliner.index import build_lookup_tables
from baseliner.scanner import scan


@pytest.mark.canary
def test_published_dataset_shape_is_indexable_live() -> None:
    """
    Canary test: download the published web-features data and verify the key shapes we index.

    This is intentionally a single, live-network test to detect upstream layout changes.
    """
    database = fetch_feature_database()
    assert len(database) > 500, "Dataset unexpectedly small."
    assert database.version

    tables = build_lookup_tables(database)
    assert tables.css, "No css.properties / css.at-rules keys found."
    assert any(key.startswith("@") for key in tables.css), "No at-rule keys found."
    assert tables.html_tags, "No html.elements keys found."
    assert tables.html_tag_attrs or tables.html_tag_attr_values, "No element attribute keys."
    assert tables.html_global_attrs, "No global attribute keys found."

    statuses = {record.status.baseline for record in database if record.status}
    assert {"high", "low", False} <= statuses

    result = scan("<div>\n<style>.a { display: block; }</style>\n</div>", "html", database=database)
    assert all(issue.status in ("not-baseline", "deprecated") for issue in result.issues)
