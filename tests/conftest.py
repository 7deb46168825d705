from __future__ import annotations

from pathlib import Path
import json
from typing import Any

import pytest

from baseliner.dataset import parse_feature_database
from baseliner.index import FeatureIndex
from baseliner.model import FeatureDatabase

FEATURES: dict[str, dict[str, Any]] = {
    "text-box": {
        "name": "text-box",
        "status": {"baseline": False},
        "compat_features": ["css.properties.text-box", "css.properties.text-box-trim"],
    },
    "grid": {
        "status": {"baseline": "high"},
        "compat_features": ["css.properties.grid-template-columns", "css.properties.display.grid"],
    },
    "scope": {"status": {"baseline": False}, "compat_features": ["css.at-rules.scope"]},
    "container-queries": {"status": {"baseline": "low"}, "compat_features": ["css.at-rules.container"]},
    "zoom": {
        "status": {"baseline": "high", "deprecated": True},
        "compat_features": ["css.properties.zoom"],
    },
    "box-reflect": {
        "status": {"baseline": "high"},
        "discouraged": {"according_to": ["https://example.com/discouraged"]},
        "compat_features": ["css.properties.-webkit-box-reflect"],
    },
    "accent-color": {"compat_features": ["css.properties.accent-color"]},
    "anchor-positioning": {
        "status": {"baseline": False},
        "compat_features": ["css.properties.anchor-name"],
    },
    "dialog": {
        "status": {"baseline": "high"},
        "compat_features": ["html.elements.dialog", "html.elements.dialog.open"],
    },
    "details-name": {"status": {"baseline": False}, "compat_features": ["html.elements.details.name"]},
    "input-types": {"status": {"baseline": False}, "compat_features": ["html.elements.input.type"]},
    "input-datetime-local": {
        "status": {"baseline": False},
        "compat_features": ["html.elements.input.type.datetime-local"],
    },
    "loading-lazy": {
        "status": {"baseline": False},
        "compat_features": [
            "html.elements.img.attributes.loading",
            "html.elements.img.attributes.loading.lazy",
        ],
    },
    "popover": {"status": {"baseline": False}, "compat_features": ["html.global_attributes.popover"]},
    "inert": {"status": {"baseline": "low"}, "compat_features": ["html.global_attributes.inert"]},
    "acronym": {
        "status": {"baseline": "high", "maturity": "Obsolete"},
        "compat_features": ["html.elements.acronym"],
    },
    "async-clipboard": {"status": {"baseline": False}, "compat_features": ["api.Clipboard.read"]},
    "old-grid": {"kind": "moved", "redirect_target": "grid"},
}


@pytest.fixture
def database() -> FeatureDatabase:
    return parse_feature_database({"features": FEATURES}, version="test")


@pytest.fixture
def index() -> FeatureIndex:
    return FeatureIndex()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"features": FEATURES}), encoding="utf-8")
    return path


@pytest.fixture
def feature_payload() -> dict[str, Any]:
    return {"features": FEATURES}
