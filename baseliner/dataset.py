"""Feature dataset loading (local JSON file or HTTP download)."""

from __future__ import annotations

from collections.abc import Mapping
import hashlib
import json
from pathlib import Path
from typing import Any

import httpx

from ._version import __version__
from .constants import DEFAULT_TIMEOUT_SECONDS, FEATURE_DATA_URL
from .exceptions import (
    ContentError,
    DatasetError,
    HttpStatusError,
    NetworkError,
    RequestTimeoutError,
)
from .model import BaselineLevel, FeatureDatabase, FeatureRecord, FeatureStatus
from .util.debug import debug_log


def _build_headers() -> dict[str, str]:
    return {
        "User-Agent": f"baseliner/{__version__}",
        "Accept": "application/json",
    }


def _parse_baseline(value: object) -> BaselineLevel | None:
    if value is False:
        return False
    if value in ("high", "low"):
        return value  # type: ignore[return-value]
    return None


def _parse_status(raw: object) -> FeatureStatus | None:
    if not isinstance(raw, dict):
        return None
    maturity = raw.get("maturity")
    return FeatureStatus(
        baseline=_parse_baseline(raw.get("baseline")),
        deprecated=raw.get("deprecated") is True,
        maturity=maturity if isinstance(maturity, str) else None,
    )


def _parse_record(feature_id: str, raw: Mapping[str, Any]) -> FeatureRecord:
    compat = raw.get("compat_features")
    keys: tuple[str, ...] = ()
    if isinstance(compat, list):
        keys = tuple(key for key in compat if isinstance(key, str))
    name = raw.get("name")
    return FeatureRecord(
        feature_id=feature_id,
        status=_parse_status(raw.get("status")),
        compat_features=keys,
        discouraged=bool(raw.get("discouraged")),
        name=name if isinstance(name, str) else None,
    )


def parse_feature_database(payload: object, version: str | None = None) -> FeatureDatabase:
    """Build a database from a decoded web-features payload.

    Both the published ``data.json`` layout (records under ``"features"``) and a
    bare ``{id: record}`` mapping are accepted. Entries that are not objects, and
    ``moved``/``split`` redirect entries, are skipped.
    """
    if not isinstance(payload, dict):
        return FeatureDatabase(records={}, version=version or "")

    features = payload.get("features")
    raw_features = features if isinstance(features, dict) else payload

    records: dict[str, FeatureRecord] = {}
    for feature_id, raw in raw_features.items():
        if not isinstance(feature_id, str) or not isinstance(raw, dict):
            debug_log(f"skipping malformed feature entry {feature_id!r}")
            continue
        kind = raw.get("kind", "feature")
        if kind != "feature":
            debug_log(f"skipping {kind} entry {feature_id!r}")
            continue
        records[feature_id] = _parse_record(feature_id, raw)

    return FeatureDatabase(records=records, version=version or "")


def _digest(raw: str) -> str:
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()[:16]


def _decode(raw: str, source: str) -> object:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ContentError(source) from exc


def load_feature_database(path: str | Path, version: str | None = None) -> FeatureDatabase:
    """Load a web-features JSON dump from disk."""
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetError(str(file_path), cause=exc.__class__.__name__) from exc
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DatasetError(str(file_path), cause="invalid JSON") from exc
    if not isinstance(payload, dict):
        raise DatasetError(str(file_path), cause="expected a JSON object")

    database = parse_feature_database(payload, version=version or _digest(raw))
    debug_log(f"loaded {len(database)} features from {file_path}")
    return database


def fetch_feature_data(
    url: str = FEATURE_DATA_URL, timeout: float = DEFAULT_TIMEOUT_SECONDS
) -> str:
    """Download the raw dataset body with friendly failures."""
    retry_once = True
    while True:
        try:
            with httpx.Client(
                timeout=timeout, follow_redirects=True, headers=_build_headers()
            ) as client:
                response = client.get(url)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(url) from exc
        except httpx.ConnectError as exc:
            if retry_once:
                retry_once = False
                debug_log(f"connect error for {url}, retrying once")
                continue
            raise NetworkError(url, cause=exc.__class__.__name__) from exc
        except httpx.RequestError as exc:
            raise NetworkError(url, cause=exc.__class__.__name__) from exc

        if response.status_code != 200:
            raise HttpStatusError(response.status_code, str(response.url))

        body = response.text
        if not body.strip():
            raise ContentError(str(response.url))
        return body


def fetch_feature_database(
    url: str = FEATURE_DATA_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    version: str | None = None,
) -> FeatureDatabase:
    """Download and parse the published web-features dataset."""
    raw = fetch_feature_data(url, timeout=timeout)
    payload = _decode(raw, url)
    if not isinstance(payload, dict):
        raise ContentError(url)
    database = parse_feature_database(payload, version=version or _digest(raw))
    debug_log(f"fetched {len(database)} features from {url}")
    return database
