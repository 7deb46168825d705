"""Lookup tables mapping syntactic tokens to feature ids."""

from __future__ import annotations

from .model import FeatureDatabase, LookupTables
from .util.debug import debug_log

_CSS_PROPERTY_PREFIX = "css.properties."
_CSS_AT_RULE_PREFIX = "css.at-rules."
_HTML_ELEMENT_PREFIX = "html.elements."
_GLOBAL_ATTRIBUTE_PREFIXES = ("html.global_attributes.", "html.attributes.")


def _add_element_key(tables: LookupTables, rest: str, feature_id: str) -> None:
    parts = rest.split(".")
    tag = parts[0].lower()
    if not tag:
        return
    if len(parts) == 1:
        tables.html_tags[tag] = feature_id
        return

    # Both tag.attributes.attr[.value] and tag.attr[.value] occur in the data.
    if parts[1] == "attributes" and len(parts) >= 3:
        attr, value = parts[2], parts[3] if len(parts) > 3 else ""
    else:
        attr, value = parts[1], parts[2] if len(parts) > 2 else ""
    attr, value = attr.lower(), value.lower()

    if attr and value:
        tables.html_tag_attr_values[f"{tag}:{attr}:{value}"] = feature_id
    elif attr:
        tables.html_tag_attrs[f"{tag}:{attr}"] = feature_id


def _add_key(tables: LookupTables, key: str, feature_id: str) -> bool:
    if key.startswith(_CSS_PROPERTY_PREFIX):
        tables.css[key[len(_CSS_PROPERTY_PREFIX) :].lower()] = feature_id
        return True
    if key.startswith(_CSS_AT_RULE_PREFIX):
        tables.css["@" + key[len(_CSS_AT_RULE_PREFIX) :].lower()] = feature_id
        return True
    if key.startswith(_HTML_ELEMENT_PREFIX):
        _add_element_key(tables, key[len(_HTML_ELEMENT_PREFIX) :], feature_id)
        return True
    for prefix in _GLOBAL_ATTRIBUTE_PREFIXES:
        if key.startswith(prefix):
            attr = key[len(prefix) :].split(".")[0].lower()
            if attr:
                tables.html_global_attrs[attr] = feature_id
            return True
    return False


def build_lookup_tables(database: FeatureDatabase) -> LookupTables:
    """Index every compatibility key of every feature.

    Later features overwrite earlier ones that claim the same key, so the result
    depends only on dataset order. Unknown key namespaces are ignored.
    """
    tables = LookupTables()
    skipped = 0
    for record in database:
        for key in record.compat_features:
            if not _add_key(tables, key, record.feature_id):
                skipped += 1
    if skipped:
        debug_log(f"ignored {skipped} compat keys outside css/html namespaces")
    return tables


class FeatureIndex:
    """Cache of lookup tables, rebuilt when the dataset version changes.

    Unversioned databases are cached by identity instead.
    """

    def __init__(self) -> None:
        self._version: str | None = None
        self._database: FeatureDatabase | None = None
        self._tables: LookupTables | None = None

    @property
    def version(self) -> str | None:
        return self._version

    def _is_stale(self, database: FeatureDatabase) -> bool:
        if self._tables is None or self._version != database.version:
            return True
        return not database.version and database is not self._database

    def tables(self, database: FeatureDatabase) -> LookupTables:
        if self._is_stale(database):
            debug_log(f"building lookup tables for dataset version {database.version!r}")
            self._tables = build_lookup_tables(database)
            self._version = database.version
            self._database = database
        return self._tables

    def invalidate(self) -> None:
        self._version = None
        self._database = None
        self._tables = None
