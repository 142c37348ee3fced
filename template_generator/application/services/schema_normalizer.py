"""Repair inferred schemas into the canonical shape the editor and form renderer use.

Both functions never fail and never mutate their input: anything that is not
a usable schema is coerced into an empty object schema. normalize_schema is
idempotent.
"""

import copy
from typing import Any

from template_generator.shared.enums import NormalizationMode


def _unwrap(schema: Any) -> dict[str, Any]:
    """Deep-copy schema, unwrap list-of-records into one record, ensure properties."""
    if not isinstance(schema, dict):
        return {"type": "object", "properties": {}}
    result = copy.deepcopy(schema)
    items = result.get("items")
    if (
        result.get("type") == "array"
        and isinstance(items, dict)
        and items.get("properties") is not None
    ):
        result = {"type": "object", "properties": items["properties"]}
    if not isinstance(result.get("properties"), dict):
        result["properties"] = {}
    return result


def _normalize_property(key: str, prop: Any) -> dict[str, Any]:
    prop = prop if isinstance(prop, dict) else {}
    prop_type = prop.get("type")
    if isinstance(prop_type, list):
        prop_type = next((t for t in prop_type if t != "null"), "string")
        prop["type"] = prop_type
    if prop_type == "integer":
        prop["type"] = prop_type = "number"
    if prop_type == "string" and not prop.get("format"):
        lowered = key.lower()
        if "date" in lowered:
            prop["format"] = "date"
        elif "email" in lowered:
            prop["format"] = "email"
    if not prop.get("title"):
        prop["title"] = key
    return prop


def normalize_schema(schema: Any) -> dict[str, Any]:
    """Return the editable form of schema.

    Unwraps array-of-object schemas, collapses nullable type unions to the
    first non-null tag, maps integer to number, infers date/email formats
    from property keys, and backfills titles.
    """
    result = _unwrap(schema)
    result["properties"] = {
        key: _normalize_property(key, prop)
        for key, prop in result["properties"].items()
    }
    return result


def prepare_for_render(schema: Any) -> dict[str, Any]:
    """Return the renderable form of schema: unwrap and ensure properties only."""
    return _unwrap(schema)


def normalize_for_mode(schema: Any, mode: NormalizationMode) -> dict[str, Any]:
    if mode == NormalizationMode.RENDER:
        return prepare_for_render(schema)
    return normalize_schema(schema)
