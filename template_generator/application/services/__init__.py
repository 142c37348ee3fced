"""Application services: pure schema inference, grouping, and normalization logic."""

from template_generator.application.services.json_extractor import (
    extract_json_from_text,
    parse_json_safely,
)
from template_generator.application.services.schema_generator import (
    SchemaGenerator,
    build_fallback_schema,
)
from template_generator.application.services.schema_normalizer import (
    normalize_schema,
    prepare_for_render,
)
from template_generator.application.services.sheet_grouper import (
    component_key,
    group_base_name,
    group_sheets,
)

__all__ = [
    "SchemaGenerator",
    "build_fallback_schema",
    "component_key",
    "extract_json_from_text",
    "group_base_name",
    "group_sheets",
    "normalize_schema",
    "parse_json_safely",
    "prepare_for_render",
]
