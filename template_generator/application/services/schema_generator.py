"""Infer a JSON Schema from sampled spreadsheet rows.

Prefers a model-backed inference and falls back to a deterministic
structural schema built from the first sample row. generate() never raises:
every failure of the model path degrades to the fallback.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from template_generator.application.dtos.upload import InferenceResult, SheetRow
from template_generator.application.interfaces.services import ITextGenerator
from template_generator.application.services.json_extractor import parse_json_safely

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 5
DEFAULT_TEMPERATURE = 0.2
DEFAULT_MAX_OUTPUT_TOKENS = 4000

SYSTEM_PROMPT = (
    "You are a helpful AI assistant that generates JSON Schema from data. "
    "Only respond with valid JSON Schema, no explanations."
)

_USER_PROMPT_TEMPLATE = """Generate a JSON Schema for the following data:
{sample}

The schema should follow this format:
{{
  "type": "object",
  "required": [],
  "properties": {{
    "field1": {{ "type": "string", "title": "Field 1" }},
    "field2": {{ "type": "number", "title": "Field 2" }}
  }}
}}

Detect appropriate data types, including strings, numbers, dates, and nested objects or arrays.
Only output valid JSON.
"""


def empty_schema() -> dict[str, Any]:
    return {"type": "object", "properties": {}}


def _json_default(value: Any) -> Any:
    """Serialize cell values json.dumps cannot handle natively."""
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return str(value)


def build_user_prompt(sample: list[SheetRow]) -> str:
    """Render the sample rows into the inference instruction."""
    rendered = json.dumps(sample, indent=2, ensure_ascii=False, default=_json_default)
    return _USER_PROMPT_TEMPLATE.format(sample=rendered)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def build_fallback_schema(rows: list[SheetRow]) -> dict[str, Any]:
    """Structural schema from the first row only. Never fails, never calls the model."""
    if not rows:
        return empty_schema()
    properties: dict[str, Any] = {}
    for key, value in rows[0].items():
        if _is_number(value):
            properties[key] = {"type": "number", "title": key}
        elif isinstance(value, (date, datetime)):
            properties[key] = {"type": "string", "format": "date", "title": key}
        elif isinstance(value, (list, tuple)):
            properties[key] = {"type": "array", "items": {"type": "string"}, "title": key}
        else:
            properties[key] = {"type": "string", "title": key}
    return {"type": "object", "properties": properties}


class SchemaGenerator:
    """Generates component schemas; implements ISchemaGenerator."""

    def __init__(
        self,
        text_generator: ITextGenerator | None,
        *,
        sample_size: int = DEFAULT_SAMPLE_SIZE,
        temperature: float = DEFAULT_TEMPERATURE,
        max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
    ) -> None:
        self.text_generator = text_generator
        self.sample_size = sample_size
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    async def infer(self, rows: list[SheetRow]) -> InferenceResult:
        """Ask the model for a schema. Failures are returned, not raised."""
        if self.text_generator is None:
            return InferenceResult.failed("text generation is not configured")
        sample = rows[: min(self.sample_size, len(rows))]
        try:
            content = await self.text_generator.complete(
                system_prompt=SYSTEM_PROMPT,
                user_prompt=build_user_prompt(sample),
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
            )
        except Exception as e:
            return InferenceResult.failed(f"text generation call failed: {e}")
        parsed = parse_json_safely(content)
        if parsed is None:
            return InferenceResult.failed("model output is not parseable JSON")
        if not isinstance(parsed, dict):
            return InferenceResult.failed(
                f"model output is a JSON {type(parsed).__name__}, not an object"
            )
        return InferenceResult.success(parsed)

    async def generate(self, rows: list[SheetRow]) -> dict[str, Any]:
        """Return a schema for rows; empty rows short-circuit without a model call."""
        if not rows:
            return empty_schema()
        result = await self.infer(rows)
        if result.schema is not None:
            return result.schema
        logger.warning("Schema inference fell back to structural schema: %s", result.failure)
        return build_fallback_schema(rows)
