"""Schema normalization API schemas."""

from typing import Any

from pydantic import BaseModel, Field

from template_generator.shared.enums import NormalizationMode


class NormalizeSchemaRequest(BaseModel):
    """Body for POST /schemas/normalize. schema_json may be any JSON value."""

    schema_json: Any = None
    mode: NormalizationMode = Field(
        default=NormalizationMode.EDIT,
        description="edit: full property normalization; render: unwrap and ensure properties only",
    )


class NormalizeSchemaResponse(BaseModel):
    schema_json: dict[str, Any]
