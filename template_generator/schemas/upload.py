"""Upload API schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UploadSubComponentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    title: str
    schema_json: dict[str, Any]


class UploadComponentResponse(BaseModel):
    """Inferred component; subcomponents only for multi-sheet groups."""

    model_config = ConfigDict(from_attributes=True)

    key: str
    title: str
    schema_json: dict[str, Any]
    subcomponents: list[UploadSubComponentResponse] | None = None


class UploadResponse(BaseModel):
    """Response for POST /upload. Nothing is persisted at this point."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    success: bool = True
    file_name: str = Field(..., alias="fileName")
    components: list[UploadComponentResponse]
