"""Schema normalization API: clean up edited or stored schemas before editing or rendering."""

from fastapi import APIRouter

from template_generator.application.services.schema_normalizer import normalize_for_mode
from template_generator.schemas.schema_json import (
    NormalizeSchemaRequest,
    NormalizeSchemaResponse,
)

router = APIRouter()


@router.post("/normalize", response_model=NormalizeSchemaResponse)
async def normalize(body: NormalizeSchemaRequest) -> NormalizeSchemaResponse:
    return NormalizeSchemaResponse(schema_json=normalize_for_mode(body.schema_json, body.mode))
