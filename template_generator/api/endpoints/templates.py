"""Template API: thin routes delegating to TemplateService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from template_generator.api.dependencies import (
    get_template_service,
    get_template_service_for_write,
)
from template_generator.application.use_cases.templates import TemplateService
from template_generator.core.limiter import limit_writes
from template_generator.schemas.template import (
    TemplateAuditLogResponse,
    TemplateCreateRequest,
    TemplateResponse,
    TemplateWithComponentsResponse,
)
from template_generator.shared.utils.generators import SYSTEM_ACTOR_ID

router = APIRouter()


@router.get("", response_model=list[TemplateResponse])
async def list_templates(
    service: Annotated[TemplateService, Depends(get_template_service)],
):
    """Non-deleted templates, newest first."""
    templates = await service.list_templates()
    return [TemplateResponse.model_validate(t) for t in templates]


@router.get("/{template_id}", response_model=TemplateWithComponentsResponse)
async def get_template(
    template_id: str,
    service: Annotated[TemplateService, Depends(get_template_service)],
):
    """Template with its non-deleted components ordered by order_index."""
    result = await service.get_template(template_id)
    return TemplateWithComponentsResponse.model_validate(result)


@router.post("", response_model=TemplateWithComponentsResponse, status_code=201)
@limit_writes
async def create_template(
    request: Request,
    body: TemplateCreateRequest,
    service: Annotated[TemplateService, Depends(get_template_service_for_write)],
):
    """Create a template and its components in one transaction."""
    result = await service.create_template(body.to_command())
    return TemplateWithComponentsResponse.model_validate(result)


@router.delete("/{template_id}", status_code=204)
@limit_writes
async def delete_template(
    request: Request,
    template_id: str,
    service: Annotated[TemplateService, Depends(get_template_service_for_write)],
    performed_by: Annotated[str | None, Query(max_length=255)] = None,
) -> None:
    """Soft-delete the template and its components."""
    await service.delete_template(template_id, performed_by or SYSTEM_ACTOR_ID)


@router.get("/{template_id}/audit-logs", response_model=list[TemplateAuditLogResponse])
async def list_template_audit_logs(
    template_id: str,
    service: Annotated[TemplateService, Depends(get_template_service)],
):
    """Audit trail of the template, oldest first."""
    entries = await service.list_audit_logs(template_id)
    return [TemplateAuditLogResponse.model_validate(e) for e in entries]
