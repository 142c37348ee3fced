"""Upload API: accept a spreadsheet, return inferred components for review (nothing persisted)."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Request, UploadFile

from template_generator.api.dependencies import (
    get_process_workbook_use_case,
    get_upload_storage,
)
from template_generator.application.use_cases.uploads import ProcessWorkbookUseCase
from template_generator.core.config import Settings, get_settings
from template_generator.core.limiter import limit_upload
from template_generator.domain.exceptions import ValidationException
from template_generator.infrastructure.external.storage import UploadStorage
from template_generator.schemas.upload import UploadComponentResponse, UploadResponse

router = APIRouter()


def _validate_upload(file: UploadFile | None, settings: Settings) -> UploadFile:
    if file is None or not file.filename:
        raise ValidationException("No file uploaded", field="file")
    if file.content_type not in settings.get_allowed_upload_mime_types():
        raise ValidationException("Only Excel files are allowed", field="file")
    if file.size is not None and file.size > settings.max_upload_size:
        raise ValidationException("File upload error: File too large", field="file")
    return file


@router.post("", response_model=UploadResponse)
@limit_upload
async def upload_file(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    use_case: Annotated[ProcessWorkbookUseCase, Depends(get_process_workbook_use_case)],
    storage: Annotated[UploadStorage, Depends(get_upload_storage)],
    file: Annotated[UploadFile | None, File()] = None,
) -> UploadResponse:
    """Store the workbook, infer one component per sheet or sheet group, remove the file."""
    upload = _validate_upload(file, settings)
    stored_path = await storage.save(upload)
    try:
        result = await use_case.process(str(stored_path), upload.filename or stored_path.name)
    finally:
        await storage.delete(stored_path)
    return UploadResponse(
        file_name=result.file_name,
        components=[UploadComponentResponse.model_validate(c) for c in result.components],
    )
