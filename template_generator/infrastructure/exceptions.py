"""Infrastructure exceptions for external operations.

Extend TemplateGeneratorException so presentation can map them to HTTP
responses consistently. The schema generator absorbs TextGenerationException
and falls back to structural inference.
"""

from template_generator.domain.exceptions import TemplateGeneratorException


class TextGenerationException(TemplateGeneratorException):
    """Text-generation call failed (transport error, bad status, empty content)."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        details: dict[str, object] = {"reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"Text generation failed: {reason}",
            "TEXT_GENERATION_ERROR",
            details,
        )


class UploadStorageError(TemplateGeneratorException):
    """Uploaded file could not be written to the uploads directory."""

    def __init__(self, file_name: str, reason: str) -> None:
        super().__init__(
            f"Failed to store uploaded file: {file_name}",
            "UPLOAD_STORAGE_ERROR",
            {"file_name": file_name, "reason": reason},
        )
