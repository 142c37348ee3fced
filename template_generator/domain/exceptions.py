"""Domain exceptions for the template generator.

Defines the exceptions that represent business rule violations and
processing failures. Presentation layer maps them to HTTP responses in
template_generator.core.exception_handlers.
"""

from typing import Any


class TemplateGeneratorException(Exception):
    """Base exception for all template generator errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return message, error_code and details as a plain dict (for logging)."""
        return {
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ValidationException(TemplateGeneratorException):
    """Raised when input validation fails (missing name, bad upload, empty workbook)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(TemplateGeneratorException):
    """Raised when a requested resource is not found (or is soft-deleted)."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'template').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type.capitalize()} not found",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class TemplateAlreadyExistsException(TemplateGeneratorException):
    """Raised when creating a template whose name is already used by a non-deleted template."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f'A template with the name "{name}" already exists. Please choose a different name.',
            "TEMPLATE_ALREADY_EXISTS",
            {"error": "Duplicate template name", "name": name},
        )


class WorkbookProcessingException(TemplateGeneratorException):
    """Raised when an uploaded workbook cannot be opened or read."""

    def __init__(self, file_name: str, reason: str) -> None:
        super().__init__(
            "Failed to process Excel file",
            "WORKBOOK_PROCESSING_ERROR",
            {"file_name": file_name, "reason": reason},
        )


class UpstreamException(TemplateGeneratorException):
    """Raised when a database or external dependency fails during an operation."""

    def __init__(self, message: str, reason: str | None = None) -> None:
        details = {"reason": reason} if reason else {}
        super().__init__(message, "UPSTREAM_ERROR", details)


class SqlNotConfiguredException(TemplateGeneratorException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class WorkbookReadError(TemplateGeneratorException):
    """Raised by workbook readers when a spreadsheet file cannot be opened or parsed."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to read workbook: {file_path}",
            "WORKBOOK_READ_ERROR",
            {"file_path": file_path, "reason": reason},
        )
