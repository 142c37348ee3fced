"""Tests for domain and infrastructure exceptions (error_code, message, details)."""

from template_generator.domain.exceptions import (
    ResourceNotFoundException,
    SqlNotConfiguredException,
    TemplateAlreadyExistsException,
    TemplateGeneratorException,
    UpstreamException,
    ValidationException,
    WorkbookProcessingException,
    WorkbookReadError,
)
from template_generator.infrastructure.exceptions import (
    TextGenerationException,
    UploadStorageError,
)


def test_base_exception_default_error_code() -> None:
    exc = TemplateGeneratorException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TemplateGeneratorException"
    assert exc.details == {}
    assert exc.to_dict() == {
        "message": "Something failed",
        "error_code": "TemplateGeneratorException",
        "details": {},
    }


def test_validation_exception_field() -> None:
    exc = ValidationException("Template name is required", field="name")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "name"}
    assert ValidationException("x").details == {}


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("template", "abc")
    assert exc.message == "Template not found"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "template", "resource_id": "abc"}


def test_template_already_exists() -> None:
    exc = TemplateAlreadyExistsException("Payroll")
    assert exc.error_code == "TEMPLATE_ALREADY_EXISTS"
    assert '"Payroll"' in exc.message
    assert exc.details["error"] == "Duplicate template name"


def test_workbook_errors() -> None:
    processing = WorkbookProcessingException("a.xlsx", "bad zip")
    assert processing.message == "Failed to process Excel file"
    assert processing.details == {"file_name": "a.xlsx", "reason": "bad zip"}
    read = WorkbookReadError("/tmp/a.xlsx", "bad zip")
    assert read.error_code == "WORKBOOK_READ_ERROR"


def test_upstream_and_sql_not_configured() -> None:
    assert UpstreamException("Database failure", reason="timeout").details == {"reason": "timeout"}
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


def test_infrastructure_exceptions_share_base() -> None:
    text = TextGenerationException("API error: 429", status_code=429)
    assert isinstance(text, TemplateGeneratorException)
    assert text.details == {"reason": "API error: 429", "status_code": 429}
    storage = UploadStorageError("a.xlsx", "disk full")
    assert storage.error_code == "UPLOAD_STORAGE_ERROR"
