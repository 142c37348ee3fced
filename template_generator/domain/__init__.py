"""Domain layer: exceptions shared by application and infrastructure.

No dependencies on infrastructure or presentation.
"""

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

__all__ = [
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "TemplateAlreadyExistsException",
    "TemplateGeneratorException",
    "UpstreamException",
    "ValidationException",
    "WorkbookProcessingException",
    "WorkbookReadError",
]
