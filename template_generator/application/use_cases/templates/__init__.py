"""Template use cases."""

from template_generator.application.use_cases.templates.template_operations import (
    TemplateService,
    validate_template_create,
)

__all__ = ["TemplateService", "validate_template_create"]
