"""Upload use cases."""

from template_generator.application.use_cases.uploads.process_workbook import (
    ProcessWorkbookUseCase,
)

__all__ = ["ProcessWorkbookUseCase"]
