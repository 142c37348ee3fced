"""Shared utilities."""

from template_generator.shared.utils.generators import (
    SYSTEM_ACTOR_ID,
    generate_cuid,
    generate_upload_filename,
)

__all__ = ["SYSTEM_ACTOR_ID", "generate_cuid", "generate_upload_filename"]
