"""Shared telemetry: logging setup."""

from template_generator.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
