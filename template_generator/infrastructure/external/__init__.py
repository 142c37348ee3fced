"""Adapters for external collaborators: text generation, spreadsheets, upload storage."""
