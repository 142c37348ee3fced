"""Template generator: spreadsheet upload, JSON Schema inference, and template persistence."""
