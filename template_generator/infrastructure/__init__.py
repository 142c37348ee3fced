"""Infrastructure: persistence and adapters for external collaborators."""
