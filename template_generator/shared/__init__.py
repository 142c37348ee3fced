"""Shared: enums, utilities, and logging used across layers."""
