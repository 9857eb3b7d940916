"""Shared helpers used across the CLI and the versioning package."""
