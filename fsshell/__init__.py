"""Interactive shell for basic filesystem operations."""
