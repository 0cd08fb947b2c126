"""Invoice approval service."""
