"""Event bus adapters and infrastructure event handlers."""
