"""Infrastructure adapters: persistence, events and logging."""
