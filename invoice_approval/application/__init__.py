"""Application layer: commands, queries, handlers and policies."""
