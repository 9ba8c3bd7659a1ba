"""Application layer: use cases orchestrating entities, repositories and events."""
