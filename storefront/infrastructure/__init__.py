"""Infrastructure layer: repositories and the HTTP API."""
