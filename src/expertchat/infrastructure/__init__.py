"""Infrastructure layer: HTTP clients, session storage and observability."""
