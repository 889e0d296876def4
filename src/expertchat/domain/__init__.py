"""Domain layer: exceptions, payload shapes and ports."""
