"""Infrastructure: connection building for redis-tui."""
