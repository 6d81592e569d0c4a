"""Core models, configuration and interfaces for redis-tui."""
