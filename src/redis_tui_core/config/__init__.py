"""Configuration for redis-tui."""
