"""Command-line front end for redis-tui."""
