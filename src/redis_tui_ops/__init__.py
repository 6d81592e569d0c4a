"""Keyspace, server info and command operations for redis-tui."""
