"""Keyspace enumeration and key inspection."""
