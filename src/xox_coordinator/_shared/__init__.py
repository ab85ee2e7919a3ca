# Area: Shared
"""Shared infrastructure: logging setup and session broadcasts."""
