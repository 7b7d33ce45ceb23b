"""Shared helpers: errors, HTTP, logging and revision utilities."""
