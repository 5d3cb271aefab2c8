"""Shared errors and logging setup."""
