"""Shared helpers for command handlers."""
