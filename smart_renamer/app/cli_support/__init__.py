"""Argument parser construction for the CLI."""
