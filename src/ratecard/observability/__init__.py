"""Logging and observability helpers."""
