"""Shared parsing and formatting helpers."""
