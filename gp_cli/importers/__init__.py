"""Data importers."""
