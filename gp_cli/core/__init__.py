"""Core models, configuration and storage."""
