"""Golf practice session logging CLI."""

__version__ = "0.1.0"
