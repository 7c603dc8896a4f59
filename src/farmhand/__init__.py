"""Farm animal record keeping backed by a flat text file."""

__version__ = "0.1.0"
