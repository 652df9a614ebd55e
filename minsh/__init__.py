"""A minimal interactive shell with completion, highlighting and history."""

__version__ = "0.1.0"