"""Mindfulness for terminal users: guided breathing sessions, quotes and evening reflection."""

__version__ = "0.1.0"
__all__ = ["__version__"]