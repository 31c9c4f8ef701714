"""Translate Hack VM push, pop and arithmetic commands into Hack assembly."""

__version__ = "0.1.0"
__all__ = ["__version__"]