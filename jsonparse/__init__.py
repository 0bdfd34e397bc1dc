"""A small JSON parser with one parsing function per value kind, and a command-line validator."""

__version__ = "0.1.0"
__all__ = ["__version__"]