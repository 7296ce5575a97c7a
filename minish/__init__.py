"""Interactive shell prompt: multi-line command reading and command-line tokenizing."""

__version__ = "0.1.0"
__all__ = ["__version__"]