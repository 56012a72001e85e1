"""Interactive string operations on an in-memory text buffer, with a console menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]