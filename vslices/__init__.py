"""Products and orders HTTP routes built from vertical slices over in-memory storage."""

__version__ = "1.0.0"
__all__ = ["__version__"]