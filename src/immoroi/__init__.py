"""Investment evaluation engine for rental properties."""

__version__ = "0.1.0"

__all__ = ["domain", "infrastructure", "processing"]
