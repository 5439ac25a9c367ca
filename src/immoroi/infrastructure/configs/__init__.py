"""Named tuning constants, one module per concern."""
__all__ = ["evaluation"]
