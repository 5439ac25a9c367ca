"""Runtime configuration."""
__all__ = ["config", "configs"]
