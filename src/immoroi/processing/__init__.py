"""Numeric helpers shared by the evaluators."""
__all__ = ["compute", "loans"]
