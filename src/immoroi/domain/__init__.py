"""Domain models and evaluators."""
__all__ = [
    "currency",
    "forecast",
    "evaluation",
    "evaluation_service",
    "units",
]
