from __future__ import annotations

from .evaluations import router as evaluations_router
from .loans import router as loans_router

__all__ = ["evaluations_router", "loans_router"]
