"""Value types for the yearly amortization forecast."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from immoroi.domain.units import Cents


class ForecastPoint(BaseModel):
    """One projected loan year. ``net_worth_cents`` is equity plus principal repaid so far."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    year: int
    remaining_principal_cents: Cents
    interest_paid_cents: Cents
    principal_paid_cents: Cents
    net_worth_cents: Cents


__all__ = ["ForecastPoint"]
