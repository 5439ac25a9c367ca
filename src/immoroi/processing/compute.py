# compute.py
from __future__ import annotations

import logging
from typing import List

from immoroi.domain.forecast import ForecastPoint
from immoroi.domain.units import (
    Cents,
    Fraction,
    Number,
    Percent,
    percent_to_fraction,
    round_half_up,
)
from immoroi.infrastructure.configs import evaluation as evaluation_config

LOGGER = logging.getLogger(__name__)


def monthly_rate(annual_rate_pct: Percent) -> Fraction:
    return Fraction(percent_to_fraction(annual_rate_pct) / evaluation_config.MONTHS_PER_YEAR)


def annuity_payment(principal: Number, annual_rate_pct: Percent, months: int) -> int:
    """Fixed monthly payment that fully amortizes ``principal`` over ``months``.

    The result is rounded to whole units of whatever ``principal`` is expressed
    in, so pass cents to get cents back.
    """
    r = monthly_rate(annual_rate_pct)
    if r == 0:
        return round_half_up(principal / months)
    payment = (principal * r) / (1 - (1 + r) ** -months)
    return round_half_up(payment)


def build_amortization_schedule(
    principal_cents: Cents,
    annual_rate_pct: Percent,
    term_years: int,
    equity_cents: Cents = Cents(0),
) -> List[ForecastPoint]:
    """Year-by-year split of interest and principal, capped at the forecast horizon."""
    r = monthly_rate(annual_rate_pct)
    months_total = term_years * evaluation_config.MONTHS_PER_YEAR
    debt_service = annuity_payment(principal_cents, annual_rate_pct, months_total)
    horizon = min(evaluation_config.FORECAST_HORIZON_YEARS, term_years)

    forecast: List[ForecastPoint] = []
    remaining = principal_cents
    for year in range(1, horizon + 1):
        interest_paid = 0
        principal_paid = 0
        for _ in range(evaluation_config.MONTHS_PER_YEAR):
            if remaining <= 0:
                break
            interest = round_half_up(remaining * r)
            principal = min(debt_service - interest, remaining)
            interest_paid += interest
            principal_paid += principal
            remaining -= principal
        forecast.append(
            ForecastPoint(
                year=year,
                remaining_principal_cents=max(remaining, 0),
                interest_paid_cents=interest_paid,
                principal_paid_cents=principal_paid,
                net_worth_cents=equity_cents + (principal_cents - remaining),
            )
        )

    LOGGER.debug(
        "Amortization schedule: principal=%s rate=%s%% years=%s -> %s points",
        principal_cents,
        annual_rate_pct,
        term_years,
        len(forecast),
    )
    return forecast


__all__ = ["monthly_rate", "annuity_payment", "build_amortization_schedule"]
