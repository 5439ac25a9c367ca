"""Basic evaluator: yields, cashflow and forecast from a cents-based input."""
from __future__ import annotations

import logging

from immoroi.domain.evaluation.contracts import EvaluationInput, EvaluationOutput
from immoroi.domain.evaluation.recommendation import recommend_basic
from immoroi.domain.units import Cents, fraction_to_percent, round_half_up
from immoroi.infrastructure.configs import evaluation as evaluation_config
from immoroi.processing.compute import build_amortization_schedule, monthly_rate

LOGGER = logging.getLogger(__name__)


def evaluate_investment(input: EvaluationInput) -> EvaluationOutput:
    price = input.purchase_price_cents
    rent = input.expected_monthly_rent_cents
    other_costs = input.monthly_other_costs_cents
    equity = input.equity_cents
    loan_principal = Cents(max(price - equity, 0))
    r = monthly_rate(input.interest_rate_pct)

    annual_rent = rent * evaluation_config.MONTHS_PER_YEAR
    gross_yield_pct = fraction_to_percent(annual_rent / price)

    # Net yield only takes the first month's interest into account, not the
    # principal part of the debt service.
    first_month_interest = round_half_up(loan_principal * r)
    approx_monthly_net = rent - other_costs - first_month_interest
    net_yield_pct = fraction_to_percent(
        (approx_monthly_net * evaluation_config.MONTHS_PER_YEAR) / price
    )

    # Cashflow subtracts interest only; principal repayment builds equity.
    monthly_interest = round_half_up(loan_principal * r)
    monthly_cashflow = rent - other_costs - monthly_interest

    recommendation = recommend_basic(monthly_cashflow, net_yield_pct)

    forecast = build_amortization_schedule(
        loan_principal,
        input.interest_rate_pct,
        input.loan_term_years,
        Cents(equity),
    )

    LOGGER.debug(
        "Basic evaluation: loan=%s gross=%.2f%% net=%.2f%% cashflow=%s -> %s",
        loan_principal,
        gross_yield_pct,
        net_yield_pct,
        monthly_cashflow,
        recommendation.value,
    )

    return EvaluationOutput(
        gross_yield_pct=gross_yield_pct,
        net_yield_pct=net_yield_pct,
        monthly_cashflow_cents=Cents(monthly_cashflow),
        recommendation=recommendation,
        forecast=forecast,
    )


__all__ = ["evaluate_investment"]
