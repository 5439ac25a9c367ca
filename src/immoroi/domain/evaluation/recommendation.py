"""Buy / don't-buy policy for the evaluators."""
from __future__ import annotations

from immoroi.domain.evaluation.contracts import Recommendation
from immoroi.infrastructure.configs import evaluation as evaluation_config

def recommend_basic(monthly_cashflow_cents: int, net_yield_pct: float) -> Recommendation:
    """GREEN when cashflow is non-negative and the net yield reaches the threshold."""

    if (
        monthly_cashflow_cents >= evaluation_config.BASIC_MIN_MONTHLY_CASHFLOW_CENTS
        and net_yield_pct >= evaluation_config.BASIC_MIN_NET_YIELD_PCT
    ):
        return Recommendation.GREEN
    return Recommendation.RED

def recommend_advanced(
    cash_on_cash_return: float,
    dscr: float,
    cashflow_after_tax: float,
    net_yield_pct: float,
) -> Recommendation:
    """GREEN only when every threshold is strictly exceeded."""

    if (
        cash_on_cash_return > evaluation_config.ADVANCED_MIN_CASH_ON_CASH_PCT
        and dscr > evaluation_config.ADVANCED_MIN_DSCR
        and cashflow_after_tax > evaluation_config.ADVANCED_MIN_CASHFLOW_AFTER_TAX
        and net_yield_pct > evaluation_config.ADVANCED_MIN_NET_YIELD_PCT
    ):
        return Recommendation.GREEN
    return Recommendation.RED


__all__ = ["recommend_basic", "recommend_advanced"]
