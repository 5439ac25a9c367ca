"""ROI figures for an owned property, computed from already known numbers.

Independent of the evaluators. Ratios are returned as fractions, so a 5 %
cap rate comes back as ``0.05``.
"""
from __future__ import annotations

from immoroi.domain.evaluation.contracts import ROICalculationInput, ROICalculationOutput
from immoroi.infrastructure.configs import evaluation as evaluation_config
from immoroi.processing.compute import monthly_rate

_MONTHS = evaluation_config.MONTHS_PER_YEAR


def _safe_div(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def calculate_roi(data: ROICalculationInput) -> ROICalculationOutput:
    annual_rent = data.monthly_rent * _MONTHS
    annual_expenses = data.monthly_expenses * _MONTHS
    net_operating_income = annual_rent - annual_expenses
    appreciation = data.market_value - data.purchase_price

    if data.loan_principal > 0:
        monthly_debt_service = data.loan_principal * monthly_rate(
            data.interest_rate_pct
        ) + data.loan_principal * monthly_rate(data.amortization_rate_pct)
    else:
        monthly_debt_service = 0.0
    annual_debt_service = monthly_debt_service * _MONTHS

    return ROICalculationOutput(
        cash_on_cash_return=_safe_div(net_operating_income, data.equity),
        cap_rate=_safe_div(net_operating_income, data.market_value),
        total_roi=_safe_div(net_operating_income + appreciation, data.equity),
        price_per_sqm=_safe_div(data.purchase_price, data.property_size_sqm),
        monthly_rent=data.monthly_rent,
        monthly_expenses=data.monthly_expenses,
        gross_yield=_safe_div(annual_rent, data.purchase_price),
        net_yield=_safe_div(net_operating_income, data.purchase_price),
        ltv_ratio=_safe_div(data.loan_principal, data.market_value),
        dscr=_safe_div(net_operating_income, annual_debt_service),
        payback_period_years=_safe_div(data.equity, net_operating_income),
    )


__all__ = ["calculate_roi"]
