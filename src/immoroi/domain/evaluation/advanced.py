"""Advanced evaluator.

Works in whole currency units and adds acquisition and one-time costs,
vacancy, operating expenses, loan type, appreciation and income tax on top of
the basic evaluation. Interest is a flat first-year figure
(``loan_amount × rate``), not taken from an amortization schedule.
"""
from __future__ import annotations

import logging

from immoroi.domain.evaluation.contracts import (
    AdvancedEvaluationInput,
    AdvancedEvaluationOutput,
    AdvancedMetrics,
    DetailedBreakdown,
    LoanType,
)
from immoroi.domain.evaluation.recommendation import recommend_advanced
from immoroi.domain.units import fraction_to_percent, from_cents, percent_to_fraction
from immoroi.infrastructure.configs import evaluation as evaluation_config
from immoroi.processing.compute import annuity_payment

LOGGER = logging.getLogger(__name__)

_MONTHS = evaluation_config.MONTHS_PER_YEAR


def _ratio(numerator: float, denominator: float, scale: float = 1.0) -> float:
    """``numerator / denominator × scale``, or 0 when the denominator is not positive."""
    if denominator <= 0:
        return 0.0
    return (numerator / denominator) * scale


def _annual_repayment(data: AdvancedEvaluationInput, loan_amount: float, interest_annual: float) -> float:
    if data.loan_type is LoanType.INTEREST_ONLY or loan_amount <= 0:
        return 0.0
    # Annuity is computed in cents and converted back, so it is exact to the cent.
    monthly_annuity = from_cents(
        annuity_payment(loan_amount * 100, data.interest_rate_pct, data.loan_term_years * _MONTHS)
    )
    return max(0.0, monthly_annuity * _MONTHS - interest_annual)


def calculate_advanced_roi(data: AdvancedEvaluationInput) -> AdvancedEvaluationOutput:
    price = data.purchase_price

    acquisition_costs = price * data.acquisition_cost_rate
    financed_base = (
        price + acquisition_costs + data.one_time_costs if data.finance_costs else price
    )
    loan_amount = max(0.0, financed_base - data.equity)

    gross_annual_rent = data.monthly_rent * _MONTHS
    economic_vacancy = gross_annual_rent * data.vacancy_rate
    effective_gross_income = gross_annual_rent - economic_vacancy

    maintenance_annual = price * data.maintenance_rate
    property_mgmt_annual = gross_annual_rent * data.property_mgmt_rate
    total_annual_opex = (
        maintenance_annual
        + property_mgmt_annual
        + data.insurance_and_taxes_annual
        + data.other_annual_opex
    )

    interest_annual = loan_amount * percent_to_fraction(data.interest_rate_pct)
    repayment_annual = _annual_repayment(data, loan_amount, interest_annual)

    net_operating_income = effective_gross_income - total_annual_opex
    cashflow_annual = net_operating_income - interest_annual - repayment_annual

    tax_annual = 0.0
    cashflow_after_tax = cashflow_annual
    if data.marginal_tax_rate is not None and data.marginal_tax_rate > 0:
        taxable_income = max(
            0.0, net_operating_income - interest_annual - data.depreciation_annual
        )
        tax_annual = taxable_income * data.marginal_tax_rate
        cashflow_after_tax = cashflow_annual - tax_annual

    market_value_y1 = price * (1 + data.appreciation_rate)
    total_investment = data.equity + acquisition_costs + data.one_time_costs
    annual_debt_service = interest_annual + repayment_annual

    gross_yield_pct = fraction_to_percent(gross_annual_rent / price)
    net_yield_pct = fraction_to_percent(net_operating_income / price)
    monthly_cashflow_cents = cashflow_after_tax * 100 / _MONTHS

    metrics = AdvancedMetrics(
        cash_on_cash_return=_ratio(cashflow_after_tax, total_investment, 100),
        cap_rate=_ratio(net_operating_income, market_value_y1, 100),
        total_roi=_ratio(cashflow_after_tax + (market_value_y1 - price), total_investment, 100),
        price_per_sqm=_ratio(price, data.property_size_sqm),
        ltv_ratio=_ratio(loan_amount, market_value_y1, 100),
        dscr=_ratio(net_operating_income, annual_debt_service),
        # 0 when cashflow after tax is not positive.
        payback_period_years=_ratio(total_investment, cashflow_after_tax),
    )

    recommendation = recommend_advanced(
        metrics.cash_on_cash_return,
        metrics.dscr,
        cashflow_after_tax,
        net_yield_pct,
    )

    LOGGER.debug(
        "Advanced evaluation: loan=%.2f noi=%.2f cf_after_tax=%.2f coc=%.2f%% dscr=%.2f -> %s",
        loan_amount,
        net_operating_income,
        cashflow_after_tax,
        metrics.cash_on_cash_return,
        metrics.dscr,
        recommendation.value,
    )

    return AdvancedEvaluationOutput(
        gross_yield_pct=gross_yield_pct,
        net_yield_pct=net_yield_pct,
        monthly_cashflow_cents=monthly_cashflow_cents,
        recommendation=recommendation,
        metrics=metrics,
        breakdown=DetailedBreakdown(
            acquisition_costs=acquisition_costs,
            financed_base=financed_base,
            loan_amount=loan_amount,
            gross_annual_rent=gross_annual_rent,
            economic_vacancy=economic_vacancy,
            effective_gross_income=effective_gross_income,
            maintenance_annual=maintenance_annual,
            property_mgmt_annual=property_mgmt_annual,
            interest_annual=interest_annual,
            repayment_annual=repayment_annual,
            total_annual_opex=total_annual_opex,
            net_operating_income=net_operating_income,
            cashflow_annual=cashflow_annual,
            cashflow_after_tax=cashflow_after_tax,
            tax_annual=tax_annual,
            market_value_y1=market_value_y1,
        ),
    )


__all__ = ["calculate_advanced_roi"]
