"""Pydantic contracts for investment evaluations.

Field names are snake_case in Python and camelCase on the wire
(``purchasePriceCents``, ``cashOnCashReturn`` ...). Either spelling is accepted
on input.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from immoroi.domain.forecast import ForecastPoint
from immoroi.domain.units import Cents, Fraction, Money, Percent
from immoroi.infrastructure.configs import evaluation as evaluation_config


class _Contract(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Recommendation(str, Enum):
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"


class LoanType(str, Enum):
    ANNUITY = "annuity"
    INTEREST_ONLY = "interestOnly"


class CalculationMethod(str, Enum):
    BASIC = "basic"
    ADVANCED = "advanced"


class EvaluationInput(_Contract):
    """Basic evaluation input. All amounts in cents, the rate in percent per year."""

    purchase_price_cents: Cents
    expected_monthly_rent_cents: Cents
    equity_cents: Cents = Cents(0)
    interest_rate_pct: Percent
    loan_term_years: int
    monthly_other_costs_cents: Cents = Cents(0)


class EvaluationOutput(_Contract):
    gross_yield_pct: Percent
    net_yield_pct: Percent
    monthly_cashflow_cents: Cents
    recommendation: Recommendation
    forecast: List[ForecastPoint] = Field(default_factory=list)


class AdvancedEvaluationInput(_Contract):
    """Advanced evaluation input in whole currency units.

    ``interest_rate_pct`` is a percent (3.5 = 3.5 %/year); every other rate is a
    fraction (0.03 = 3 %).
    """

    purchase_price: Money
    monthly_rent: Money
    equity: Money
    interest_rate_pct: Percent
    property_size_sqm: float

    acquisition_cost_rate: Fraction = Fraction(0.0)
    vacancy_rate: Fraction = Fraction(0.0)
    maintenance_rate: Fraction = Fraction(evaluation_config.DEFAULT_MAINTENANCE_RATE)
    property_mgmt_rate: Fraction = Fraction(0.0)
    insurance_and_taxes_annual: Money = Money(0.0)
    loan_type: LoanType = LoanType.ANNUITY
    loan_term_years: int = evaluation_config.DEFAULT_ADVANCED_LOAN_TERM_YEARS
    # Accepted for compatibility; not used in any calculation.
    rate_reset_years: Optional[int] = None
    appreciation_rate: Fraction = Fraction(0.0)
    marginal_tax_rate: Optional[Fraction] = None
    depreciation_annual: Money = Money(0.0)
    other_annual_opex: Money = Money(0.0)
    one_time_costs: Money = Money(0.0)
    finance_costs: bool = False


class AdvancedMetrics(_Contract):
    cash_on_cash_return: Percent
    cap_rate: Percent
    total_roi: Percent = Field(alias="totalROI")
    price_per_sqm: Money
    ltv_ratio: Percent
    dscr: float
    payback_period_years: float


class DetailedBreakdown(_Contract):
    acquisition_costs: Money
    financed_base: Money
    loan_amount: Money
    gross_annual_rent: Money
    economic_vacancy: Money
    effective_gross_income: Money
    maintenance_annual: Money
    property_mgmt_annual: Money
    interest_annual: Money
    repayment_annual: Money
    total_annual_opex: Money
    net_operating_income: Money
    cashflow_annual: Money
    cashflow_after_tax: Money
    tax_annual: Money
    market_value_y1: Money


class AdvancedEvaluationOutput(_Contract):
    gross_yield_pct: Percent
    net_yield_pct: Percent
    monthly_cashflow_cents: float
    recommendation: Recommendation
    metrics: AdvancedMetrics = Field(alias="advancedMetrics")
    breakdown: DetailedBreakdown = Field(alias="detailedBreakdown")


class ROICalculationInput(_Contract):
    """Inputs for the property detail ROI figures, in whole currency units."""

    purchase_price: Money
    market_value: Money
    equity: Money
    loan_principal: Money
    interest_rate_pct: Percent
    amortization_rate_pct: Percent
    monthly_rent: Money
    monthly_expenses: Money
    property_size_sqm: float


class ROICalculationOutput(_Contract):
    """Ratios are fractions here (0.05 = 5 %), unlike the evaluators' percents."""

    cash_on_cash_return: Fraction
    cap_rate: Fraction
    total_roi: Fraction = Field(alias="totalROI")
    price_per_sqm: Money
    monthly_rent: Money
    monthly_expenses: Money
    gross_yield: Fraction
    net_yield: Fraction
    ltv_ratio: Fraction
    dscr: float
    payback_period_years: float


__all__ = [
    "Recommendation",
    "LoanType",
    "CalculationMethod",
    "EvaluationInput",
    "ForecastPoint",
    "EvaluationOutput",
    "AdvancedEvaluationInput",
    "AdvancedMetrics",
    "DetailedBreakdown",
    "AdvancedEvaluationOutput",
    "ROICalculationInput",
    "ROICalculationOutput",
]
