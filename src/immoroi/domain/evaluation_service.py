"""Entry point for running evaluations from loosely typed request payloads.

The API (and tests) hand over the raw JSON body. Amounts may arrive in whole
francs (``purchasePrice``) or in cents (``purchasePriceCents``); whole francs
win when both are present. ``calculationMethod`` picks the evaluator.

Payloads are range-checked here, before an evaluator runs: numbers must be
finite and of sane magnitude, the purchase price positive, the loan term
between 1 and ``MAX_LOAN_TERM_YEARS`` and the interest rate non-negative. The
evaluators themselves do not validate.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from immoroi.domain.evaluation import (
    AdvancedEvaluationInput,
    AdvancedEvaluationOutput,
    AdvancedMetrics,
    CalculationMethod,
    DetailedBreakdown,
    EvaluationInput,
    EvaluationOutput,
    ForecastPoint,
    LoanType,
    Recommendation,
    ROICalculationInput,
    ROICalculationOutput,
    calculate_advanced_roi,
    calculate_roi,
    evaluate_investment,
)
from immoroi.domain.units import from_cents, to_cents
from immoroi.infrastructure.configs import evaluation as evaluation_config

LOGGER = logging.getLogger(__name__)


class EvaluationError(ValueError):
    """Raised when a payload cannot be turned into an evaluation."""


class UnsupportedCalculationMethod(EvaluationError):
    def __init__(self, method: str) -> None:
        super().__init__(f"Unsupported calculationMethod: {method!r}")
        self.method = method


class InvalidPayload(EvaluationError):
    """A payload field is missing, non-finite or out of range."""

    def __init__(self, field: str, problem: str) -> None:
        super().__init__(f"{field} {problem}")
        self.field = field


def _clean_number_text(text: str) -> str:
    # Thousand separators seen in CH/NO input: spaces, NBSP, apostrophes.
    for sep in (" ", "\u00a0", "\u202f", "'", "\u2019"):
        text = text.replace(sep, "")
    if "," in text and "." in text:
        # The separator that comes last is the decimal one: 1,234.5 / 1.234,5
        if text.rfind(",") > text.rfind("."):
            text = text.replace(".", "").replace(",", ".")
        else:
            text = text.replace(",", "")
    else:
        text = text.replace(",", ".")
    return text


def as_float(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(_clean_number_text(value))
        except ValueError:
            return default
    return default


def as_int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        try:
            number = float(_clean_number_text(value))
        except ValueError:
            return default
        return int(number) if math.isfinite(number) else default
    return default


def as_opt_float(value: Any) -> Optional[float]:
    candidate = as_float(value, default=float("nan"))
    return None if candidate != candidate else candidate  # NaN check


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in {"", "0", "false", "no", "off"}
    return bool(value)


def _checked(field: str, value: float) -> float:
    """``value`` unchanged, or ``InvalidPayload`` when it is not finite or too large."""
    if not math.isfinite(value):
        raise InvalidPayload(field, "must be a finite number")
    if abs(value) > evaluation_config.MAX_INPUT_MAGNITUDE:
        raise InvalidPayload(field, "is out of range")
    return value


def _truthy_number(params: Mapping[str, Any], key: str) -> Optional[float]:
    """Value of ``key`` when it is a non-zero number, else ``None``."""
    number = as_opt_float(params.get(key))
    if number is None or number == 0:
        return None
    return number


def _major_units(
    params: Mapping[str, Any], key: str, cents_key: str, default: float = 0.0
) -> float:
    """Whole-unit amount from ``key``, falling back to ``cents_key`` / 100."""
    value = _truthy_number(params, key)
    if value is not None:
        return _checked(key, value)
    cents = _truthy_number(params, cents_key)
    if cents is not None:
        return from_cents(_checked(cents_key, cents))
    return default


def calculation_method_of(params: Mapping[str, Any]) -> CalculationMethod:
    raw = params.get("calculationMethod") or CalculationMethod.BASIC.value
    try:
        return CalculationMethod(str(raw).strip())
    except ValueError as exc:
        raise UnsupportedCalculationMethod(str(raw)) from exc


def _loan_term_years(params: Mapping[str, Any], default_term: int) -> int:
    term = int(_checked("loanTermYears", as_float(params.get("loanTermYears")))) or default_term
    if not 1 <= term <= evaluation_config.MAX_LOAN_TERM_YEARS:
        raise InvalidPayload(
            "loanTermYears",
            f"must be between 1 and {evaluation_config.MAX_LOAN_TERM_YEARS}",
        )
    return term


def normalise_payload(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Common fields in whole currency units, resolved from either spelling.

    Raises ``InvalidPayload`` for a price below one cent, a term outside
    1..``MAX_LOAN_TERM_YEARS``, a negative interest rate or a non-finite number.
    """
    method = calculation_method_of(params)
    default_term = (
        evaluation_config.DEFAULT_ADVANCED_LOAN_TERM_YEARS
        if method is CalculationMethod.ADVANCED
        else evaluation_config.DEFAULT_BASIC_LOAN_TERM_YEARS
    )

    price = _major_units(params, "purchasePrice", "purchasePriceCents")
    if to_cents(price) <= 0:
        raise InvalidPayload("purchasePrice", "must be greater than zero")

    interest = _truthy_number(params, "interestRate")
    if interest is None:
        interest = as_float(params.get("interestRatePct"))
    if _checked("interestRate", interest) < 0:
        raise InvalidPayload("interestRate", "must not be negative")

    return {
        "calculationMethod": method.value,
        "purchasePrice": price,
        "expectedMonthlyRent": _major_units(
            params, "expectedMonthlyRent", "expectedMonthlyRentCents"
        ),
        "equity": _major_units(params, "equity", "equityCents"),
        "interestRate": interest,
        "loanTermYears": _loan_term_years(params, default_term),
        "monthlyOtherCosts": _major_units(
            params, "operatingMonthlyExpenses", "monthlyOtherCostsCents"
        ),
    }


def basic_input_from_payload(params: Mapping[str, Any]) -> EvaluationInput:
    normalised = normalise_payload(params)
    return EvaluationInput(
        purchase_price_cents=to_cents(normalised["purchasePrice"]),
        expected_monthly_rent_cents=to_cents(normalised["expectedMonthlyRent"]),
        equity_cents=to_cents(normalised["equity"]),
        interest_rate_pct=normalised["interestRate"],
        loan_term_years=normalised["loanTermYears"],
        monthly_other_costs_cents=to_cents(normalised["monthlyOtherCosts"]),
    )


def advanced_input_from_payload(params: Mapping[str, Any]) -> AdvancedEvaluationInput:
    normalised = normalise_payload(params)

    def number(key: str) -> float:
        return _checked(key, as_float(params.get(key)))

    def optional_number(key: str) -> Optional[float]:
        value = _truthy_number(params, key)
        return None if value is None else _checked(key, value)

    rate_reset = optional_number("rateResetYears")
    loan_type = params.get("loanType") or LoanType.ANNUITY.value
    return AdvancedEvaluationInput(
        purchase_price=normalised["purchasePrice"],
        monthly_rent=normalised["expectedMonthlyRent"],
        equity=normalised["equity"],
        interest_rate_pct=normalised["interestRate"],
        property_size_sqm=optional_number("propertySizeSqm")
        or evaluation_config.DEFAULT_PROPERTY_SIZE_SQM,
        acquisition_cost_rate=number("acquisitionCostRate"),
        vacancy_rate=number("vacancyRate"),
        maintenance_rate=optional_number("maintenanceRate")
        or evaluation_config.DEFAULT_MAINTENANCE_RATE,
        property_mgmt_rate=number("propertyMgmtRate"),
        insurance_and_taxes_annual=number("insuranceAndTaxesAnnual"),
        loan_type=loan_type,
        loan_term_years=normalised["loanTermYears"],
        rate_reset_years=int(rate_reset) if rate_reset is not None else None,
        appreciation_rate=number("appreciationRate"),
        marginal_tax_rate=optional_number("marginalTaxRate"),
        depreciation_annual=number("depreciationAnnual"),
        other_annual_opex=number("otherAnnualOpex"),
        one_time_costs=number("oneTimeCosts"),
        finance_costs=as_bool(params.get("financeCosts")),
    )


@dataclass
class EvaluationResult:
    calculation_method: CalculationMethod
    gross_yield_pct: float
    net_yield_pct: float
    monthly_cashflow_cents: float
    recommendation: Recommendation
    breakdown: DetailedBreakdown
    forecast: List[ForecastPoint]
    metrics: Optional[AdvancedMetrics] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape returned by the API (camelCase, as stored by clients)."""
        payload: Dict[str, Any] = {
            "calculationMethod": self.calculation_method.value,
            "grossYieldPct": self.gross_yield_pct,
            "netYieldPct": self.net_yield_pct,
            "monthlyCashflowCents": self.monthly_cashflow_cents,
            "recommendation": self.recommendation.value,
        }
        if self.calculation_method is CalculationMethod.BASIC:
            payload["forecast"] = [point.model_dump(by_alias=True) for point in self.forecast]
        if self.metrics is not None:
            payload["advancedMetrics"] = self.metrics.model_dump(by_alias=True)
        payload["detailedBreakdown"] = self.breakdown.model_dump(by_alias=True)
        return payload


def basic_breakdown(data: EvaluationInput, output: EvaluationOutput) -> DetailedBreakdown:
    """Breakdown for a basic evaluation, in whole currency units.

    The basic evaluator has no acquisition costs, vacancy or tax, so those are
    zero and the financed base is the purchase price.
    """
    price = from_cents(data.purchase_price_cents)
    equity = from_cents(data.equity_cents)
    annual_rent = from_cents(data.expected_monthly_rent_cents) * evaluation_config.MONTHS_PER_YEAR
    annual_other_costs = (
        from_cents(data.monthly_other_costs_cents) * evaluation_config.MONTHS_PER_YEAR
    )
    loan_amount = max(price - equity, 0.0)
    interest_annual = loan_amount * (data.interest_rate_pct / 100 / 12) * 12
    cashflow_annual = from_cents(output.monthly_cashflow_cents) * evaluation_config.MONTHS_PER_YEAR
    return DetailedBreakdown(
        acquisition_costs=0.0,
        financed_base=price,
        loan_amount=loan_amount,
        gross_annual_rent=annual_rent,
        economic_vacancy=0.0,
        effective_gross_income=annual_rent,
        maintenance_annual=0.0,
        property_mgmt_annual=0.0,
        interest_annual=interest_annual,
        repayment_annual=0.0,
        total_annual_opex=annual_other_costs,
        net_operating_income=annual_rent - annual_other_costs,
        cashflow_annual=cashflow_annual,
        cashflow_after_tax=cashflow_annual,
        tax_annual=0.0,
        market_value_y1=price,
    )


def _run_basic(params: Mapping[str, Any]) -> EvaluationResult:
    data = basic_input_from_payload(params)
    output = evaluate_investment(data)
    return EvaluationResult(
        calculation_method=CalculationMethod.BASIC,
        gross_yield_pct=output.gross_yield_pct,
        net_yield_pct=output.net_yield_pct,
        monthly_cashflow_cents=output.monthly_cashflow_cents,
        recommendation=output.recommendation,
        breakdown=basic_breakdown(data, output),
        forecast=list(output.forecast),
    )


def _run_advanced(params: Mapping[str, Any]) -> EvaluationResult:
    data = advanced_input_from_payload(params)
    output: AdvancedEvaluationOutput = calculate_advanced_roi(data)
    return EvaluationResult(
        calculation_method=CalculationMethod.ADVANCED,
        gross_yield_pct=output.gross_yield_pct,
        net_yield_pct=output.net_yield_pct,
        monthly_cashflow_cents=output.monthly_cashflow_cents,
        recommendation=output.recommendation,
        breakdown=output.breakdown,
        forecast=[],
        metrics=output.metrics,
    )


def run_evaluation(params: Mapping[str, Any]) -> EvaluationResult:
    """Run the evaluator selected by ``calculationMethod`` (``basic`` by default).

    Raises ``UnsupportedCalculationMethod`` for unknown methods and
    ``InvalidPayload`` for out-of-range fields, and lets
    pydantic's ``ValidationError`` through for malformed inputs.
    """
    method = calculation_method_of(params)
    if method is CalculationMethod.ADVANCED:
        result = _run_advanced(params)
    else:
        result = _run_basic(params)
    LOGGER.info(
        "Evaluation (%s): gross=%.2f%% net=%.2f%% cashflow=%.0f cents -> %s",
        method.value,
        result.gross_yield_pct,
        result.net_yield_pct,
        result.monthly_cashflow_cents,
        result.recommendation.value,
    )
    return result


def roi_input_from_params(params: Mapping[str, Any]) -> ROICalculationInput:
    def number(key: str) -> float:
        return _checked(key, as_float(params.get(key)))

    return ROICalculationInput(
        purchase_price=number("purchasePrice"),
        market_value=number("marketValue"),
        equity=number("equity"),
        loan_principal=number("loanPrincipal"),
        interest_rate_pct=number("interestRatePct"),
        amortization_rate_pct=number("amortizationRatePct"),
        monthly_rent=number("monthlyRent"),
        monthly_expenses=number("monthlyExpenses"),
        property_size_sqm=number("propertySizeSqm"),
    )


def run_roi(params: Union[ROICalculationInput, Mapping[str, Any]]) -> ROICalculationOutput:
    data = params if isinstance(params, ROICalculationInput) else roi_input_from_params(params)
    return calculate_roi(data)


__all__ = [
    "EvaluationError",
    "UnsupportedCalculationMethod",
    "InvalidPayload",
    "EvaluationResult",
    "as_float",
    "as_int",
    "as_opt_float",
    "as_bool",
    "calculation_method_of",
    "normalise_payload",
    "basic_input_from_payload",
    "advanced_input_from_payload",
    "basic_breakdown",
    "run_evaluation",
    "roi_input_from_params",
    "run_roi",
]
