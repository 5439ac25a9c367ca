import pytest
from pydantic import ValidationError

from immoroi.domain.evaluation import (
    AdvancedEvaluationInput,
    CalculationMethod,
    EvaluationInput,
    LoanType,
    Recommendation,
    calculate_advanced_roi,
    evaluate_investment,
)
from immoroi.domain.evaluation_service import (
    InvalidPayload,
    UnsupportedCalculationMethod,
    advanced_input_from_payload,
    as_float,
    as_int,
    basic_input_from_payload,
    normalise_payload,
    run_evaluation,
    run_roi,
)

BASIC_PAYLOAD = {
    "purchasePrice": 300_000,
    "expectedMonthlyRent": 1_500,
    "equity": 60_000,
    "interestRate": 3,
    "loanTermYears": 25,
    "operatingMonthlyExpenses": 200,
}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("300'000", 300_000.0),
        ("300’000", 300_000.0),
        ("4 500 000", 4_500_000.0),
        ("5,1", 5.1),
        ("1,234.5", 1_234.5),
        ("1.234,5", 1_234.5),
        ("1'234,50", 1_234.5),
        (12, 12.0),
        (True, 0.0),
        (None, 0.0),
        ("abc", 0.0),
    ],
)
def test_as_float(raw, expected):
    assert as_float(raw) == pytest.approx(expected)


def test_as_int():
    assert as_int("25") == 25
    assert as_int("2,5") == 2
    assert as_int(None, 30) == 30
    assert as_int("1e400") == 0
    assert as_int(float("inf"), 7) == 7


def test_basic_input_from_major_units():
    data = basic_input_from_payload(BASIC_PAYLOAD)
    assert data == EvaluationInput(
        purchase_price_cents=30_000_000,
        expected_monthly_rent_cents=150_000,
        equity_cents=6_000_000,
        interest_rate_pct=3.0,
        loan_term_years=25,
        monthly_other_costs_cents=20_000,
    )


def test_cents_keys_are_equivalent():
    cents_payload = {
        "purchasePriceCents": 30_000_000,
        "expectedMonthlyRentCents": 150_000,
        "equityCents": 6_000_000,
        "interestRatePct": 3,
        "loanTermYears": 25,
        "monthlyOtherCostsCents": 20_000,
    }
    assert basic_input_from_payload(cents_payload) == basic_input_from_payload(BASIC_PAYLOAD)


def test_major_units_win_over_cents():
    payload = dict(BASIC_PAYLOAD, purchasePriceCents=1)
    assert basic_input_from_payload(payload).purchase_price_cents == 30_000_000


def test_defaults_depend_on_method():
    assert normalise_payload({"purchasePrice": 1})["loanTermYears"] == 25
    assert (
        normalise_payload({"purchasePrice": 1, "calculationMethod": "advanced"})["loanTermYears"]
        == 10
    )
    assert normalise_payload({"purchasePrice": 1})["equity"] == 0


def test_run_basic_evaluation_with_breakdown():
    result = run_evaluation(BASIC_PAYLOAD)

    expected = evaluate_investment(basic_input_from_payload(BASIC_PAYLOAD))
    assert result.calculation_method is CalculationMethod.BASIC
    assert result.monthly_cashflow_cents == 70_000
    assert result.recommendation is Recommendation.GREEN
    assert result.forecast == expected.forecast
    assert result.metrics is None

    b = result.breakdown
    assert b.acquisition_costs == 0
    assert b.financed_base == pytest.approx(300_000)
    assert b.loan_amount == pytest.approx(240_000)
    assert b.gross_annual_rent == pytest.approx(18_000)
    assert b.interest_annual == pytest.approx(7_200)
    assert b.total_annual_opex == pytest.approx(2_400)
    assert b.net_operating_income == pytest.approx(15_600)
    assert b.cashflow_annual == pytest.approx(8_400)
    assert b.cashflow_after_tax == pytest.approx(8_400)
    assert b.market_value_y1 == pytest.approx(300_000)


def test_run_advanced_evaluation():
    payload = {
        "calculationMethod": "advanced",
        "purchasePrice": "1'000'000",
        "expectedMonthlyRent": 4_000,
        "equity": 250_000,
        "interestRate": 2,
        "acquisitionCostRate": 0.05,
        "vacancyRate": 0.05,
        "propertyMgmtRate": 0.05,
        "insuranceAndTaxesAnnual": 2_000,
        "loanType": "interestOnly",
        "appreciationRate": 0.02,
        "otherAnnualOpex": 1_000,
        "oneTimeCosts": 10_000,
    }
    result = run_evaluation(payload)

    expected = calculate_advanced_roi(advanced_input_from_payload(payload))
    assert result.calculation_method is CalculationMethod.ADVANCED
    assert result.metrics == expected.metrics
    assert result.breakdown == expected.breakdown
    assert result.breakdown.net_operating_income == pytest.approx(30_200)
    assert result.forecast == []


def test_advanced_payload_defaults():
    data = advanced_input_from_payload(
        {
            "calculationMethod": "advanced",
            "purchasePrice": 500_000,
            "expectedMonthlyRent": 2_000,
            "interestRate": 2,
            "maintenanceRate": 0,
            "marginalTaxRate": 0,
            "financeCosts": "false",
        }
    )
    assert isinstance(data, AdvancedEvaluationInput)
    assert data.property_size_sqm == 100
    # A zero maintenance rate falls back to the 1 % default.
    assert data.maintenance_rate == 0.01
    assert data.loan_type is LoanType.ANNUITY
    assert data.loan_term_years == 10
    assert data.marginal_tax_rate is None
    assert data.finance_costs is False
    assert data.equity == 0


def test_unknown_method_is_rejected():
    with pytest.raises(UnsupportedCalculationMethod):
        run_evaluation(dict(BASIC_PAYLOAD, calculationMethod="monte-carlo"))


def test_invalid_loan_type_raises_validation_error():
    with pytest.raises(ValidationError):
        run_evaluation(
            dict(BASIC_PAYLOAD, calculationMethod="advanced", loanType="balloon")
        )


def test_result_to_dict_shapes():
    basic = run_evaluation(BASIC_PAYLOAD).to_dict()
    assert basic["recommendation"] == "GREEN"
    assert basic["calculationMethod"] == "basic"
    assert len(basic["forecast"]) == 10
    assert "advancedMetrics" not in basic
    assert basic["detailedBreakdown"]["loanAmount"] == pytest.approx(240_000)

    advanced = run_evaluation(dict(BASIC_PAYLOAD, calculationMethod="advanced")).to_dict()
    assert "forecast" not in advanced
    assert "totalROI" in advanced["advancedMetrics"]


def test_run_roi_from_mapping():
    result = run_roi(
        {
            "purchasePrice": 800_000,
            "marketValue": 900_000,
            "equity": 0,
            "loanPrincipal": 600_000,
            "interestRatePct": 2,
            "amortizationRatePct": 1,
            "monthlyRent": 3_000,
            "monthlyExpenses": 500,
            "propertySizeSqm": 80,
        }
    )
    assert result.cash_on_cash_return == 0
    assert result.dscr == pytest.approx(30_000 / 18_000)


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"purchasePrice": 0}, "purchasePrice"),
        ({"purchasePrice": -300_000}, "purchasePrice"),
        ({"purchasePrice": "1e400"}, "purchasePrice"),
        ({"purchasePrice": 0.001}, "purchasePrice"),
        ({"equity": "1e400"}, "equity"),
        ({"expectedMonthlyRent": 1e15}, "expectedMonthlyRent"),
        ({"loanTermYears": -5}, "loanTermYears"),
        ({"loanTermYears": -1_000_000}, "loanTermYears"),
        ({"loanTermYears": 101}, "loanTermYears"),
        ({"loanTermYears": "1e400"}, "loanTermYears"),
        ({"interestRate": -1}, "interestRate"),
        ({"calculationMethod": "advanced", "vacancyRate": "1e400"}, "vacancyRate"),
        ({"calculationMethod": "advanced", "marginalTaxRate": "-1e400"}, "marginalTaxRate"),
    ],
)
def test_out_of_range_payload_is_rejected(overrides, field):
    with pytest.raises(InvalidPayload) as excinfo:
        run_evaluation(dict(BASIC_PAYLOAD, **overrides))
    assert excinfo.value.field == field
    assert field in str(excinfo.value)


def test_limits_are_inclusive():
    result = run_evaluation(dict(BASIC_PAYLOAD, loanTermYears=100))
    assert len(result.forecast) == 10
    assert run_evaluation(dict(BASIC_PAYLOAD, loanTermYears=1)).forecast[-1].year == 1
    assert run_evaluation(dict(BASIC_PAYLOAD, interestRate=0)).monthly_cashflow_cents == 130_000


def test_roi_rejects_non_finite_numbers():
    with pytest.raises(InvalidPayload):
        run_roi({"purchasePrice": 800_000, "monthlyRent": "1e400"})
