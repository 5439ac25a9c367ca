import unittest

import pytest

from immoroi.domain.evaluation import (
    EvaluationInput,
    EvaluationOutput,
    Recommendation,
    evaluate_investment,
)
from immoroi.processing.compute import build_amortization_schedule


def _example_input(**overrides) -> EvaluationInput:
    values = dict(
        purchase_price_cents=30_000_000,
        expected_monthly_rent_cents=150_000,
        equity_cents=6_000_000,
        interest_rate_pct=3.0,
        loan_term_years=25,
        monthly_other_costs_cents=20_000,
    )
    values.update(overrides)
    return EvaluationInput(**values)


class EvaluateInvestmentTests(unittest.TestCase):
    def test_reference_example(self) -> None:
        result = evaluate_investment(_example_input())

        self.assertIsInstance(result, EvaluationOutput)
        self.assertAlmostEqual(result.gross_yield_pct, 6.0)
        # (150 000 − 20 000 − 60 000) × 12 / 30 000 000 × 100
        self.assertAlmostEqual(result.net_yield_pct, 2.8)
        self.assertEqual(result.monthly_cashflow_cents, 70_000)
        self.assertEqual(result.recommendation, Recommendation.GREEN)
        self.assertEqual(len(result.forecast), 10)

    def test_forecast_uses_loan_principal_and_equity(self) -> None:
        result = evaluate_investment(_example_input())
        expected = build_amortization_schedule(24_000_000, 3.0, 25, 6_000_000)
        self.assertEqual(result.forecast, expected)

    def test_cashflow_ignores_principal_repayment(self) -> None:
        result = evaluate_investment(_example_input(interest_rate_pct=0.0))
        self.assertEqual(result.monthly_cashflow_cents, 150_000 - 20_000)

    def test_equity_above_price_means_no_loan(self) -> None:
        result = evaluate_investment(_example_input(equity_cents=40_000_000))

        self.assertEqual(result.monthly_cashflow_cents, 150_000 - 20_000)
        for point in result.forecast:
            self.assertEqual(point.remaining_principal_cents, 0)
            self.assertEqual(point.interest_paid_cents, 0)
            self.assertEqual(point.net_worth_cents, 40_000_000)

    def test_negative_cashflow_is_red(self) -> None:
        result = evaluate_investment(
            _example_input(equity_cents=0, interest_rate_pct=6.0)
        )
        # 30M × 0.5 % = 150 000 interest, so cashflow is −20 000.
        self.assertEqual(result.monthly_cashflow_cents, -20_000)
        self.assertEqual(result.recommendation, Recommendation.RED)

    def test_low_net_yield_is_red_even_with_positive_cashflow(self) -> None:
        # net = (100 000 − 20 000 − 60 000) × 12 / 30M × 100 = 0.8 %
        result = evaluate_investment(_example_input(expected_monthly_rent_cents=100_000))
        self.assertGreater(result.monthly_cashflow_cents, 0)
        self.assertAlmostEqual(result.net_yield_pct, 0.8)
        self.assertEqual(result.recommendation, Recommendation.RED)

    def test_defaults_for_optional_fields(self) -> None:
        data = EvaluationInput(
            purchase_price_cents=10_000_000,
            expected_monthly_rent_cents=50_000,
            interest_rate_pct=2.0,
            loan_term_years=20,
        )
        self.assertEqual(data.equity_cents, 0)
        self.assertEqual(data.monthly_other_costs_cents, 0)

        result = evaluate_investment(data)
        # 100 % financed: 10M × 2 % / 12 ≈ 16 667 interest per month.
        self.assertEqual(result.monthly_cashflow_cents, 50_000 - 16_667)


def test_output_serialises_with_camel_case_keys():
    result = evaluate_investment(_example_input(loan_term_years=2))
    payload = result.model_dump(by_alias=True)

    assert set(payload) == {
        "grossYieldPct",
        "netYieldPct",
        "monthlyCashflowCents",
        "recommendation",
        "forecast",
    }
    assert payload["recommendation"] == "GREEN"
    assert set(payload["forecast"][0]) == {
        "year",
        "remainingPrincipalCents",
        "interestPaidCents",
        "principalPaidCents",
        "netWorthCents",
    }


def test_input_accepts_camel_case_keys():
    data = EvaluationInput.model_validate(
        {
            "purchasePriceCents": 30_000_000,
            "expectedMonthlyRentCents": 150_000,
            "equityCents": 6_000_000,
            "interestRatePct": 3,
            "loanTermYears": 25,
            "monthlyOtherCostsCents": 20_000,
        }
    )
    assert data == _example_input()


def test_zero_purchase_price_is_not_guarded():
    with pytest.raises(ZeroDivisionError):
        evaluate_investment(_example_input(purchase_price_cents=0, equity_cents=0))
