import unittest

from immoroi.domain.evaluation import (
    AdvancedEvaluationInput,
    EvaluationInput,
    ROICalculationOutput,
)
from immoroi.domain.forecast import ForecastPoint
from immoroi.domain.units import (
    Cents,
    Fraction,
    Money,
    Percent,
    fraction_to_percent,
    from_cents,
    percent_to_fraction,
    round_half_up,
    to_cents,
)
from immoroi.processing.compute import monthly_rate


class ConversionTests(unittest.TestCase):
    def test_round_half_up(self) -> None:
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(3.5), 4)
        self.assertEqual(round_half_up(2.4999), 2)
        self.assertEqual(round_half_up(-2.5), -2)

    def test_cents_round_trip(self) -> None:
        self.assertEqual(to_cents(0.125), 13)
        self.assertEqual(to_cents(1_500), 150_000)
        self.assertEqual(to_cents(0), 0)
        self.assertEqual(from_cents(150_000), 1_500.0)

    def test_percent_and_fraction(self) -> None:
        self.assertAlmostEqual(percent_to_fraction(Percent(3.5)), 0.035)
        self.assertAlmostEqual(fraction_to_percent(Fraction(0.05)), 5.0)
        self.assertAlmostEqual(monthly_rate(Percent(3.0)), 0.0025)


class ContractUnitTests(unittest.TestCase):
    def _annotation(self, model, field: str):
        return model.model_fields[field].annotation

    def test_basic_input_is_in_cents_and_percent(self) -> None:
        self.assertIs(self._annotation(EvaluationInput, "purchase_price_cents"), Cents)
        self.assertIs(self._annotation(EvaluationInput, "equity_cents"), Cents)
        self.assertIs(self._annotation(EvaluationInput, "interest_rate_pct"), Percent)

    def test_advanced_input_separates_money_percent_and_fractions(self) -> None:
        self.assertIs(self._annotation(AdvancedEvaluationInput, "purchase_price"), Money)
        self.assertIs(self._annotation(AdvancedEvaluationInput, "interest_rate_pct"), Percent)
        self.assertIs(self._annotation(AdvancedEvaluationInput, "vacancy_rate"), Fraction)
        self.assertIs(self._annotation(AdvancedEvaluationInput, "maintenance_rate"), Fraction)

    def test_roi_ratios_are_fractions(self) -> None:
        self.assertIs(self._annotation(ROICalculationOutput, "cap_rate"), Fraction)
        self.assertIs(self._annotation(ROICalculationOutput, "price_per_sqm"), Money)

    def test_forecast_amounts_are_cents(self) -> None:
        self.assertIs(self._annotation(ForecastPoint, "net_worth_cents"), Cents)

    def test_wrapped_fields_still_validate_plain_numbers(self) -> None:
        data = EvaluationInput.model_validate(
            {
                "purchasePriceCents": 30_000_000,
                "expectedMonthlyRentCents": 150_000,
                "interestRatePct": 3,
                "loanTermYears": 25,
            }
        )
        self.assertEqual(data.purchase_price_cents, 30_000_000)
        self.assertEqual(data.interest_rate_pct, 3.0)
        self.assertEqual(data.equity_cents, 0)
