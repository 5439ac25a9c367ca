"""Monthly loan payments and the expense records they generate.

Loans here follow the fixed-amortization model: the borrower pays
``principal × interest rate`` plus ``principal × amortization rate`` per year,
split evenly over twelve months.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from immoroi.domain.units import Cents, Money, Percent, from_cents, to_cents
from immoroi.processing.compute import monthly_rate

LOGGER = logging.getLogger(__name__)


class ExpenseCategory(str, Enum):
    LOAN_INTEREST = "LOAN_INTEREST"
    LOAN_AMORTIZATION = "LOAN_AMORTIZATION"


@dataclass(frozen=True)
class LoanParameters:
    loan_principal_cents: Cents
    interest_rate_pct: Percent
    amortization_rate_pct: Percent


@dataclass(frozen=True)
class LoanPayments:
    """Monthly amounts in whole currency units, unrounded."""

    monthly_interest_payment: Money
    monthly_amortization_payment: Money
    total_monthly_payment: Money

    def to_dict(self) -> dict[str, float]:
        return {
            "monthlyInterestPayment": self.monthly_interest_payment,
            "monthlyAmortizationPayment": self.monthly_amortization_payment,
            "totalMonthlyPayment": self.total_monthly_payment,
        }


@dataclass(frozen=True)
class LoanExpense:
    property_id: str
    expense_date: date
    amount_cents: Cents
    category: ExpenseCategory
    note: str

    def to_dict(self) -> dict[str, object]:
        return {
            "propertyId": self.property_id,
            "date": self.expense_date.isoformat(),
            "amountCents": self.amount_cents,
            "category": self.category.value,
            "note": self.note,
        }


_NO_PAYMENTS = LoanPayments(Money(0.0), Money(0.0), Money(0.0))


def calculate_monthly_loan_payments(params: LoanParameters) -> LoanPayments:
    """Split the monthly loan cost into interest and amortization.

    A missing (zero) principal, interest rate or amortization rate yields no
    payments at all.
    """
    if (
        not params.loan_principal_cents
        or not params.interest_rate_pct
        or not params.amortization_rate_pct
    ):
        return _NO_PAYMENTS

    principal = from_cents(params.loan_principal_cents)
    interest = principal * monthly_rate(params.interest_rate_pct)
    amortization = principal * monthly_rate(params.amortization_rate_pct)
    return LoanPayments(
        monthly_interest_payment=Money(interest),
        monthly_amortization_payment=Money(amortization),
        total_monthly_payment=Money(interest + amortization),
    )


def generate_loan_expenses(
    property_id: str,
    params: LoanParameters,
    start_date: date,
    end_date: date,
) -> List[LoanExpense]:
    """One interest and one amortization record per month, ``end_date`` inclusive.

    Months are counted from ``start_date``; a start on the 31st lands on the
    last day of shorter months.
    """
    payments = calculate_monthly_loan_payments(params)
    if payments.total_monthly_payment == 0:
        return []

    expenses: List[LoanExpense] = []
    month_index = 0
    current = start_date
    while current <= end_date:
        if payments.monthly_interest_payment > 0:
            expenses.append(
                LoanExpense(
                    property_id=property_id,
                    expense_date=current,
                    amount_cents=to_cents(payments.monthly_interest_payment),
                    category=ExpenseCategory.LOAN_INTEREST,
                    note="Monthly loan interest payment",
                )
            )
        if payments.monthly_amortization_payment > 0:
            expenses.append(
                LoanExpense(
                    property_id=property_id,
                    expense_date=current,
                    amount_cents=to_cents(payments.monthly_amortization_payment),
                    category=ExpenseCategory.LOAN_AMORTIZATION,
                    note="Monthly loan amortization payment",
                )
            )
        month_index += 1
        current = start_date + relativedelta(months=month_index)

    LOGGER.debug(
        "Generated %s loan expense records for property %s (%s..%s)",
        len(expenses),
        property_id,
        start_date,
        end_date,
    )
    return expenses


def generate_next_12_months_loan_expenses(
    property_id: str,
    params: LoanParameters,
    start_date: Optional[date] = None,
) -> List[LoanExpense]:
    start = start_date or date.today()
    end = start + relativedelta(years=1)
    return generate_loan_expenses(property_id, params, start, end)


__all__ = [
    "ExpenseCategory",
    "LoanParameters",
    "LoanPayments",
    "LoanExpense",
    "calculate_monthly_loan_payments",
    "generate_loan_expenses",
    "generate_next_12_months_loan_expenses",
]
