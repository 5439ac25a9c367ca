from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from immoroi.infrastructure.config import SETTINGS
from immoroi.processing.loans import (
    LoanParameters,
    calculate_monthly_loan_payments,
    generate_next_12_months_loan_expenses,
)

router = APIRouter(prefix="/loans", tags=["loans"])


class LoanPaymentsReq(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    property_id: str = ""
    loan_principal_cents: int = 0
    interest_rate_pct: float = 0.0
    amortization_rate_pct: float = 0.0
    start_date: Optional[date] = None


class LoanPaymentsResp(BaseModel):
    payments: Dict[str, float]
    expenses: List[Dict[str, Any]] = Field(default_factory=list)


@router.post("/payments", response_model=LoanPaymentsResp)
def loan_payments(req: LoanPaymentsReq) -> LoanPaymentsResp:
    params = LoanParameters(
        loan_principal_cents=req.loan_principal_cents,
        interest_rate_pct=req.interest_rate_pct,
        amortization_rate_pct=req.amortization_rate_pct,
    )
    payments = calculate_monthly_loan_payments(params)
    expenses: List[Dict[str, Any]] = []
    if SETTINGS.LOAN_EXPENSE_PREVIEW:
        expenses = [
            expense.to_dict()
            for expense in generate_next_12_months_loan_expenses(
                req.property_id, params, req.start_date
            )
        ]
    return LoanPaymentsResp(payments=payments.to_dict(), expenses=expenses)
