"""Thresholds and defaults for the evaluators."""
from __future__ import annotations

FORECAST_HORIZON_YEARS = 10
MONTHS_PER_YEAR = 12

# Basic evaluator: buy when cashflow is non-negative and the net yield clears this.
BASIC_MIN_MONTHLY_CASHFLOW_CENTS = 0
BASIC_MIN_NET_YIELD_PCT = 2.5

# Advanced evaluator: all four must be strictly exceeded.
ADVANCED_MIN_CASH_ON_CASH_PCT = 6.0
ADVANCED_MIN_DSCR = 1.1
ADVANCED_MIN_CASHFLOW_AFTER_TAX = 0.0
ADVANCED_MIN_NET_YIELD_PCT = 2.0

DEFAULT_MAINTENANCE_RATE = 0.01
DEFAULT_ADVANCED_LOAN_TERM_YEARS = 10
DEFAULT_BASIC_LOAN_TERM_YEARS = 25
DEFAULT_PROPERTY_SIZE_SQM = 100.0

# Request payload limits, checked before an evaluator runs.
MAX_LOAN_TERM_YEARS = 100
MAX_INPUT_MAGNITUDE = 1e12
