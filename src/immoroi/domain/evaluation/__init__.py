"""Investment evaluation: basic and advanced evaluators plus standalone ROI figures."""
from __future__ import annotations

from .contracts import (
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
)
from .recommendation import recommend_advanced, recommend_basic
from .basic import evaluate_investment
from .advanced import calculate_advanced_roi
from .roi import calculate_roi

__all__ = [
    "AdvancedEvaluationInput",
    "AdvancedEvaluationOutput",
    "AdvancedMetrics",
    "CalculationMethod",
    "DetailedBreakdown",
    "EvaluationInput",
    "EvaluationOutput",
    "ForecastPoint",
    "LoanType",
    "Recommendation",
    "ROICalculationInput",
    "ROICalculationOutput",
    "calculate_advanced_roi",
    "calculate_roi",
    "evaluate_investment",
    "recommend_advanced",
    "recommend_basic",
]
