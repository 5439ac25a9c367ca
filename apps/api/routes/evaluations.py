from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException, status
from pydantic import ValidationError

from immoroi.domain.evaluation import ROICalculationOutput
from immoroi.domain.evaluation_service import (
    EvaluationError,
    run_evaluation,
    run_roi,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["evaluations"])


def _unprocessable(exc: ValidationError) -> HTTPException:
    return HTTPException(
        422,
        detail=exc.errors(include_url=False, include_context=False, include_input=False),
    )


@router.post("/evaluations", status_code=status.HTTP_201_CREATED)
def create_evaluation(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    try:
        result = run_evaluation(payload)
    except EvaluationError as exc:
        logger.info("Evaluation rejected: %s", exc)
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ValidationError as exc:
        raise _unprocessable(exc) from exc
    return result.to_dict()


@router.post("/roi", response_model=ROICalculationOutput)
def roi(payload: Dict[str, Any] = Body(...)) -> ROICalculationOutput:
    try:
        return run_roi(payload)
    except EvaluationError as exc:
        logger.info("ROI request rejected: %s", exc)
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ValidationError as exc:
        raise _unprocessable(exc) from exc
