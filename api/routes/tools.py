"""Password tools endpoints.

Public endpoints for password evaluation and generation.
"""

from fastapi import APIRouter, HTTPException

from api.models import (
    EvaluateRequest,
    EvaluationResponse,
    GenerateRequest,
    GenerateResponse,
)
from core import InvalidLengthError, evaluate, generate_password
from core.events import log_event, summarize_result


router = APIRouter(tags=["Password Tools"])


@router.post("/evaluate", response_model=EvaluationResponse, response_model_by_alias=True)
def evaluate_password(request: EvaluateRequest):
    """Score a password and return its rating and suggestions."""
    result = evaluate(request.password)
    log_event("evaluate", "SUCCESS", summarize_result(result))
    return EvaluationResponse.from_result(result)


@router.post("/generate", response_model=GenerateResponse, response_model_by_alias=True)
def generate_new_password(request: GenerateRequest):
    """Generate a secure random password and evaluate it."""
    try:
        password = generate_password(length=request.length)
    except InvalidLengthError as e:
        log_event("generate", "REJECTED", {"requested_length": request.length})
        raise HTTPException(status_code=400, detail=str(e))

    result = evaluate(password)
    log_event("generate", "SUCCESS", {"requested_length": request.length, **summarize_result(result)})

    return GenerateResponse(
        password=password,
        evaluation=EvaluationResponse.from_result(result)
    )
