"""FastAPI REST endpoints for radix arithmetic.

Routes
------
POST   /bignum/compute     Sum, product, quotient and remainder at once
POST   /bignum/add         Sum
POST   /bignum/multiply    Karatsuba product
POST   /bignum/divide      Quotient and remainder (400 on a zero divisor)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from arithmetic import DivisionByZero
from calculator import RadixCalculator
from models import (
    ComputeResponse,
    DivisionResponse,
    ErrorResponse,
    OperandsRequest,
    ResultResponse,
)

logger = logging.getLogger("radix_bignum.api")

router = APIRouter(prefix="/bignum", tags=["bignum"])

# Calculators are injected by the app factory (see app.py), one per base.
_calculators: dict[int, RadixCalculator] = {}


def set_calculators(calculators: dict[int, RadixCalculator]) -> None:
    """Inject the calculators. Called once at app startup."""
    global _calculators
    _calculators = calculators


def get_calculator(base: int) -> RadixCalculator:
    calc = _calculators.get(base)
    if calc is None:
        raise HTTPException(status_code=422, detail=f"Unsupported base: {base}")
    return calc


def _division_by_zero(e: DivisionByZero) -> HTTPException:
    return HTTPException(status_code=400, detail=str(e))


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/compute", response_model=ComputeResponse)
def compute(payload: OperandsRequest) -> ComputeResponse:
    """Evaluate every operation for one pair of operands."""
    logger.debug("compute %s, %s in base %d", payload.a, payload.b, payload.base)
    results = get_calculator(payload.base).evaluate(payload.a, payload.b)
    return ComputeResponse(base=payload.base, **results._asdict())


@router.post("/add", response_model=ResultResponse)
def add(payload: OperandsRequest) -> ResultResponse:
    calc = get_calculator(payload.base)
    return ResultResponse(base=payload.base, result=calc.add(payload.a, payload.b))


@router.post("/multiply", response_model=ResultResponse)
def multiply(payload: OperandsRequest) -> ResultResponse:
    calc = get_calculator(payload.base)
    return ResultResponse(base=payload.base, result=calc.mul(payload.a, payload.b))


@router.post(
    "/divide",
    response_model=DivisionResponse,
    responses={400: {"model": ErrorResponse}},
)
def divide(payload: OperandsRequest) -> DivisionResponse:
    """Quotient and remainder; a zero divisor is a client error."""
    calc = get_calculator(payload.base)
    try:
        q, r = calc.divmod(payload.a, payload.b)
    except DivisionByZero as e:
        raise _division_by_zero(e) from e
    return DivisionResponse(base=payload.base, quotient=q, remainder=r)
