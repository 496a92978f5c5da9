"""Application factory and entry point.

Run with:
    uvicorn app:app --reload
"""

from __future__ import annotations

from fastapi import FastAPI

from api import router, set_calculators
from bounds import DEFAULT_LIMITS
from calculator import RadixCalculator
from factory import RadixFactory


def create_app(
    calculators: dict[int, RadixCalculator] | None = None,
    verify: bool = True,
) -> FastAPI:
    """Build and return the FastAPI application.

    Accepts prebuilt calculators for testing.  Otherwise one calculator
    per supported base is built, through the verifying factory unless
    ``verify`` is False.
    """
    if calculators is None:
        bases = range(DEFAULT_LIMITS.min_base, DEFAULT_LIMITS.max_base + 1)
        if verify:
            calculators = {b: RadixFactory.create(b) for b in bases}
        else:
            calculators = {b: RadixCalculator(base=b) for b in bases}

    set_calculators(calculators)

    app = FastAPI(
        title="Radix Bignum API",
        description=(
            "Arbitrary-precision arithmetic on non-negative integers of up to "
            "100 digits in any base from 2 to 10. Products use Karatsuba "
            "multiplication; quotients use schoolbook long division."
        ),
        version="0.1.0",
    )
    app.include_router(router)
    return app


# Default app instance for `uvicorn app:app`
app = create_app()
