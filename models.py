"""Request and response models for the HTTP surface.

Operands travel as decimal-digit strings, most-significant digit first,
exactly as a user would type them.  Validation here is the caller-side
bounds check the arithmetic core relies on: digit characters only, at
most ``DEFAULT_LIMITS.max_digits`` of them, each below the base.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from bounds import DEFAULT_LIMITS, BoundsError


class OperandsRequest(BaseModel):
    """Two operands and the base they are written in."""

    a: str = Field(
        ...,
        min_length=1,
        max_length=DEFAULT_LIMITS.max_digits,
        pattern=r"^[0-9]+$",
        description="First operand, most-significant digit first",
    )
    b: str = Field(
        ...,
        min_length=1,
        max_length=DEFAULT_LIMITS.max_digits,
        pattern=r"^[0-9]+$",
        description="Second operand, most-significant digit first",
    )
    base: int = Field(
        default=10,
        ge=DEFAULT_LIMITS.min_base,
        le=DEFAULT_LIMITS.max_base,
        description="Radix of both operands and of the results",
    )

    @field_validator("a", "b", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def digits_below_base(self) -> "OperandsRequest":
        for name in ("a", "b"):
            digits = [int(ch) for ch in getattr(self, name)]
            try:
                DEFAULT_LIMITS.validate_digits(digits, self.base)
            except BoundsError as e:
                raise ValueError(f"{name}: {e}") from e
        return self


class ComputeResponse(BaseModel):
    """All results for one pair of operands."""

    base: int
    sum: str
    product: str
    quotient: str | None = Field(
        default=None, description="Null when the divisor is zero"
    )
    remainder: str | None = None


class ResultResponse(BaseModel):
    base: int
    result: str


class DivisionResponse(BaseModel):
    base: int
    quotient: str
    remainder: str


class ErrorResponse(BaseModel):
    detail: str
