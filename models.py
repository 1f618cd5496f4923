"""Interchange models for BigInteger and Rational values.

Values cross process boundaries (JSON documents, config files, HTTP
payloads) as decimal strings, never as floats.  These models validate the
literal grammar on the way in and produce canonical strings on the way
out.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from biginteger import BigInteger
from errors import MalformedLiteralError
from rational import Rational

INTEGER_PATTERN = r"^-?(0|[1-9][0-9]*)$"


# ---------------------------------------------------------------------------
# Integer
# ---------------------------------------------------------------------------

class IntegerModel(BaseModel):
    """A signed integer as a canonical decimal string."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(
        ...,
        min_length=1,
        pattern=INTEGER_PATTERN,
        description="Decimal literal, e.g. '-123456789012345678901'",
    )

    @field_validator("value")
    @classmethod
    def canonical_zero(cls, v: str) -> str:
        return "0" if v == "-0" else v


def integer_to_model(value: BigInteger) -> IntegerModel:
    return IntegerModel(value=value.to_string())


def integer_from_model(model: IntegerModel) -> BigInteger:
    return BigInteger.from_string(model.value)


# ---------------------------------------------------------------------------
# Rational
# ---------------------------------------------------------------------------

class RationalModel(BaseModel):
    """A fraction as signed numerator and positive denominator strings.

    The pair need not be reduced; ``rational_from_model`` reduces it.
    """

    model_config = ConfigDict(frozen=True)

    numerator: str = Field(..., min_length=1, pattern=INTEGER_PATTERN)
    denominator: str = Field(default="1", min_length=1)

    @field_validator("denominator")
    @classmethod
    def denominator_positive(cls, v: str) -> str:
        try:
            value = BigInteger.from_string(v)
        except MalformedLiteralError as e:
            raise ValueError(f"denominator is not an integer literal: {e.reason}") from e
        if not value.is_positive():
            raise ValueError("denominator must be positive; put the sign on the numerator")
        return v


def rational_to_model(value: Rational) -> RationalModel:
    numerator = value.numerator
    if value.is_negative():
        numerator.negate()
    return RationalModel(
        numerator=numerator.to_string(),
        denominator=value.denominator.to_string(),
    )


def rational_from_model(model: RationalModel) -> Rational:
    return Rational(
        BigInteger.from_string(model.numerator),
        BigInteger.from_string(model.denominator),
    )
