"""Exact rational arithmetic package."""

from .arrays import as_rational_array, zeros, zeros_like
from .rational import (
    SEPARATOR,
    InvalidArgumentError,
    Rational,
    RationalRange,
    div_by,
    parse,
    rationalize,
)

__all__ = [
    "Rational",
    "RationalRange",
    "InvalidArgumentError",
    "SEPARATOR",
    "div_by",
    "parse",
    "rationalize",
    "as_rational_array",
    "zeros",
    "zeros_like",
]
