"""Exact rational numbers over Python's arbitrary-precision integers.

Values are stored exactly as constructed. Nothing is reduced to lowest terms
until a value is compared for equality or formatted, so ``numerator`` and
``denominator`` may carry common factors or a negative denominator.
"""
from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Optional, Tuple, Union

import numpy as np

NumberLike = Union["Rational", Fraction, numbers.Real]

SEPARATOR = "/"


class InvalidArgumentError(ValueError):
    """Raised for a zero denominator or a malformed rational literal."""


def _ensure_int(value: numbers.Real, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _to_double(value: int) -> float:
    # Integers beyond the float range saturate to a signed infinity.
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


class Rational:
    """Immutable ratio of two integers with lazy simplification."""

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(
        self,
        numerator: Union[int, numbers.Integral] = 0,
        denominator: Union[int, numbers.Integral] = 1,
    ) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if den == 0:
            raise InvalidArgumentError("denominator cannot be zero")
        self._numerator = num
        self._denominator = den

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def parse(cls, text: str) -> "Rational":
        """Parse ``"n"`` or ``"n/d"``.

        More than one separator raises :class:`InvalidArgumentError`. A part
        that is not an integer literal raises the ``ValueError`` from ``int``.
        """
        parts = text.split(SEPARATOR)
        if len(parts) == 1:
            return cls(int(parts[0]), 1)
        if len(parts) == 2:
            return cls(int(parts[0]), int(parts[1]))
        raise InvalidArgumentError(f"invalid rational format: {text!r}")

    @classmethod
    def from_float(
        cls, value: float, *, max_denominator: Optional[int] = None
    ) -> "Rational":
        """Return the exact value of *value*, or its best approximation
        with a denominator of at most *max_denominator*."""
        if isinstance(value, bool):  # bool is a subclass of int; treat explicitly.
            return cls(int(value), 1)
        if math.isnan(value) or math.isinf(value):
            raise InvalidArgumentError("cannot convert NaN or infinity to Rational")
        frac = Fraction.from_float(value)
        if max_denominator is not None:
            frac = frac.limit_denominator(max_denominator)
        return cls(frac.numerator, frac.denominator)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator)

    @classmethod
    def rationalize(cls, value: NumberLike) -> "Rational":
        """Coerce a numeric-like value into :class:`Rational`."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        if isinstance(value, numbers.Integral):
            return cls(int(value), 1)
        if isinstance(value, np.generic):
            return cls.rationalize(value.item())
        if isinstance(value, numbers.Real):
            return cls.from_float(float(value))
        raise TypeError(f"Cannot convert {type(value)!r} to Rational")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    def range_to(self, end: NumberLike) -> "RationalRange":
        """Return the closed range from this value to *end*."""
        return RationalRange(self, Rational.rationalize(end))

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        num, den = self._numerator, self._denominator
        if den == 1 or num % den == 0:
            return str(num // den)
        num, den = self._simplify(num, den)
        if den < 0 or (num < 0 and den < 0):
            num, den = -num, -den
        return f"{num}{SEPARATOR}{den}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        try:
            return format(float(self), format_spec)
        except OverflowError:
            return str(self)
        except (ValueError, TypeError):
            return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _simplify(num: int, den: int) -> Tuple[int, int]:
        gcd = math.gcd(num, den)
        return num // gcd, den // gcd

    @staticmethod
    def _make_ratio(num: int, den: int) -> "Rational":
        return Rational(num, den)

    def _as_double(self) -> float:
        num, den = self._simplify(self._numerator, self._denominator)
        return _to_double(num) / _to_double(den)

    def _coerce_scalar(self, value: Any) -> "Rational":
        if isinstance(value, Rational):
            return value
        if isinstance(value, (Fraction, numbers.Real, np.generic)):
            return Rational.rationalize(value)
        raise TypeError(f"Cannot interpret {type(value)!r} as Rational")

    def _vectorize_iterable(self, iterable, func):
        return np.array([func(item) for item in iterable], dtype=object)

    def _binary_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, self._coerce_scalar(x)),
                otypes=[object],
            )
            return vectorised(other)
        if isinstance(other, (list, tuple)):
            return self._vectorize_iterable(
                other,
                lambda x: op(self, self._coerce_scalar(x)),
            )
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(self, other_rat)

    # ------------------------------------------------------------------
    # Arithmetic operators
    @staticmethod
    def _add(a: "Rational", b: "Rational") -> "Rational":
        return Rational._make_ratio(
            a._numerator * b._denominator + a._denominator * b._numerator,
            a._denominator * b._denominator,
        )

    @staticmethod
    def _sub(a: "Rational", b: "Rational") -> "Rational":
        return Rational._make_ratio(
            a._numerator * b._denominator - a._denominator * b._numerator,
            a._denominator * b._denominator,
        )

    @staticmethod
    def _mul(a: "Rational", b: "Rational") -> "Rational":
        return Rational._make_ratio(
            a._numerator * b._numerator,
            a._denominator * b._denominator,
        )

    @staticmethod
    def _truediv(a: "Rational", b: "Rational") -> "Rational":
        # A zero-valued divisor yields a zero denominator and fails in __init__.
        return Rational._make_ratio(
            a._numerator * b._denominator,
            a._denominator * b._numerator,
        )

    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, self._add)

    def __radd__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: self._add(b, a))

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, self._sub)

    def __rsub__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: self._sub(b, a))

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, self._mul)

    def __rmul__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: self._mul(b, a))

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, self._truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: self._truediv(b, a))

    def __neg__(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op) -> bool:
        # Cross-multiplication on the raw values; only meaningful when both
        # denominators are positive.
        other_rat = self._coerce_scalar(other)
        return op(
            self._numerator * other_rat._denominator,
            self._denominator * other_rat._numerator,
        )

    def compare_to(self, other: NumberLike) -> int:
        """Return -1, 0 or 1 as this value is less than, equal to or greater
        than *other*.

        Operands are not normalised first, so a negative denominator on
        either side inverts the result.
        """
        other_rat = self._coerce_scalar(other)
        diff = (
            self._numerator * other_rat._denominator
            - self._denominator * other_rat._numerator
        )
        return (diff > 0) - (diff < 0)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        try:
            other_rat = self._coerce_scalar(other)
        except (TypeError, InvalidArgumentError):
            return False
        return self._as_double() == other_rat._as_double()

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # Raw components: equal values in different terms hash differently.
        return hash((self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.negative: operator.neg,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, Rational):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                vectorised = np.vectorize(lambda x: self._coerce_scalar(x), otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(self._coerce_scalar(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


@dataclass(frozen=True)
class RationalRange:
    """Closed interval ``[start, end]`` ordered with :meth:`Rational.compare_to`."""

    start: Rational
    end: Rational

    def __contains__(self, value: Any) -> bool:
        return self.start.compare_to(value) <= 0 and self.end.compare_to(value) >= 0

    def is_empty(self) -> bool:
        return self.start.compare_to(self.end) > 0


def parse(text: str) -> Rational:
    """Public helper to parse ``"n"`` or ``"n/d"`` into :class:`Rational`."""

    return Rational.parse(text)


def div_by(numerator: int, denominator: int) -> Rational:
    """Return ``numerator/denominator`` without reducing it."""

    return Rational(numerator, denominator)


def rationalize(value: NumberLike) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.rationalize(value)


__all__ = [
    "InvalidArgumentError",
    "Rational",
    "RationalRange",
    "SEPARATOR",
    "div_by",
    "parse",
    "rationalize",
]
