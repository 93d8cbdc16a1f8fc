"""NumPy object arrays holding :class:`Rational` values."""
from __future__ import annotations

from typing import Any

import numpy as np

from .rational import Rational


def as_rational_array(values: Any, *, copy: bool = True) -> np.ndarray:
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` can be any (possibly nested) iterable of numeric-like entries or
    an existing NumPy array. When ``copy`` is ``False`` and ``values`` is
    already an object array whose elements are all :class:`Rational`, it is
    returned as-is.
    """

    if not isinstance(values, np.ndarray):
        if not isinstance(values, (list, tuple)):
            values = list(values)
        values = np.array(values, dtype=object)
        copy = False

    array = values.copy() if copy else values
    if array.dtype != object:
        array = array.astype(object, copy=False)
    if all(isinstance(item, Rational) for item in array.flat):
        return array
    vectorised = np.vectorize(Rational.rationalize, otypes=[object])
    return vectorised(array)


def zeros(length: int) -> np.ndarray:
    """Return a one-dimensional array of length ``length`` filled with zeros."""

    if length < 0:
        raise ValueError("length must be non-negative")
    return np.array([Rational(0, 1) for _ in range(length)], dtype=object)


def zeros_like(values: Any) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""

    array = as_rational_array(values, copy=False)
    return zeros(array.size).reshape(array.shape)


__all__ = ["as_rational_array", "zeros", "zeros_like"]
