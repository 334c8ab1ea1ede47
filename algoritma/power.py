"""Exponentiation by squaring, recursive and iterative."""

from __future__ import annotations

from numbers import Real


def _check_exponent(exponent: int) -> None:
    if not isinstance(exponent, int):
        raise TypeError("exponent must be an integer")


def _square_and_multiply(base: Real, exponent: int) -> Real:
    if exponent == 0:
        return 1
    half = _square_and_multiply(base, exponent >> 1)
    if exponent & 1:
        return half * half * base
    return half * half


def power_recursive(base: Real, exponent: int) -> float:
    """Raise ``base`` to an integer ``exponent`` by recursive squaring."""
    _check_exponent(exponent)
    if exponent < 0:
        return 1.0 / power_recursive(base, -exponent)
    return float(_square_and_multiply(base, exponent))


def power_linear(base: Real, exponent: int) -> float:
    """Raise ``base`` to an integer ``exponent`` by iterative squaring."""
    _check_exponent(exponent)
    if exponent < 0:
        return 1.0 / power_linear(base, -exponent)
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return float(result)