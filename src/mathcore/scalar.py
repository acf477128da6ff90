"""
Complex scalar helpers.

Scalars are plain Python ``complex`` values; this module supplies the pieces
the builtin type leaves out: tolerance comparison, checked division and
powers, and the culture-invariant text form used for results.

mathcore.scalar provides the "constants" ``epsilon``, the default absolute
tolerance for ``close``, ``MACHINE_EPSILON``, the spacing of doubles at 1.0,
and ``SIGNIFICANT_DIGITS``, the number of significant digits used when a
value is formatted.
"""

import math
from numbers import Number

import numpy as np

from .errors import DomainError

## constants
epsilon = 1e-12
MACHINE_EPSILON = float(np.finfo(float).eps)
SIGNIFICANT_DIGITS = 15


def to_complex(x: Number) -> complex:
    """Convert any real or complex number (numpy scalars included) to complex."""
    if isinstance(x, bool):
        raise TypeError("booleans are not numbers")
    return complex(x)


def close(a: complex, b: complex, eps: float = epsilon) -> bool:
    """Are two scalars the same within eps."""
    return abs(a - b) < eps


def is_real(z: complex) -> bool:
    """True when the imaginary part is exactly zero."""
    return z.imag == 0


def is_integer(z: complex) -> bool:
    """True for a real value with no fractional part."""
    return is_real(z) and math.isfinite(z.real) and float(z.real).is_integer()


def argument(z: complex) -> float:
    """Principal argument in (-pi, pi]."""
    return math.atan2(z.imag, z.real)


def divide(a: complex, b: complex) -> complex:
    """Complex division; a zero divisor raises DomainError."""
    if b == 0:
        raise DomainError("division by zero")
    return complex(a) / complex(b)


def power(a: complex, b: complex) -> complex:
    """
    Principal value of a ** b.

    ``x ^ 0`` is 1 for every x, zero raised to an exponent with a
    non-positive real part is undefined.
    """
    a = complex(a)
    b = complex(b)
    if b == 0:
        return complex(1.0)
    if a == 0:
        if b.real <= 0:
            raise DomainError("zero cannot be raised to a non-positive power")
        return complex(0.0)
    try:
        return a ** b
    except (OverflowError, ZeroDivisionError) as e:
        raise DomainError(f"power: {e}")


def format_real(x: float) -> str:
    """Format a double with SIGNIFICANT_DIGITS digits and a '.' decimal point."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    text = format(x, f".{SIGNIFICANT_DIGITS}g")
    if text == "-0":
        return "0"
    return text


def format_complex(z: complex) -> str:
    """
    Format a complex scalar as ``a``, ``bi``, ``a + bi`` or ``a - bi``.

    Parts that format as zero are omitted, a unit imaginary coefficient is
    written as a bare ``i``.
    """
    z = complex(z)
    re_text = format_real(z.real)
    im_text = format_real(z.imag)

    if im_text == "0":
        return re_text

    magnitude = format_real(abs(z.imag))
    coefficient = "" if magnitude == "1" else magnitude
    negative = z.imag < 0

    if re_text == "0":
        return f"{'-' if negative else ''}{coefficient}i"
    return f"{re_text} {'-' if negative else '+'} {coefficient}i"
