"""
Elementary functions of a complex scalar.

Every function takes a scalar (a 1x1 matrix is accepted) and returns the
principal value. Singularities such as ln(0) raise DomainError.
"""

import cmath
from typing import Callable, List, Optional

from ...errors import DomainError
from ...scalar import argument, divide
from ..coercion import Value, as_complex
from ..metadata import ArgumentKind, FunctionDescriptor, example, signature

CATEGORY = "Elementary Functions"

Z = (ArgumentKind.COMPLEX, "z")


def _scalar_function(name: str, function: Callable[[complex], complex]) -> Callable[[Value], Value]:
    """Wrap a complex function: coerce its argument, map math errors to DomainError."""

    def apply(value: Value) -> Value:
        z = as_complex(value, name)
        try:
            return complex(function(z))
        except (ValueError, OverflowError, ZeroDivisionError):
            raise DomainError(f"{name} is undefined at {z}")

    return apply


def _log(arguments: List[Optional[Value]]) -> Value:
    z = as_complex(arguments[0], "log")
    if z == 0:
        raise DomainError("log is undefined at 0")
    if arguments[1] is None:
        return cmath.log10(z)
    base = as_complex(arguments[1], "log")
    if base == 0:
        raise DomainError("log base must be non-zero")
    return divide(cmath.log(z), cmath.log(base))


# name, display name, section, description, function, examples
_FUNCTIONS = [
    ("abs", "Absolute value", "Complex Parts", "Modulus of a complex number.",
     abs, [example("abs(3+4i)", "5")]),
    ("arg", "Argument", "Complex Parts", "Principal argument, in (-pi, pi].",
     argument, [example("arg(i)", "1.5707963267949")]),
    ("conj", "Conjugate", "Complex Parts", "Complex conjugate.",
     lambda z: z.conjugate(), [example("conj(3-2i)", "3 + 2i")]),
    ("re", "Real part", "Complex Parts", "Real part of a complex number.",
     lambda z: z.real, [example("re(3-2i)", "3")]),
    ("im", "Imaginary part", "Complex Parts", "Imaginary part of a complex number.",
     lambda z: z.imag, [example("im(3-2i)", "-2")]),
    ("sqrt", "Square root", "Powers and Logarithms", "Principal square root.",
     cmath.sqrt, [example("sqrt(-4)", "2i"), example("sqrt(16)", "4")]),
    ("exp", "Exponential", "Powers and Logarithms", "e raised to the power z.",
     cmath.exp, [example("exp(0)", "1")]),
    ("ln", "Natural logarithm", "Powers and Logarithms",
     "Principal natural logarithm; ln(0) is undefined.",
     cmath.log, [example("ln(1)", "0"), example("ln(-1)", "3.14159265358979i")]),
    ("sin", "Sine", "Trigonometric", "Sine of an angle in radians.",
     cmath.sin, [example("sin(0)", "0")]),
    ("cos", "Cosine", "Trigonometric", "Cosine of an angle in radians.",
     cmath.cos, [example("cos(0)", "1")]),
    ("tan", "Tangent", "Trigonometric", "Tangent of an angle in radians.",
     cmath.tan, [example("tan(0)", "0")]),
    ("sinh", "Hyperbolic sine", "Hyperbolic", "Hyperbolic sine.",
     cmath.sinh, [example("sinh(0)", "0")]),
    ("cosh", "Hyperbolic cosine", "Hyperbolic", "Hyperbolic cosine.",
     cmath.cosh, [example("cosh(0)", "1")]),
    ("tanh", "Hyperbolic tangent", "Hyperbolic", "Hyperbolic tangent.",
     cmath.tanh, [example("tanh(0)", "0")]),
]


def register(registry) -> None:
    for name, display_name, section, description, function, examples in _FUNCTIONS:
        registry.register_unary(
            FunctionDescriptor(
                name=name,
                display_name=display_name,
                category=CATEGORY,
                section=section,
                description=description,
                signatures=(signature(Z),),
                examples=tuple(examples),
            ),
            _scalar_function(name, function))

    registry.register_nary(
        FunctionDescriptor(
            name="log",
            display_name="Logarithm",
            category=CATEGORY,
            section="Powers and Logarithms",
            description="Common (base 10) logarithm, or the logarithm to the given base.",
            signatures=(signature(Z), signature(Z, (ArgumentKind.COMPLEX, "base"))),
            examples=(example("log(100)", "2"), example("log(8, 2)", "3")),
        ),
        _log)
