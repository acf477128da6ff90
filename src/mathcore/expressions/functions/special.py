"""Special functions evaluated with mpmath."""

from ... import special
from ..coercion import Value, as_complex
from ..metadata import ArgumentKind, FunctionDescriptor, example, signature

CATEGORY = "Special Functions"

Z = (ArgumentKind.COMPLEX, "z")


def _gamma(value: Value) -> Value:
    return special.gamma(as_complex(value, "gamma"))


def _beta(a: Value, b: Value) -> Value:
    return special.beta(as_complex(a, "beta"), as_complex(b, "beta"))


def _zeta(value: Value) -> Value:
    return special.zeta(as_complex(value, "zeta"))


def _erf(value: Value) -> Value:
    return special.erf(as_complex(value, "erf"))


def register(registry) -> None:
    registry.register_unary(
        FunctionDescriptor(
            name="gamma",
            display_name="Gamma function",
            category=CATEGORY,
            description="Euler gamma function; gamma(n) = (n - 1)! for positive integers.",
            signatures=(signature(Z),),
            examples=(example("gamma(5)", "24"), example("gamma(0.5)", "1.77245385090552")),
        ),
        _gamma)
    registry.register_binary(
        FunctionDescriptor(
            name="beta",
            display_name="Beta function",
            category=CATEGORY,
            description="gamma(a) gamma(b) / gamma(a + b).",
            signatures=(signature((ArgumentKind.COMPLEX, "a"), (ArgumentKind.COMPLEX, "b")),),
            examples=(example("beta(2, 3)", "0.0833333333333333"),),
        ),
        _beta)
    registry.register_unary(
        FunctionDescriptor(
            name="zeta",
            display_name="Riemann zeta function",
            category=CATEGORY,
            description="Riemann zeta function; undefined at 1.",
            signatures=(signature((ArgumentKind.COMPLEX, "s"),),),
            examples=(example("zeta(2)", "1.64493406684823"),),
        ),
        _zeta)
    registry.register_unary(
        FunctionDescriptor(
            name="erf",
            display_name="Error function",
            category=CATEGORY,
            description="Gauss error function.",
            signatures=(signature(Z),),
            examples=(example("erf(0)", "0"),),
        ),
        _erf)
