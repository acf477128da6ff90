"""Named mathematical constants."""

from ... import special
from ..metadata import FunctionDescriptor, example, signature

CATEGORY = "Constants"


def _constant(name: str, display_name: str, description: str, *examples) -> FunctionDescriptor:
    return FunctionDescriptor(
        name=name,
        display_name=display_name,
        category=CATEGORY,
        description=description,
        signatures=(signature(),),
        examples=tuple(examples),
    )


def register(registry) -> None:
    registry.register_constant(
        _constant("pi", "Pi", "Ratio of a circle's circumference to its diameter.",
                  example("pi", "3.14159265358979"),
                  example("2pi", "6.28318530717959")),
        complex(special.pi))
    registry.register_constant(
        _constant("e", "Euler's number", "Base of the natural logarithm.",
                  example("e", "2.71828182845905"),
                  example("ln(e)", "1")),
        complex(special.e))
    registry.register_constant(
        _constant("catalan", "Catalan's constant",
                  "Sum of (-1)^k / (2k + 1)^2 over k >= 0.",
                  example("catalan", "0.915965594177219")),
        complex(special.catalan))
    registry.register_constant(
        _constant("euler", "Euler-Mascheroni constant",
                  "Limiting difference between the harmonic series and the natural logarithm.",
                  example("euler", "0.577215664901533")),
        complex(special.euler))
    registry.register_constant(
        _constant("phi", "Golden ratio", "(1 + sqrt(5)) / 2.",
                  example("phi", "1.61803398874989")),
        complex(special.phi))
