"""
Descriptor metadata for registered functions and constants.

Every registry entry carries a ``FunctionDescriptor``: display name,
category, description, one ``Signature`` per supported argument count and
at least one worked example per signature. Introspection, the command line
and the example self-check are all driven from these descriptors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .errors import RegistryConfigurationError


class ArgumentKind(Enum):
    """The kind of value a parameter expects."""
    INTEGER = "integer"
    REAL = "real"
    COMPLEX = "complex"
    REAL_VECTOR = "real vector"
    REAL_MATRIX = "real matrix"
    COMPLEX_MATRIX = "complex matrix"


@dataclass(frozen=True)
class Parameter:
    kind: ArgumentKind
    name: str

    def __str__(self) -> str:
        return f"{self.name}: {self.kind.value}"


@dataclass(frozen=True)
class Signature:
    """An ordered parameter list; its length is the arity."""
    parameters: Tuple[Parameter, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def format(self, name: str) -> str:
        if not self.parameters:
            return name
        return f"{name}({', '.join(str(p) for p in self.parameters)})"


@dataclass(frozen=True)
class ExampleUsage:
    """An expression and its expected formatted result."""
    expression: str
    result: str


@dataclass(frozen=True)
class FunctionDescriptor:
    name: str
    display_name: str
    category: str
    description: str
    signatures: Tuple[Signature, ...]
    examples: Tuple[ExampleUsage, ...] = ()
    section: Optional[str] = None

    @property
    def arities(self) -> Tuple[int, ...]:
        return tuple(sorted({s.arity for s in self.signatures}))

    @property
    def is_constant(self) -> bool:
        return self.arities == (0,)

    def validate(self) -> None:
        """Raise RegistryConfigurationError if the descriptor is incomplete."""
        problems = []
        if not self.name:
            problems.append("empty name")
        if not self.display_name.strip():
            problems.append("empty display name")
        if not self.category.strip():
            problems.append("empty category")
        if not self.description.strip():
            problems.append("empty description")
        if not self.signatures:
            problems.append("no signatures")
        if len(self.examples) < len(self.signatures):
            problems.append(f"{len(self.examples)} example(s) for "
                            f"{len(self.signatures)} signature(s)")
        if problems:
            raise RegistryConfigurationError(
                f"invalid descriptor for '{self.name}': {', '.join(problems)}")


def signature(*parameters: Tuple[ArgumentKind, str]) -> Signature:
    """Build a signature from (kind, name) pairs."""
    return Signature(tuple(Parameter(kind, name) for kind, name in parameters))


def example(expression: str, result: str) -> ExampleUsage:
    return ExampleUsage(expression, result)
