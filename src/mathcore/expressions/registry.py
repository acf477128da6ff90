"""
Function and constant registry.

Maps ``(name, argument count)`` to a node factory, and each name to its
descriptor. The process-wide registry returned by ``get_registry()`` is
populated from every built-in function module on first use and then
frozen; after that it is only read.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional

from .errors import (
    RegistryConfigurationError,
    error_arity_mismatch,
    error_unknown_identifier,
)
from .metadata import FunctionDescriptor
from .tokens import SourceSpan
from .tree import NULL, BinaryNode, ConstantNode, NAryNode, Node, UnaryNode
from .coercion import Value

logger = logging.getLogger(__name__)

NodeFactory = Callable[[List[Node]], Node]


class FunctionRegistry:
    """
    Registry of functions and constants available to expressions.

    Usage:
        registry = FunctionRegistry()
        registry.register(descriptor, factory)
        registry.freeze()
        factory = registry.resolve("sqrt", 1)
        node = factory([argument_node])
    """

    def __init__(self):
        self._factories: Dict[str, Dict[int, NodeFactory]] = {}
        self._descriptors: Dict[str, FunctionDescriptor] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True

    def register(self, descriptor: FunctionDescriptor, factory: NodeFactory) -> None:
        """Register a factory for every arity the descriptor's signatures name."""
        name = descriptor.name
        if self._frozen:
            raise RegistryConfigurationError(
                f"cannot register '{name}': the registry is frozen")
        descriptor.validate()

        existing = self._descriptors.get(name)
        if existing is not None and existing is not descriptor:
            logger.error("Conflicting descriptors for '%s'", name)
            raise RegistryConfigurationError(f"'{name}' is already registered")

        arities = self._factories.setdefault(name, {})
        for arity in descriptor.arities:
            if arity in arities:
                logger.error("Duplicate registration of '%s' with %d argument(s)",
                             name, arity)
                raise RegistryConfigurationError(
                    f"'{name}' with {arity} argument(s) is already registered")
        for arity in descriptor.arities:
            arities[arity] = factory
        self._descriptors[name] = descriptor

    def register_constant(self, descriptor: FunctionDescriptor, value: Value) -> None:
        """Register a named constant (a zero-argument entry)."""
        if not descriptor.is_constant:
            raise RegistryConfigurationError(
                f"constant '{descriptor.name}' must have a single zero-argument signature")
        name = descriptor.name

        def make_constant(arguments: List[Node]) -> Node:
            return ConstantNode(value, name)

        self.register(descriptor, make_constant)

    def register_unary(self, descriptor: FunctionDescriptor,
                       function: Callable[[Value], Value]) -> None:
        """Register a one-argument function."""
        name = descriptor.name

        def make_unary(arguments: List[Node]) -> Node:
            return UnaryNode(name, arguments[0], function)

        self.register(descriptor, make_unary)

    def register_binary(self, descriptor: FunctionDescriptor,
                        function: Callable[[Value, Value], Value]) -> None:
        """Register a two-argument function."""
        name = descriptor.name

        def make_binary(arguments: List[Node]) -> Node:
            return BinaryNode(name, arguments[0], arguments[1], function)

        self.register(descriptor, make_binary)

    def register_nary(self, descriptor: FunctionDescriptor,
                      function: Callable[[List[Optional[Value]]], Value]) -> None:
        """
        Register a function taking a list of arguments.

        Calls with fewer arguments than the longest signature are padded with
        ``NULL``; the function receives None for every absent argument.
        """
        name = descriptor.name
        width = max(descriptor.arities)

        def make_nary(arguments: List[Node]) -> Node:
            padded = list(arguments) + [NULL] * (width - len(arguments))
            return NAryNode(name, padded, function)

        self.register(descriptor, make_nary)

    def contains(self, name: str) -> bool:
        return name in self._factories

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def arities(self, name: str) -> List[int]:
        """The registered argument counts for a name (empty if unknown)."""
        return sorted(self._factories.get(name, {}))

    def resolve(self, name: str, argument_count: int,
                span: Optional[SourceSpan] = None,
                source_line: Optional[str] = None) -> NodeFactory:
        """
        Find the factory for a name called with ``argument_count`` arguments.

        Raises:
            UnknownIdentifierError: the name is not registered
            ArityMismatchError: no signature takes that many arguments
        """
        arities = self._factories.get(name)
        if arities is None:
            raise error_unknown_identifier(name, span, source_line)
        factory = arities.get(argument_count)
        if factory is None:
            raise error_arity_mismatch(name, argument_count, sorted(arities),
                                       span, source_line)
        return factory

    def get_descriptor(self, name: str) -> Optional[FunctionDescriptor]:
        return self._descriptors.get(name)

    def get_metadata(self) -> List[FunctionDescriptor]:
        """All descriptors, sorted by name."""
        return [self._descriptors[name] for name in sorted(self._descriptors)]

    def __len__(self) -> int:
        return len(self._descriptors)


# Global registry instance
_registry: Optional[FunctionRegistry] = None
_registry_lock = threading.Lock()


def create_registry() -> FunctionRegistry:
    """Build a new registry holding every built-in function, frozen."""
    from .functions import BUILTIN_MODULES

    registry = FunctionRegistry()
    for module in BUILTIN_MODULES:
        before = len(registry)
        module.register(registry)
        logger.debug("Registered %d entries from %s",
                     len(registry) - before, module.__name__)
    registry.freeze()
    logger.debug("Registry frozen with %d entries", len(registry))
    return registry


def get_registry() -> FunctionRegistry:
    """Get the global function registry, building it on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = create_registry()
    return _registry
