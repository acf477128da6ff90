"""
Introspection API for the function registry.

Programmatic access to every registered function and constant: names,
categories, signatures, descriptions and worked examples. Used by the
command line and by tools that need to know what an expression can call.

Usage:
    from mathcore.expressions.introspection import (
        get_api_reference,
        get_function_info,
        list_functions,
        describe_function,
    )

    info = get_function_info("hist")
    print(info["signatures"])  # ["hist(data: real matrix)", ...]

    for name in list_functions("Statistics"):
        print(name)
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .builder import build_tree
from .coercion import format_value, results_match
from .metadata import FunctionDescriptor
from .registry import FunctionRegistry, get_registry
from ..errors import MathCoreError


def _registry(registry: Optional[FunctionRegistry]) -> FunctionRegistry:
    return registry if registry is not None else get_registry()


def _descriptor_to_dict(descriptor: FunctionDescriptor) -> Dict[str, Any]:
    """Convert a descriptor to a dictionary."""
    return {
        "name": descriptor.name,
        "display_name": descriptor.display_name,
        "category": descriptor.category,
        "section": descriptor.section,
        "description": descriptor.description,
        "arities": list(descriptor.arities),
        "signatures": [s.format(descriptor.name) for s in descriptor.signatures],
        "parameters": [
            [{"name": p.name, "kind": p.kind.value} for p in s.parameters]
            for s in descriptor.signatures
        ],
        "examples": [
            {"expression": e.expression, "result": e.result}
            for e in descriptor.examples
        ],
    }


def get_api_reference(registry: Optional[FunctionRegistry] = None) -> Dict[str, Any]:
    """
    Get the complete API reference as a dictionary.

    Returns a dictionary with:
    - categories: category names
    - functions: every function and constant, keyed by name
    """
    registry = _registry(registry)
    return {
        "categories": list_categories(registry),
        "functions": {d.name: _descriptor_to_dict(d) for d in registry.get_metadata()},
    }


def list_categories(registry: Optional[FunctionRegistry] = None) -> List[str]:
    return sorted({d.category for d in _registry(registry).get_metadata()})


def list_functions(category: Optional[str] = None,
                   registry: Optional[FunctionRegistry] = None) -> List[str]:
    """
    List registered names.

    Args:
        category: Optional filter by category (case-insensitive)

    Returns:
        Sorted list of names
    """
    descriptors = _registry(registry).get_metadata()
    if category:
        wanted = category.lower()
        descriptors = [d for d in descriptors if d.category.lower() == wanted]
    return [d.name for d in descriptors]


def get_function_info(name: str,
                      registry: Optional[FunctionRegistry] = None) -> Optional[Dict[str, Any]]:
    """
    Get detailed information about a function or constant.

    Returns None if the name is not registered.
    """
    descriptor = _registry(registry).get_descriptor(name)
    if descriptor is None:
        return None
    return _descriptor_to_dict(descriptor)


def describe_function(name: str, registry: Optional[FunctionRegistry] = None) -> str:
    """
    Get a human-readable description of a function.

    Args:
        name: The function name

    Returns:
        Formatted description string
    """
    info = get_function_info(name, registry)
    if info is None:
        return f"Unknown function: {name}"

    lines = [f"{info['display_name']} ({info['category']})"]
    for sig in info["signatures"]:
        lines.append(f"  {sig}")
    lines.append(info["description"])
    if info["examples"]:
        lines.append("Examples:")
        for e in info["examples"]:
            lines.append(f"  {e['expression']} = {e['result']}")
    return "\n".join(lines)


def to_json(registry: Optional[FunctionRegistry] = None) -> str:
    """Get the complete API reference as a JSON string."""
    return json.dumps(get_api_reference(registry), indent=2)


# =============================================================================
# Example checking
# =============================================================================

@dataclass
class ExampleResult:
    """The outcome of evaluating one worked example."""
    name: str
    expression: str
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        return results_match(self.actual, self.expected)


def check_examples(registry: Optional[FunctionRegistry] = None) -> List[ExampleResult]:
    """Evaluate every worked example; a failure is recorded as its error text."""
    registry = _registry(registry)
    results = []
    for descriptor in registry.get_metadata():
        for e in descriptor.examples:
            try:
                actual = format_value(build_tree(e.expression, registry).evaluate())
            except MathCoreError as error:
                actual = f"error: {error}"
            results.append(ExampleResult(descriptor.name, e.expression, e.result, actual))
    return results
