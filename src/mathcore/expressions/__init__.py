"""
Expression language over complex scalars and complex matrices.

This package provides:
- Lexer: Tokenizes expression text, inserting implicit multiplications
- TreeBuilder: Builds an expression tree, resolving names in the registry
- Expression tree: Nodes that evaluate to a complex scalar or a CMatrix
- Registry: Built-in functions and constants with descriptor metadata
- Introspection: Listing and describing what the registry holds

Usage:
    from mathcore.expressions import build_tree, format_value

    tree = build_tree("2(3 + 4)")
    format_value(tree.evaluate())           # '14'

    tree = build_tree("x^2 + 1")
    format_value(tree.evaluate(x=2j))       # '-3'

    format_value(build_tree("pinv({2, 0; 0, 4})").evaluate())
    # '{0.5, 0; 0, 0.25}'
"""

from .tokens import (
    Token,
    TokenType,
    SourceLocation,
    SourceSpan,
)

from .lexer import (
    Lexer,
    tokenize,
)

from .errors import (
    Diagnostic,
    ExpressionError,
    BuildError,
    ExpressionSyntaxError,
    UnknownIdentifierError,
    ArityMismatchError,
    EvaluationError,
    TypeMismatchError,
    UnboundVariableError,
    AbsentArgumentError,
    RegistryConfigurationError,
)

from .tree import (
    Node,
    NullNode,
    NULL,
    ConstantNode,
    VariableNode,
    UnaryNode,
    BinaryNode,
    NAryNode,
    ExpressionTree,
    evaluate,
)

from .metadata import (
    ArgumentKind,
    Parameter,
    Signature,
    ExampleUsage,
    FunctionDescriptor,
)

from .registry import (
    FunctionRegistry,
    create_registry,
    get_registry,
)

from .builder import (
    TreeBuilder,
    build_tree,
    evaluate_expression,
)

from .coercion import (
    Value,
    format_value,
    results_match,
)

__all__ = [
    # Tokens
    "Token", "TokenType", "SourceLocation", "SourceSpan",
    # Lexer
    "Lexer", "tokenize",
    # Errors
    "Diagnostic", "ExpressionError", "BuildError", "ExpressionSyntaxError",
    "UnknownIdentifierError", "ArityMismatchError", "EvaluationError",
    "TypeMismatchError", "UnboundVariableError", "AbsentArgumentError",
    "RegistryConfigurationError",
    # Tree
    "Node", "NullNode", "NULL", "ConstantNode", "VariableNode", "UnaryNode",
    "BinaryNode", "NAryNode", "ExpressionTree", "evaluate",
    # Metadata
    "ArgumentKind", "Parameter", "Signature", "ExampleUsage", "FunctionDescriptor",
    # Registry
    "FunctionRegistry", "create_registry", "get_registry",
    # Builder
    "TreeBuilder", "build_tree", "evaluate_expression",
    # Values
    "Value", "format_value", "results_match",
]
