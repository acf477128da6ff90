"""
Expression tree node definitions and evaluation.

A tree is built once by the builder and then evaluated, possibly many times
with different variable bindings. There are six node variants:

- ``NullNode``: the absent optional argument (the ``NULL`` singleton)
- ``ConstantNode``: a literal or a named constant
- ``VariableNode``: a free name whose value is bound before evaluation
- ``UnaryNode``, ``BinaryNode``, ``NAryNode``: a behavior applied to
  one, two or any number of children

Each node owns its children; ``replace_child`` is the only structural
mutation once a tree has been built.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Union

from ..linalg import CMatrix
from ..scalar import divide, format_complex, power
from .coercion import Value, as_complex, as_integer, as_square_matrix, kind_of
from .errors import AbsentArgumentError, TypeMismatchError, UnboundVariableError


UnaryFunction = Callable[[Optional[Value]], Value]
BinaryFunction = Callable[[Optional[Value], Optional[Value]], Value]
NAryFunction = Callable[[List[Optional[Value]]], Value]


# =============================================================================
# Nodes
# =============================================================================

@dataclass(eq=False)
class Node:
    """Base class for all expression nodes."""

    def children(self) -> List["Node"]:
        return []

    def evaluate(self) -> Value:
        return evaluate(self)

    def walk(self) -> Iterator["Node"]:
        """Yield this node and every descendant in pre-order."""
        yield self
        for child in self.children():
            yield from child.walk()

    def find_variable(self, name: str) -> Optional["VariableNode"]:
        """The first variable called ``name`` in pre-order, or None."""
        for node in self.walk():
            if isinstance(node, VariableNode) and node.name == name:
                return node
        return None

    def find_all_variables(self) -> List["VariableNode"]:
        """Every variable node in pre-order."""
        return [node for node in self.walk() if isinstance(node, VariableNode)]

    def replace_child(self, old: "Node", new: "Node") -> bool:
        """
        Replace the direct child ``old`` (compared by identity) with ``new``.

        Returns True if a child was replaced.
        """
        return False

    def __str__(self) -> str:
        return render(self)


@dataclass(eq=False)
class NullNode(Node):
    """The absent optional argument; never evaluated."""

    def __repr__(self) -> str:
        return "NULL"


NULL = NullNode()


@dataclass(eq=False)
class ConstantNode(Node):
    """A literal value, or a registered constant when ``name`` is set."""
    value: Value
    name: Optional[str] = None


@dataclass(eq=False)
class VariableNode(Node):
    """A free variable; ``value`` is None until bound."""
    name: str
    value: Optional[Value] = None

    def bind(self, value: Value) -> None:
        self.value = value


@dataclass(eq=False)
class UnaryNode(Node):
    name: str
    operand: Node
    function: UnaryFunction = field(repr=False)

    def children(self) -> List[Node]:
        return [self.operand]

    def replace_child(self, old: Node, new: Node) -> bool:
        if self.operand is old:
            self.operand = new
            return True
        return False


@dataclass(eq=False)
class BinaryNode(Node):
    name: str
    left: Node
    right: Node
    function: BinaryFunction = field(repr=False)

    def children(self) -> List[Node]:
        return [self.left, self.right]

    def replace_child(self, old: Node, new: Node) -> bool:
        if self.left is old:
            self.left = new
            return True
        if self.right is old:
            self.right = new
            return True
        return False


@dataclass(eq=False)
class NAryNode(Node):
    name: str
    arguments: List[Node]
    function: NAryFunction = field(repr=False)

    def children(self) -> List[Node]:
        return list(self.arguments)

    def replace_child(self, old: Node, new: Node) -> bool:
        for i, child in enumerate(self.arguments):
            if child is old:
                self.arguments[i] = new
                return True
        return False


# =============================================================================
# Evaluation
# =============================================================================

def _argument(node: Node) -> Optional[Value]:
    """Evaluate a child slot; an absent argument is passed on as None."""
    if node is NULL:
        return None
    return evaluate(node)


def evaluate(node: Node) -> Value:
    """Evaluate a node and its children, left to right."""
    if isinstance(node, NullNode):
        raise AbsentArgumentError()
    elif isinstance(node, ConstantNode):
        return node.value
    elif isinstance(node, VariableNode):
        if node.value is None:
            raise UnboundVariableError(node.name)
        return node.value
    elif isinstance(node, UnaryNode):
        return node.function(_argument(node.operand))
    elif isinstance(node, BinaryNode):
        left = _argument(node.left)
        right = _argument(node.right)
        return node.function(left, right)
    elif isinstance(node, NAryNode):
        return node.function([_argument(child) for child in node.arguments])
    else:
        raise RuntimeError(f"unknown node type {type(node).__name__}")


class ExpressionTree:
    """
    A built expression together with the text it came from.

    Usage:
        tree = build_tree("x^2 + 1")
        tree.evaluate(x=3)          # (10+0j)
        tree.variables()            # ['x']
    """

    def __init__(self, root: Node, source: str = ""):
        self.root = root
        self.source = source

    def find_variable(self, name: str) -> Optional[VariableNode]:
        return self.root.find_variable(name)

    def find_all_variables(self) -> List[VariableNode]:
        return self.root.find_all_variables()

    def variables(self) -> List[str]:
        """Distinct variable names in order of first appearance."""
        names: List[str] = []
        for node in self.find_all_variables():
            if node.name not in names:
                names.append(node.name)
        return names

    def bind(self, **bindings: Union[Value, float, int]) -> None:
        """Bind a value to every variable node with the given name."""
        for node in self.find_all_variables():
            if node.name in bindings:
                value = bindings[node.name]
                if not isinstance(value, CMatrix):
                    value = complex(value)
                node.bind(value)

    def evaluate(self, **bindings: Union[Value, float, int]) -> Value:
        self.bind(**bindings)
        return evaluate(self.root)

    def __str__(self) -> str:
        return render(self.root)

    def __repr__(self) -> str:
        return f"ExpressionTree({render(self.root)!r})"


# =============================================================================
# Operators
# =============================================================================

def negate(value: Value) -> Value:
    # 0 - x leaves zero parts as +0, so sqrt(-4) stays on the upper branch
    return 0 - value


def identity(value: Value) -> Value:
    return value


def _reduce_one_by_one(left: Value, right: Value):
    """A 1x1 matrix meeting a larger matrix acts as the scalar it holds."""
    left_single = isinstance(left, CMatrix) and left.shape == (1, 1)
    right_single = isinstance(right, CMatrix) and right.shape == (1, 1)
    if left_single and isinstance(right, CMatrix) and not right_single:
        return as_complex(left), right
    if right_single and isinstance(left, CMatrix) and not left_single:
        return left, as_complex(right)
    return left, right


def add(left: Value, right: Value) -> Value:
    left, right = _reduce_one_by_one(left, right)
    return left + right


def subtract(left: Value, right: Value) -> Value:
    left, right = _reduce_one_by_one(left, right)
    return left - right


def multiply(left: Value, right: Value) -> Value:
    left, right = _reduce_one_by_one(left, right)
    return left * right


def quotient(left: Value, right: Value) -> Value:
    """Division by a scalar (or 1x1 matrix); a zero divisor raises DomainError."""
    divisor = as_complex(right, "division")
    if isinstance(left, CMatrix):
        return left / divisor
    return divide(left, divisor)


def raise_power(left: Value, right: Value) -> Value:
    """Complex power of a scalar, or integer power of a square matrix."""
    if isinstance(left, CMatrix) and left.shape != (1, 1):
        matrix = as_square_matrix(left, "power")
        return matrix.power(as_integer(right, "matrix power"))
    if isinstance(right, CMatrix) and right.shape != (1, 1):
        raise TypeMismatchError("scalar exponent", kind_of(right), "power")
    return power(as_complex(left), as_complex(right))


def build_matrix(rows: List[Value]) -> CMatrix:
    """Stack evaluated row nodes (1 x k matrices) into one matrix."""
    return CMatrix.from_rows([row.elements() for row in rows])


def build_row(elements: List[Value]) -> CMatrix:
    return CMatrix.row([as_complex(e, "matrix element") for e in elements])


# name -> (symbol, precedence); precedences match the builder's
BINARY_OPERATORS: Dict[str, tuple] = {
    "add": ("+", 1),
    "subtract": ("-", 1),
    "multiply": ("*", 2),
    "divide": ("/", 2),
    "power": ("^", 4),
}

UNARY_OPERATORS: Dict[str, str] = {
    "negate": "-",
    "plus": "+",
}

UNARY_PRECEDENCE = 3
ATOM_PRECEDENCE = 5

MATRIX = "matrix"
ROW = "row"


# =============================================================================
# Rendering
# =============================================================================

def _format_constant(value: Value) -> str:
    if isinstance(value, CMatrix):
        return str(value)
    return format_complex(value)


def _precedence(node: Node) -> int:
    if isinstance(node, BinaryNode) and node.name in BINARY_OPERATORS:
        return BINARY_OPERATORS[node.name][1]
    if isinstance(node, UnaryNode) and node.name in UNARY_OPERATORS:
        return UNARY_PRECEDENCE
    if isinstance(node, ConstantNode) and node.name is None:
        text = _format_constant(node.value)
        if " " in text and not isinstance(node.value, CMatrix):
            return 1
        if text.startswith("-"):
            return UNARY_PRECEDENCE
    return ATOM_PRECEDENCE


def _wrap(node: Node, needs_parens: bool) -> str:
    text = render(node)
    return f"({text})" if needs_parens else text


def render(node: Node) -> str:
    """Render a node as infix text with only the parentheses it needs."""
    if isinstance(node, NullNode):
        return ""
    if isinstance(node, ConstantNode):
        return node.name if node.name is not None else _format_constant(node.value)
    if isinstance(node, VariableNode):
        return node.name
    if isinstance(node, UnaryNode):
        if node.name in UNARY_OPERATORS:
            operand = _wrap(node.operand, _precedence(node.operand) < UNARY_PRECEDENCE)
            return UNARY_OPERATORS[node.name] + operand
        return f"{node.name}({render(node.operand)})"
    if isinstance(node, BinaryNode):
        if node.name in BINARY_OPERATORS:
            symbol, prec = BINARY_OPERATORS[node.name]
            right_assoc = symbol == "^"
            left_prec = _precedence(node.left)
            right_prec = _precedence(node.right)
            left = _wrap(node.left, left_prec < prec or (right_assoc and left_prec == prec))
            right = _wrap(node.right, right_prec < prec or (not right_assoc and right_prec == prec))
            if symbol == "^":
                return f"{left}^{right}"
            return f"{left} {symbol} {right}"
        return _render_call(node.name, node.children())
    if isinstance(node, NAryNode):
        if node.name == MATRIX:
            return "{" + "; ".join(render(row) for row in node.arguments) + "}"
        if node.name == ROW:
            return ", ".join(render(e) for e in node.arguments)
        return _render_call(node.name, node.arguments)
    raise RuntimeError(f"unknown node type {type(node).__name__}")


def _render_call(name: str, arguments: List[Node]) -> str:
    present = [render(a) for a in arguments if a is not NULL]
    return f"{name}({', '.join(present)})"
