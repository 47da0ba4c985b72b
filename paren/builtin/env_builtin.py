"""Built-in functions for the paren function table.

Every handler has the signature handler(args, state): `args` are the
unevaluated argument nodes, evaluated here one at a time, left to right.
"""
from __future__ import annotations

from typing import MutableMapping, Sequence

from paren import INT64_MAX, INT64_MIN, EvalValue, Handler
from paren.errors import IntegerOverflow, NotAnInteger
from paren.evaluation.evaluator import run
from paren.types.node import Node, at
from paren.types.state import State


def integer_arg(node: Node, state: State) -> int:
    """Evaluate `node`; it must produce an integer."""
    value = run(node, state)
    if not isinstance(value, int):
        raise NotAnInteger(at(node))
    return value


def _checked(value: int, node: Node) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise IntegerOverflow(at(node))
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence[Node], state: State) -> int:
    """(+ a b ...): sum of the arguments, 0 with none."""
    total = 0
    for node in args:
        total = _checked(total + integer_arg(node, state), node)
    return total


def sub(args: Sequence[Node], state: State) -> int:
    """(- a b ...): a minus each later argument, 0 with none."""
    if not args:
        return 0
    total = integer_arg(args[0], state)
    for node in args[1:]:
        total = _checked(total - integer_arg(node, state), node)
    return total


# -------------------------------
# Strings
# -------------------------------
def concat(args: Sequence[Node], state: State) -> str:
    """(str a b ...): concatenation, integers in decimal."""
    parts: list[str] = []
    for node in args:
        value: EvalValue = run(node, state)
        parts.append(value if isinstance(value, str) else str(value))
    return "".join(parts)


BUILTINS: dict[str, Handler] = {
    "+": add,
    "-": sub,
    "str": concat,
}

BUILTIN_SIGNATURES: dict[str, str] = {
    "+": "(+ integer ...) -> integer",
    "-": "(- integer ...) -> integer",
    "str": "(str value ...) -> string",
}


def register(table: MutableMapping[str, Handler]) -> None:
    """Add the built-ins to a function table that is still being assembled."""
    table.update(BUILTINS)
