"""Tree-walking evaluator for paren.

`run` gives a node its value; `call` dispatches a form on its leading
identifier through the State's function table. Built-ins receive their
argument nodes unevaluated and call back into `run`, so arguments are
evaluated left to right and the first failure wins.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Sequence

from paren import EvalValue, Handler
from paren.errors import (
    EmptyForm,
    EmptyProgram,
    FormOrValueExpected,
    IdentifierExpected,
    ParseError,
    ParseFailed,
)
from paren.reader.parser import parse
from paren.types.node import Form, Identifier, Integer, Node, String, at
from paren.types.state import State


def run(node: Node, state: State) -> EvalValue:
    match node:
        case Integer(value=value):
            return value
        case String(text=text):
            return text
        case Form(elements=elements):
            return call(elements, state)
    raise FormOrValueExpected(at(node))


def call(elements: Sequence[Node], state: State) -> EvalValue:
    """Apply the built-in named by elements[0] to the remaining nodes."""
    if not elements:
        raise EmptyForm()
    head = elements[0]
    if not isinstance(head, Identifier):
        raise IdentifierExpected(at(head))
    handler = state.lookup(head)
    return handler(elements[1:], state)


def make_state(functions: Optional[Mapping[str, Handler]] = None) -> State:
    """Fresh State holding the built-ins, overlaid with `functions`."""
    # Lazy import: built-ins call back into run()
    from paren.builtin.env_builtin import register

    table: dict[str, Handler] = {}
    register(table)
    if functions:
        table.update(functions)
    return State(table)


def evaluate_all(
    source: str | bytes,
    functions: Optional[Mapping[str, Handler]] = None,
    eval_fn: Callable[[Node, State], EvalValue] = run,
) -> list[EvalValue]:
    """Evaluate every top-level node in order and return all their values."""
    try:
        program = parse(source)
    except ParseError as err:
        raise ParseFailed(err) from err
    state = make_state(functions)
    return [eval_fn(node, state) for node in program]


def evaluate(
    source: str | bytes, functions: Optional[Mapping[str, Handler]] = None
) -> EvalValue:
    """Evaluate a program and return the value of its last top-level node.

    Raises ParseFailed if the source does not parse, EmptyProgram if it holds
    no nodes, or the first EvalError met during evaluation.
    """
    results = evaluate_all(source, functions)
    if not results:
        raise EmptyProgram()
    return results[-1]
