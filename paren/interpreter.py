from __future__ import annotations

from typing import Callable, Mapping, Optional

from paren import EvalValue, Handler
from paren.errors import EmptyProgram
from paren.evaluation.evaluator import evaluate_all, run
from paren.reader.parser import parse
from paren.types.node import Node
from paren.types.state import State


class Interpreter:
    """
    Orchestrates reading and evaluating paren code via a pluggable evaluator.
    Extra built-ins given here are added to every evaluation; the State itself
    is rebuilt per call, nothing carries over between calls.
    """

    def __init__(
        self,
        functions: Optional[Mapping[str, Handler]] = None,
        eval_fn: Callable[[Node, State], EvalValue] = run,
    ):
        self.functions: dict[str, Handler] = dict(functions or {})
        self.eval_fn = eval_fn

    def define(self, name: str, handler: Handler) -> None:
        self.functions[name] = handler

    def parse(self, code: str | bytes) -> list[Node]:
        return parse(code)

    def eval_all(self, code: str | bytes) -> list[EvalValue]:
        return evaluate_all(code, self.functions, self.eval_fn)

    def eval(self, code: str | bytes) -> EvalValue:
        results = self.eval_all(code)
        if not results:
            raise EmptyProgram()
        return results[-1]
