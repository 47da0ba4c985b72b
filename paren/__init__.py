# Core type aliases for paren's data model.
# Syntax is a tree of position-annotated dataclasses (see paren.types.node);
# evaluated values are plain Python types: int for integers, str for strings.
#
# Naming guidance:
# - Node:      Use in reader/parser code and built-ins (unevaluated arguments).
# - EvalValue: Use in evaluator/runtime code to denote evaluated values.

from typing import Callable, Union

# Runtime value alias
EvalValue = Union[int, str]

# Built-in handler: receives the unevaluated argument nodes and the state.
Handler = Callable[..., EvalValue]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
