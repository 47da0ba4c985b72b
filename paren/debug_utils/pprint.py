"""Rendering of syntax trees, values and errors back to text."""

from __future__ import annotations

from typing import Iterable, Union

from paren import EvalValue
from paren.errors import ParenError, ParseFailed, UnknownFunction
from paren.reader.parser import to_bytes
from paren.types.node import Form, Identifier, Integer, Node, String

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_ERROR = "\033[91m"
COLOR_LOCATION = "\033[1m"
COLOR_CARET = "\033[92m"


# ----------------- Source printer -----------------
def to_source(obj: Union[Node, Iterable[Node]]) -> str:
    """Render a node, or a program (sequence of nodes), as parseable text.

    Top-level nodes of a program are separated by newlines. Strings print
    between double quotes as they have no escapes.
    """
    if isinstance(obj, Form):
        return "(" + " ".join(to_source(e) for e in obj.elements) + ")"
    if isinstance(obj, Identifier):
        return obj.text
    if isinstance(obj, Integer):
        return str(obj.value)
    if isinstance(obj, String):
        return f'"{obj.text}"'
    return "\n".join(to_source(node) for node in obj)


def shape(obj: Union[Node, Iterable[Node]]):
    """Offset-free structure of a node (or program) for structural comparison."""
    if isinstance(obj, Form):
        return ("form", tuple(shape(e) for e in obj.elements))
    if isinstance(obj, Identifier):
        return ("identifier", obj.text)
    if isinstance(obj, Integer):
        return ("integer", obj.value)
    if isinstance(obj, String):
        return ("string", obj.text)
    return tuple(shape(node) for node in obj)


def format_value(value: EvalValue) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


# ----------------- Diagnostics -----------------
def line_col(data: bytes, at: int) -> tuple[int, int]:
    """0-based (line, byte column) of byte offset `at`."""
    at = min(at, len(data))
    line = data.count(b"\n", 0, at)
    column = at - (data.rfind(b"\n", 0, at) + 1)
    return line, column


def describe(error: ParenError) -> str:
    """One-line `Name: message` summary of an error."""
    if isinstance(error, ParseFailed):
        error = error.error
    text = f"{type(error).__name__}: {error.message}"
    if isinstance(error, UnknownFunction):
        text += f" {error.name!r}"
    return text


def format_error(source: str | bytes, error: ParenError, color: bool = False) -> str:
    """Render `error` against `source` as a located diagnostic.

        1:2: error: UnknownFunction: unknown function 'foo'
        (foo 1 2)
         ^
    """
    paint = (lambda code, s: f"{code}{s}{RESET}") if color else (lambda code, s: s)
    summary = paint(COLOR_ERROR, "error: ") + describe(error)
    if error.at is None:
        return summary

    data = to_bytes(source)
    line, column = line_col(data, error.at)
    start = error.at - column
    end = data.find(b"\n", start)
    if end == -1:
        end = len(data)
    source_line = data[start:end].decode("utf-8", errors="replace")
    indent = len(data[start:error.at].decode("utf-8", errors="replace"))
    location = paint(COLOR_LOCATION, f"{line + 1}:{column + 1}:")
    return "\n".join([
        f"{location} {summary}",
        source_line,
        " " * indent + paint(COLOR_CARET, "^"),
    ])
