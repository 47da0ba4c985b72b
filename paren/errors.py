"""Error taxonomy for paren.

Two independent families: ParseError for malformed source text and EvalError
for failures while walking the tree. Every error carries the byte offset of the
token that triggered it (EmptyForm and EmptyProgram have none).
"""
from __future__ import annotations

from typing import Optional


class ParenError(Exception):
    """ Base class for all paren errors"""

    at: Optional[int] = None

    def _payload(self) -> tuple:
        return (self.at,)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(at={self.at!r})"


# -------------------------------
# Parse errors
# -------------------------------
class ParseError(ParenError):
    """ Raised when the source text is structurally malformed"""

    message = "parse error"

    def __init__(self, at: int):
        super().__init__(f"{self.message} at {at}")
        self.at = at


class UnexpectedEndOfInput(ParseError):
    """ Raised when a form or string is still open at the end of input"""
    message = "unexpected end of input"


class FailedToParseInteger(ParseError):
    """ Raised when a numeric token is not a valid 64-bit integer"""
    message = "failed to parse integer"


class NoIdentifier(ParseError):
    """ Raised when an identifier token is empty"""
    message = "expected an identifier"


class UnbalancedParentheses(ParseError):
    """ Raised on a ')' with no open form to close"""
    message = "unbalanced parentheses"


# -------------------------------
# Evaluation errors
# -------------------------------
class EvalError(ParenError):
    """ Raised when a well-formed program cannot be evaluated"""

    message = "evaluation error"

    def __init__(self, at: Optional[int] = None):
        super().__init__(self.message if at is None else f"{self.message} at {at}")
        self.at = at


class IdentifierExpected(EvalError):
    """ Raised when the first element of a form is not an identifier"""
    message = "expected an identifier in operator position"


class FormOrValueExpected(EvalError):
    """ Raised when a node that has no value is evaluated"""
    message = "expected a form or a value"


class NotAnInteger(EvalError):
    """ Raised when a built-in needs an integer and gets a string"""
    message = "not an integer"


class IntegerOverflow(EvalError):
    """ Raised when an arithmetic result leaves the signed 64-bit range"""
    message = "integer overflow"


class EmptyForm(EvalError):
    """ Raised on () which has no operator to dispatch"""
    message = "empty form"

    def __init__(self):
        super().__init__()


class EmptyProgram(EvalError):
    """ Raised when a program has no top-level node to produce a value"""
    message = "empty program"

    def __init__(self):
        super().__init__()


class UnknownFunction(EvalError):
    """ Raised when an identifier is not in the function table"""
    message = "unknown function"

    def __init__(self, at: int, name: str):
        super(EvalError, self).__init__(f"{self.message} {name!r} at {at}")
        self.at = at
        self.name = name

    def _payload(self) -> tuple:
        return (self.at, self.name)

    def __repr__(self) -> str:
        return f"UnknownFunction(at={self.at!r}, name={self.name!r})"


class ParseFailed(EvalError):
    """ Raised by evaluation when the program could not be parsed"""

    def __init__(self, error: ParseError):
        super(EvalError, self).__init__(str(error))
        self.error = error
        self.at = error.at

    def _payload(self) -> tuple:
        return (self.error,)

    def __repr__(self) -> str:
        return f"ParseFailed({self.error!r})"
