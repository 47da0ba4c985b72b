"""
  paren Reader

- Recursive descent over the UTF-8 bytes of the source, single pass, no backtracking
- Every node and every error carries a byte offset into the source
- Grammar:

    program    := node*
    node       := form | integer | string | identifier
    form       := '(' node* ')'
    integer    := digit (not whitespace and not ')')*     -> signed 64-bit
    string     := '"' (any byte except '"')* '"'          -> no escapes
    identifier := (not whitespace and not ')')+

  Whitespace is the Unicode White_Space property, a fixed table, so
  classification never depends on the locale. Multi-byte whitespace such as
  U+00A0 or U+3000 is skipped by its full UTF-8 length.
"""

from __future__ import annotations

from typing import Iterator, Optional

from paren import INT64_MAX
from paren.errors import (
    FailedToParseInteger,
    NoIdentifier,
    UnbalancedParentheses,
    UnexpectedEndOfInput,
)
from paren.types.node import Form, Identifier, Integer, Node, String

LPAREN = ord("(")
RPAREN = ord(")")
QUOTE = ord('"')
ASCII_WHITESPACE = frozenset(b" \t\n\r\x0b\x0c")
# Non-ASCII code points with the Unicode White_Space property
UNICODE_WHITESPACE = frozenset(
    "\u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
DIGITS = frozenset(b"0123456789")
# Decimal digits of INT64_MAX; anything longer is out of range
INT64_DIGITS = len(str(INT64_MAX))


def to_bytes(source: str | bytes) -> bytes:
    return source.encode("utf-8") if isinstance(source, str) else bytes(source)


def _utf8_width(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


class Reader:
    """Cursor over the source bytes; `pos` is always a byte offset."""

    def __init__(self, source: str | bytes, pos: int = 0):
        self.data: bytes = to_bytes(source)
        self.pos: int = pos

    def _whitespace_width(self, pos: int) -> int:
        """Byte length of the whitespace character at `pos`, 0 if it is not one."""
        lead = self.data[pos]
        if lead < 0x80:
            return 1 if lead in ASCII_WHITESPACE else 0
        width = _utf8_width(lead)
        char = self.data[pos:pos + width].decode("utf-8", errors="replace")
        return width if char in UNICODE_WHITESPACE else 0

    def skip_whitespace(self) -> None:
        n = len(self.data)
        while self.pos < n and (width := self._whitespace_width(self.pos)):
            self.pos += width

    def peek(self) -> Optional[int]:
        """Skip whitespace and return the next byte, or None at end of input."""
        self.skip_whitespace()
        if self.pos >= len(self.data):
            return None
        return self.data[self.pos]

    def _scan_token(self) -> bytes:
        """Advance to the next whitespace or ')' and return the bytes passed."""
        start = self.pos
        n = len(self.data)
        while (
            self.pos < n
            and self.data[self.pos] != RPAREN
            and not self._whitespace_width(self.pos)
        ):
            self.pos += 1
        return self.data[start:self.pos]

    def parse_expr(self) -> Node:
        ch = self.peek()
        if ch == LPAREN:
            return self.parse_form()
        if ch in DIGITS:
            return self.parse_int()
        if ch == QUOTE:
            return self.parse_str()
        return self.parse_identifier()

    def parse_form(self) -> Form:
        start = self.pos
        self.pos += 1  # consume '('
        elements: list[Node] = []
        while True:
            ch = self.peek()
            if ch is None:
                raise UnexpectedEndOfInput(start)
            if ch == RPAREN:
                self.pos += 1
                return Form(tuple(elements), start)
            elements.append(self.parse_expr())

    def parse_int(self) -> Integer:
        start = self.pos
        token = self._scan_token()
        # bytes.isdigit() is ASCII only and rejects signs, '_' and spaces
        if not token.isdigit():
            raise FailedToParseInteger(start)
        digits = token.lstrip(b"0") or b"0"
        # checked before int(), which refuses very long digit strings
        if len(digits) > INT64_DIGITS:
            raise FailedToParseInteger(start)
        value = int(digits)
        if value > INT64_MAX:
            raise FailedToParseInteger(start)
        return Integer(value, start)

    def parse_str(self) -> String:
        start = self.pos
        close = self.data.find(b'"', start + 1)
        if close == -1:
            raise UnexpectedEndOfInput(start)
        self.pos = close + 1
        text = self.data[start + 1:close].decode("utf-8", errors="replace")
        return String(text, start)

    def parse_identifier(self) -> Identifier:
        start = self.pos
        token = self._scan_token()
        if not token:
            raise NoIdentifier(start)
        return Identifier(token.decode("utf-8", errors="replace"), start)

    def parse_all(self) -> Iterator[Node]:
        """Yield top-level nodes until end of input.

        A ')' at the top level has no form to close and raises
        UnbalancedParentheses.
        """
        while (ch := self.peek()) is not None:
            if ch == RPAREN:
                raise UnbalancedParentheses(self.pos)
            yield self.parse_expr()


def parse(source: str | bytes) -> list[Node]:
    """Parse `source` into its top-level nodes.

    Raises the first ParseError met in the left-to-right scan; there is no
    partial result.
    """
    return list(Reader(source).parse_all())
