"""Conversion of paren errors and byte offsets to LSP structures."""

from __future__ import annotations

from typing import List, Optional

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from paren.debug_utils.pprint import describe, line_col
from paren.errors import ParenError
from paren.evaluation.evaluator import evaluate_all

SOURCE = "paren-ls"
WORD_BREAKS = " \t()\"\n\r"


def offset_to_position(data: bytes, at: int) -> Position:
    """LSP position (UTF-16 code units) of byte offset `at`."""
    line, column = line_col(data, at)
    prefix = data[at - column:at].decode("utf-8", errors="replace")
    return Position(line=line, character=len(prefix.encode("utf-16-le")) // 2)


def error_to_diagnostic(text: str, error: ParenError) -> Diagnostic:
    start = offset_to_position(text.encode("utf-8"), error.at or 0)
    end = Position(line=start.line, character=start.character + 1)
    return Diagnostic(
        range=Range(start=start, end=end),
        message=describe(error),
        severity=DiagnosticSeverity.Error,
        source=SOURCE,
    )


def collect_diagnostics(text: str) -> List[Diagnostic]:
    """Parse and evaluate `text`; report the first error, if any."""
    try:
        evaluate_all(text)
    except ParenError as err:
        return [error_to_diagnostic(text, err)]
    return []


def word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    # expand to token boundaries (operators like + and - are words too)
    start = min(pos.character, len(line))
    while start > 0 and line[start - 1] not in WORD_BREAKS:
        start -= 1
    end = start
    while end < len(line) and line[end] not in WORD_BREAKS:
        end += 1
    word = line[start:end]
    return word if word else None
