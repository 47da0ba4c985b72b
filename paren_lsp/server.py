from __future__ import annotations

"""
A minimal pygls-based Language Server for paren.

Features:
- Text synchronization (documents are kept by the pygls workspace)
- Diagnostics: the first parse or evaluation error of the document
- Hover: built-in signatures
- Completion: built-in names
"""

import logging
from typing import Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
)

from paren.builtin.env_builtin import BUILTIN_SIGNATURES
from paren_lsp.diagnostics import collect_diagnostics, word_at

logger = logging.getLogger(__name__)


class ParenLanguageServer(LanguageServer):
    CMD_NAME = "paren-ls"
    VERSION = "v0.1.0"

    def __init__(self):
        super().__init__(self.CMD_NAME, self.VERSION)


server = ParenLanguageServer()


def _publish_diagnostics(ls: ParenLanguageServer, uri: str) -> None:
    document = ls.workspace.get_text_document(uri)
    diags = collect_diagnostics(document.source)
    logger.debug("%s: %d diagnostic(s)", uri, len(diags))
    ls.publish_diagnostics(uri, diags)


# --- Text sync ---
@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: ParenLanguageServer, params: DidOpenTextDocumentParams):
    _publish_diagnostics(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: ParenLanguageServer, params: DidChangeTextDocumentParams):
    _publish_diagnostics(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: ParenLanguageServer, params: DidCloseTextDocumentParams):
    ls.publish_diagnostics(params.text_document.uri, [])


# --- Hover ---
@server.feature(TEXT_DOCUMENT_HOVER)
def on_hover(ls: ParenLanguageServer, params: HoverParams) -> Optional[Hover]:
    document = ls.workspace.get_text_document(params.text_document.uri)
    word = word_at(document.source, params.position)
    if word not in BUILTIN_SIGNATURES:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=BUILTIN_SIGNATURES[word]))


# --- Completion ---
@server.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(ls: ParenLanguageServer, params: CompletionParams) -> CompletionList:
    items = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    return CompletionList(is_incomplete=False, items=items)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    # Run the language server over stdio
    server.start_io()


if __name__ == "__main__":
    main()
