"""paren Language Server package.

This package provides:
- A pygls-based Language Server for paren.
- Pure helpers that turn parse and evaluation errors into LSP diagnostics.

Documents are parsed and evaluated on every change; evaluation has no side
effects so this is safe to do on unsaved buffers.
"""

__all__ = [
    "server",
    "diagnostics",
]
