"""Function table for a single evaluation.

State maps operator names to built-in handlers. It is assembled before
evaluation starts and is read-only while the program runs; a new State is
built for every evaluation.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from paren import Handler
from paren.errors import UnknownFunction
from paren.types.node import Identifier


class State:
    """Read-only mapping from operator name to handler."""

    __slots__ = ("functions",)

    def __init__(self, functions: Optional[Mapping[str, Handler]] = None):
        self.functions: Mapping[str, Handler] = MappingProxyType(dict(functions or {}))

    def lookup(self, identifier: Identifier) -> Handler:
        """Return the handler bound to `identifier`.

        Raises UnknownFunction (at the identifier's offset) if no handler with
        exactly that name exists.
        """
        try:
            return self.functions[identifier.text]
        except KeyError:
            raise UnknownFunction(identifier.at, identifier.text) from None

    def names(self) -> list[str]:
        return sorted(self.functions)

    def __contains__(self, name: object) -> bool:
        return name in self.functions

    def __iter__(self) -> Iterator[str]:
        return iter(self.functions)

    def __len__(self) -> int:
        return len(self.functions)

    def __repr__(self) -> str:
        return f"State({', '.join(self.names())})"
