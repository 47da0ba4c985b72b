"""Syntax tree for paren.

Each node records the byte offset of its first character in the source.
Nodes are frozen: the offset is fixed at construction and a Form owns its
children as an immutable tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Form:
    elements: tuple[Node, ...]
    at: int


@dataclass(frozen=True)
class Identifier:
    text: str
    at: int


@dataclass(frozen=True)
class Integer:
    value: int
    at: int


@dataclass(frozen=True)
class String:
    text: str
    at: int


Node = Union[Form, Identifier, Integer, String]


def at(node: Node) -> int:
    """Byte offset of `node` in the source it was parsed from."""
    return node.at
