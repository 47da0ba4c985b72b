from paren.types.node import Node, Form, Identifier, Integer, String, at
from paren.types.state import State

__all__ = ["Node", "Form", "Identifier", "Integer", "String", "at", "State"]
