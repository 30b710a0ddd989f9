"""Themelint model layer -- public type re-exports."""

from themelint.model.diagnostic import Diagnostic, Severity
from themelint.model.edit import Edit, EditError, InsertChild, ReplaceParams
from themelint.model.node import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Root,
    Rule,
    Source,
    StyleNode,
)

__all__ = [
    # tree
    "Source",
    "Container",
    "Root",
    "AtRule",
    "Rule",
    "Declaration",
    "Comment",
    "StyleNode",
    # edits
    "Edit",
    "EditError",
    "InsertChild",
    "ReplaceParams",
    # diagnostic
    "Severity",
    "Diagnostic",
]
