"""Serialize a style sheet tree back to Sass source text.

For a tree that came from :func:`themelint.parser.parse_scss` and was not
modified, the output is exactly the parsed text.  Nodes created without raws
fall back to conventional formatting.
"""

from __future__ import annotations

from themelint.model.node import AtRule, Comment, Declaration, Root, Rule, StyleNode

__all__ = ["to_scss"]


def to_scss(node: Root | StyleNode) -> str:
    """Return the Sass text for *node* and everything below it."""
    if isinstance(node, Root):
        return _children(node.nodes) + _raw(node, "after", "")
    if not isinstance(node, (Declaration, Comment, AtRule, Rule)):
        raise TypeError(f"Cannot print node of type {type(node).__name__}")
    before = _raw(node, "before", "")
    if isinstance(node, Declaration):
        return (
            before
            + node.prop
            + _raw(node, "between", ": ")
            + node.value
            + _raw(node, "tail", "")
            + _semicolon(node)
        )
    if isinstance(node, Comment):
        return before + node.text
    if isinstance(node, AtRule):
        head = before + "@" + node.name + _raw(node, "after_name", " " if node.params else "")
        head += node.params
        if node.nodes is None:
            return head + _raw(node, "tail", "") + _semicolon(node)
        return head + _raw(node, "between", " ") + _block(node.nodes, node)
    return before + node.selector + _raw(node, "between", " ") + _block(node.nodes, node)


def _raw(node: Root | StyleNode, key: str, default: str) -> str:
    value = node.raws.get(key)
    return default if value is None else str(value)


def _semicolon(node: StyleNode) -> str:
    return ";" if node.raws.get("semicolon", True) else ""


def _children(nodes: list[StyleNode]) -> str:
    return "".join(to_scss(child) for child in nodes)


def _block(nodes: list[StyleNode], owner: AtRule | Rule) -> str:
    default_after = "\n" + owner.indentation if nodes else ""
    return "{" + _children(nodes) + _raw(owner, "after", default_after) + "}"
