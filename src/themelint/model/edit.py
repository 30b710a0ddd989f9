"""Edit model: in-place tree mutations that repair a reported problem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from themelint.model.node import AtRule, StyleNode


class EditError(Exception):
    """Raised when an edit no longer fits the tree it was computed for."""


@dataclass(frozen=True)
class InsertChild:
    """Insert *child* into *parent* before the child currently at *index*."""

    parent: AtRule
    index: int
    child: StyleNode

    def apply(self) -> None:
        if self.child.parent is not None:
            raise EditError("Cannot insert a node that already has a parent.")
        self.parent.insert(self.index, self.child)

    def describe(self) -> str:
        return f"insert child at index {self.index} of @{self.parent.name} {self.parent.params}"


@dataclass(frozen=True)
class ReplaceParams:
    """Replace ``params[start:end]`` of an at-rule with *text*."""

    node: AtRule
    start: int
    end: int
    text: str

    def apply(self) -> None:
        params = self.node.params
        if not 0 <= self.start <= self.end <= len(params):
            raise EditError(
                f"Span {self.start}:{self.end} is outside the params of "
                f"@{self.node.name} {params!r}."
            )
        self.node.params = params[: self.start] + self.text + params[self.end :]

    def describe(self) -> str:
        old = self.node.params[self.start : self.end]
        return f"replace {old!r} with {self.text!r} in @{self.node.name} params"


Edit = Union[InsertChild, ReplaceParams]
