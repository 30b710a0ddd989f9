"""Style sheet tree model: Root, AtRule, Rule, Declaration, and Comment nodes.

Nodes are mutable so that fixes can be applied in place.  Equality is
identity: two declarations with the same text are still different nodes.

Every node carries a ``raws`` dict holding the whitespace and punctuation
that surrounded it in the source text, so that an untouched tree prints back
to exactly the text it was parsed from:

    before      text between the previous sibling (or the opening brace) and the node
    after_name  at-rules: text between the name and the params
    between     declarations: the colon and its surrounding whitespace;
                blocks: text between the prelude and the opening brace
    tail        statements: whitespace between the content and the semicolon
    semicolon   statements: whether a terminating semicolon was present
    after       containers: text between the last child and the closing brace
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class Source:
    """Where a node starts in its originating file (1-based line and column)."""

    file: str = "<input>"
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class Container:
    """Behaviour shared by nodes that hold an ordered list of children."""

    nodes: list[StyleNode] | None
    raws: dict[str, object]
    parent: Container | None

    def _adopt_children(self) -> None:
        for child in self.nodes or ():
            child.parent = self

    def walk(self) -> Iterator[StyleNode]:
        """Yield every descendant in document (pre-order) order."""
        for child in list(self.nodes or ()):
            yield child
            if isinstance(child, (AtRule, Rule)):
                yield from child.walk()

    def walk_at_rules(self, name: str | None = None) -> Iterator[AtRule]:
        """Yield descendant at-rules, optionally only those called *name*."""
        for node in self.walk():
            if isinstance(node, AtRule) and (name is None or node.name == name):
                yield node

    def index(self, child: StyleNode) -> int:
        for i, node in enumerate(self.nodes or ()):
            if node is child:
                return i
        raise ValueError("node is not a child of this container")

    def append(self, child: StyleNode) -> None:
        self.insert(len(self.nodes or ()), child)

    def insert(self, index: int, child: StyleNode) -> None:
        """Insert *child* before the child currently at *index*.

        Inserted nodes without ``before`` raws get the indentation of their
        new siblings, so the printed result reads like hand-written code.
        """
        if self.nodes is None:
            self.nodes = []
        if "before" not in child.raws:
            child.raws["before"] = self._infer_before(index)
        if not self.nodes and not isinstance(self, Root):
            after = str(self.raws.get("after", ""))
            if "\n" not in after:
                self.raws["after"] = self.newline + self.indentation
        elif self.nodes and index >= len(self.nodes) and self.nodes[-1].raws.get("semicolon") is False:
            # The old last statement now needs a terminator.
            self.nodes[-1].raws["semicolon"] = True
        child.parent = self
        self.nodes.insert(index, child)

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None and not isinstance(node, Root):
            depth += 1
            node = node.parent
        return depth

    @property
    def indentation(self) -> str:
        """Leading whitespace of the line this container starts on."""
        if isinstance(self, Root):
            return ""
        before = str(self.raws.get("before", ""))
        if "\n" in before:
            return _trailing_whitespace(before.rsplit("\n", 1)[1])
        return "  " * self.depth

    @property
    def newline(self) -> str:
        """Line ending of the nearest surrounding text that has one."""
        node: Container | None = self
        while node is not None:
            for key in ("before", "after", "between"):
                text = str(node.raws.get(key, ""))
                if "\n" in text:
                    return _newline(text)
            node = node.parent
        return "\n"

    def _infer_before(self, index: int) -> str:
        siblings = self.nodes or []
        if siblings:
            reference = siblings[index] if index < len(siblings) else siblings[-1]
            before = str(reference.raws.get("before", ""))
            if "\n" in before:
                return _newline(before) + _trailing_whitespace(before.rsplit("\n", 1)[1])
        if isinstance(self, Root):
            return self.newline if siblings else ""
        return self.newline + self.indentation + "  "


def _trailing_whitespace(text: str) -> str:
    return text[len(text.rstrip()):]


def _newline(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


@dataclass(eq=False)
class Declaration:
    """A ``property: value`` statement, including Sass variable assignments."""

    prop: str
    value: str
    source: Source | None = None
    raws: dict[str, object] = field(default_factory=dict)
    parent: Container | None = field(default=None, repr=False)


@dataclass(eq=False)
class Comment:
    """A block (``/* */``) or line (``//``) comment; ``text`` keeps its delimiters."""

    text: str
    source: Source | None = None
    raws: dict[str, object] = field(default_factory=dict)
    parent: Container | None = field(default=None, repr=False)


@dataclass(eq=False)
class AtRule(Container):
    """An ``@name params`` statement or block.

    ``nodes`` is ``None`` for a statement (``@include foo;``) and a list for a
    block (``@mixin foo { ... }``), even when the block is empty.
    """

    name: str
    params: str = ""
    nodes: list[StyleNode] | None = None
    source: Source | None = None
    raws: dict[str, object] = field(default_factory=dict)
    parent: Container | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._adopt_children()


@dataclass(eq=False)
class Rule(Container):
    """A style rule block such as ``.mat-button { ... }``."""

    selector: str
    nodes: list[StyleNode] = field(default_factory=list)
    source: Source | None = None
    raws: dict[str, object] = field(default_factory=dict)
    parent: Container | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._adopt_children()


@dataclass(eq=False)
class Root(Container):
    """The tree of one style sheet file."""

    nodes: list[StyleNode] = field(default_factory=list)
    source: Source | None = None
    raws: dict[str, object] = field(default_factory=dict)
    parent: Container | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._adopt_children()

    @property
    def file(self) -> str:
        """Path of the file this tree was parsed from."""
        return self.source.file if self.source is not None else "<input>"


StyleNode = Union[AtRule, Rule, Declaration, Comment]
