"""Lark Transformer that converts a Sass parse tree into a style sheet tree."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from themelint.model.node import AtRule, Comment, Declaration, Root, Rule, Source, StyleNode
from themelint.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# @name, whitespace, params, trailing whitespace and inline block comments
_AT_RULE_RE = re.compile(
    r"@([\w-]+)(\s*)(.*?)((?:\s*/\*(?:[^*]|\*(?!/))*\*/)*\s*)", re.DOTALL
)

# property, colon with surrounding whitespace, value, trailing whitespace
_DECLARATION_RE = re.compile(r"([^:]+?)(\s*:\s*)(.*?)(\s*)", re.DOTALL)


class _Parsed:
    """A node together with the source offsets it spans."""

    def __init__(self, node: StyleNode, start: int, end: int):
        self.node = node
        self.start = start
        self.end = end


class ScssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a :class:`Root`.

    The text between parsed nodes (whitespace, stray semicolons) is kept in
    each node's ``before`` raw, so nothing of the source is lost.
    """

    def __init__(self, text: str, file: str) -> None:
        super().__init__()
        self._text = text
        self._file = file

    # ---- leaves ----

    def comment(self, items: list[Token]) -> _Parsed:
        token = items[0]
        node = Comment(text=str(token), source=self._source(token))
        return _Parsed(node, token.start_pos, token.end_pos)

    def empty(self, items: list[Token]) -> None:
        return None

    def trailing_comment(self, items: list[Token]) -> None:
        # Comments after a semicolon-less statement stay in the block's `after`.
        return None

    def statement(self, items: list[Token]) -> _Parsed:
        prelude, semicolon = items
        node = self._statement(prelude, semicolon=True)
        return _Parsed(node, prelude.start_pos, semicolon.end_pos)

    def last_statement(self, items: list[Token]) -> _Parsed:
        prelude = items[0]
        node = self._statement(prelude, semicolon=False)
        # Trailing whitespace belongs to the enclosing block's `after`.
        node.raws["tail"] = ""
        end = prelude.start_pos + len(str(prelude).rstrip())
        return _Parsed(node, prelude.start_pos, end)

    # ---- containers ----

    def block(self, items: list[object]) -> _Parsed:
        prelude, lbrace, rbrace = items[0], items[1], items[-1]
        assert isinstance(prelude, Token)
        assert isinstance(lbrace, Token) and isinstance(rbrace, Token)
        children, after = self._children(items[2:-1], lbrace.end_pos, rbrace.start_pos)
        text = str(prelude)
        node: StyleNode
        if text.startswith("@"):
            name, after_name, params, between = self._split_at_rule(prelude)
            node = AtRule(
                name=name,
                params=params,
                nodes=children,
                source=self._source(prelude),
                raws={"after_name": after_name, "between": between, "after": after},
            )
        else:
            selector = text.rstrip()
            node = Rule(
                selector=selector,
                nodes=children,
                source=self._source(prelude),
                raws={"between": text[len(selector):], "after": after},
            )
        return _Parsed(node, prelude.start_pos, rbrace.end_pos)

    def start(self, items: list[object]) -> Root:
        children, after = self._children(items, 0, len(self._text))
        return Root(nodes=children, source=Source(self._file, 1, 1), raws={"after": after})

    # ---- helpers ----

    def _source(self, token: Token) -> Source:
        return Source(self._file, token.line or 0, token.column or 0)

    def _children(
        self, items: list[object], start: int, end: int
    ) -> tuple[list[StyleNode], str]:
        """Collect parsed children, assigning the gaps between them as raws."""
        children: list[StyleNode] = []
        position = start
        for item in items:
            if not isinstance(item, _Parsed):
                continue
            item.node.raws["before"] = self._text[position:item.start]
            children.append(item.node)
            position = item.end
        return children, self._text[position:end]

    def _split_at_rule(self, prelude: Token) -> tuple[str, str, str, str]:
        match = _AT_RULE_RE.fullmatch(str(prelude))
        if match is None:
            raise ParseError(
                f"Invalid at-rule: {str(prelude).strip()!r}",
                file=self._file,
                line=prelude.line,
                column=prelude.column,
            )
        name, after_name, params, tail = match.groups()
        return name, after_name, params, tail

    def _statement(self, prelude: Token, semicolon: bool) -> StyleNode:
        text = str(prelude)
        if text.startswith("@"):
            name, after_name, params, tail = self._split_at_rule(prelude)
            return AtRule(
                name=name,
                params=params,
                source=self._source(prelude),
                raws={"after_name": after_name, "tail": tail, "semicolon": semicolon},
            )
        match = _DECLARATION_RE.fullmatch(text)
        if match is None:
            raise ParseError(
                f"Expected a declaration or an at-rule, got {text.strip()!r}",
                file=self._file,
                line=prelude.line,
                column=prelude.column,
            )
        prop, between, value, tail = match.groups()
        return Declaration(
            prop=prop,
            value=value,
            source=self._source(prelude),
            raws={"between": between, "tail": tail, "semicolon": semicolon},
        )


@lru_cache(maxsize=None)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_scss(source: str, file: str = "<input>") -> Root:
    """Parse Sass (SCSS syntax) source text into a style sheet tree.

    *file* is recorded on every node's :class:`Source` and is what the
    component-name resolver later looks at.
    """
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), file=file, line=line, column=column) from e
    try:
        return ScssTransformer(source, file).transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise
