"""Locate the theme mixins of a style sheet and classify them by kind."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from themelint.model.node import AtRule, Root

# Matches all theme mixin headers, e.g. `color($config-or-theme)`.
MIXIN_HEADER_RE = re.compile(r"^(density|color|typography|theme)\((.*)\)$")

# Mixins that are not meant to be consumed outside the library.
_PRIVATE_PREFIXES = ("_", "private-")


class MixinKind(Enum):
    """The four theme mixin flavours a component can expose."""

    THEME = "theme"
    DENSITY = "density"
    COLOR = "color"
    TYPOGRAPHY = "typography"


@dataclass(frozen=True)
class ThemeMixin:
    """A theme mixin declaration and its parsed header.

    Attributes:
        node: The ``@mixin`` at-rule.
        kind: Which flavour of theme mixin this is.
        args: Trimmed argument names, split naively on commas.
        args_start: Offset of the argument list inside ``node.params``.
        raw_args: The argument list exactly as written.
    """

    node: AtRule
    kind: MixinKind
    args: tuple[str, ...]
    args_start: int
    raw_args: str

    def argument_span(self, index: int) -> tuple[int, int]:
        """Return the ``(start, end)`` of argument *index* inside ``node.params``."""
        parts = self.raw_args.split(",")
        offset = self.args_start + sum(len(part) + 1 for part in parts[:index])
        part = parts[index]
        start = offset + len(part) - len(part.lstrip())
        return start, start + len(self.args[index])


def parse_mixin_header(node: AtRule) -> ThemeMixin | None:
    """Classify a ``@mixin`` at-rule, or return None if it is not a public theme mixin."""
    if node.params.startswith(_PRIVATE_PREFIXES):
        return None

    match = MIXIN_HEADER_RE.match(node.params)
    if match is None:
        return None

    # Naively assumes that mixin arguments can be retrieved by splitting on
    # commas.  Sass maps passed as arguments contain commas too, so such
    # mixins are mis-split.  There is no expression tree for at-rule params.
    raw_args = match.group(2)
    args = tuple(arg.strip() for arg in raw_args.split(","))
    return ThemeMixin(
        node=node,
        kind=MixinKind(match.group(1)),
        args=args,
        args_start=match.start(2),
        raw_args=raw_args,
    )


def locate_theme_mixins(root: Root) -> Iterator[ThemeMixin]:
    """Yield the public theme mixins of *root* in document order."""
    for node in root.walk_at_rules("mixin"):
        mixin = parse_mixin_header(node)
        if mixin is not None:
            yield mixin
