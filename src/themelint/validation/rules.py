"""Building blocks shared by the theme mixin validators."""

from __future__ import annotations

import re

from themelint.model.diagnostic import Diagnostic
from themelint.model.edit import Edit, ReplaceParams
from themelint.model.node import StyleNode
from themelint.validation.locator import ThemeMixin

RULE_NAME = "material/theme-mixin-api"

_NEWLINE_INDENT_RE = re.compile(r"[\r\n]\s+")


def report(node: StyleNode, message: str, fix: Edit | None = None) -> Diagnostic:
    """Create a diagnostic for this rule."""
    return Diagnostic(rule=RULE_NAME, message=message, node=node, fix=fix)


def check_single_argument(
    mixin: ThemeMixin, expected_name: str, arity_message: str
) -> list[Diagnostic]:
    """Require exactly one argument, called *expected_name*.

    A misnamed argument can be renamed in place; a wrong argument count is
    only reported.
    """
    if len(mixin.args) != 1:
        return [report(mixin.node, arity_message)]
    if mixin.args[0] != expected_name:
        start, end = mixin.argument_span(0)
        return [
            report(
                mixin.node,
                f"Expected first mixin argument to be called `{expected_name}`.",
                fix=ReplaceParams(mixin.node, start, end, expected_name),
            )
        ]
    return []


def strip_newlines_and_indentation(value: str) -> str:
    """Strip newlines from a string and any whitespace immediately after them."""
    return _NEWLINE_INDENT_RE.sub("", value)
