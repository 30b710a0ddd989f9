"""Validation of the ``color``, ``density`` and ``typography`` mixins.

These accept either a theme object or the narrower configuration, so they
have to start by extracting the configuration they work with.
"""

from __future__ import annotations

from themelint.model.diagnostic import Diagnostic
from themelint.model.edit import InsertChild
from themelint.model.node import Comment, Declaration
from themelint.validation.locator import MixinKind, ThemeMixin
from themelint.validation.rules import check_single_argument, report, strip_newlines_and_indentation

SYSTEM_ARGUMENT = "$config-or-theme"


def expected_config_variable(kind: MixinKind) -> str:
    return "$density-scale" if kind is MixinKind.DENSITY else "$config"


def expected_config_expressions(kind: MixinKind) -> list[str]:
    """Return the accepted extraction expressions, preferred one first."""
    if kind is MixinKind.TYPOGRAPHY:
        typography_config = f"theming.get-typography-config({SYSTEM_ARGUMENT})"
        return [
            f"typography.private-typography-to-2014-config({typography_config})",
            f"typography.private-typography-to-2018-config({typography_config})",
        ]
    return [f"theming.get-{kind.value}-config({SYSTEM_ARGUMENT})"]


def validate_system_mixin(mixin: ThemeMixin) -> list[Diagnostic]:
    """Check a ``density``, ``color`` or ``typography`` mixin."""
    node = mixin.node
    diagnostics = check_single_argument(
        mixin, SYSTEM_ARGUMENT, "Expected mixin to only declare a single argument."
    )

    expected_variable = expected_config_variable(mixin.kind)
    expected_values = expected_config_expressions(mixin.kind)
    extraction: Declaration | None = None
    statement_count = 0

    for child in node.nodes or ():
        if not isinstance(child, Comment):
            statement_count += 1
        if (
            isinstance(child, Declaration)
            and strip_newlines_and_indentation(child.value) in expected_values
        ):
            extraction = child
            break

    # Mixins without statements are intentionally empty.
    if extraction is None and statement_count > 0:
        alternatives = "\n".join(f"{expected_variable}: {value}" for value in expected_values)
        diagnostics.append(
            report(
                node,
                "Config is not extracted. Consumers could pass a theme object. "
                f"Extract the configuration by using one of the following:\n{alternatives}",
                fix=InsertChild(
                    node, 0, Declaration(prop=expected_variable, value=expected_values[0])
                ),
            )
        )
    elif extraction is not None and extraction.prop != expected_variable:
        diagnostics.append(
            report(
                extraction,
                f"For consistency, variable for configuration should be called: {expected_variable}",
            )
        )

    return diagnostics
