"""Validation of the top-level ``theme`` mixin of a component.

The mixin must read::

    @mixin theme($theme-or-color-config) {
      $theme: theming.private-legacy-get-theme($theme-or-color-config);
      @include theming.private-check-duplicate-theme-styles($theme, 'mat-button') {
        // all styles
      }
    }

Consumers may pass a legacy color configuration instead of a theme, hence the
extraction declaration.  Styles must be nested inside the duplicate check so
that including the mixin twice can be detected.
"""

from __future__ import annotations

from themelint.model.diagnostic import Diagnostic
from themelint.model.edit import InsertChild
from themelint.model.node import AtRule, Comment, Declaration
from themelint.validation.locator import ThemeMixin
from themelint.validation.rules import check_single_argument, report

THEME_ARGUMENT = "$theme-or-color-config"
THEME_VARIABLE = "$theme"
LEGACY_GET_THEME_EXPR = f"theming.private-legacy-get-theme({THEME_ARGUMENT})"


def duplicate_styles_check_expr(component_name: str) -> str:
    return (
        f"theming.private-check-duplicate-theme-styles({THEME_VARIABLE}, '{component_name}')"
    )


def validate_theme_mixin(mixin: ThemeMixin, component_name: str) -> list[Diagnostic]:
    """Check a ``theme`` mixin; every problem found is reported independently."""
    node = mixin.node
    diagnostics = check_single_argument(
        mixin, THEME_ARGUMENT, "Expected theme mixin to only declare a single argument."
    )
    check_expr = duplicate_styles_check_expr(component_name)

    legacy_decl: Declaration | None = None
    duplicate_check: AtRule | None = None
    legacy_decl_is_first = False
    has_nodes_outside_check = False
    seen_statement = False

    for child in node.nodes or ():
        if isinstance(child, Comment):
            continue
        if (
            legacy_decl is None
            and isinstance(child, Declaration)
            and child.value == LEGACY_GET_THEME_EXPR
        ):
            legacy_decl = child
            legacy_decl_is_first = not seen_statement
        elif (
            duplicate_check is None
            and isinstance(child, AtRule)
            and child.name == "include"
            and child.params == check_expr
        ):
            duplicate_check = child
        else:
            has_nodes_outside_check = True
        seen_statement = True

    if legacy_decl is None:
        diagnostics.append(
            report(
                node,
                "Legacy color API is not handled. Consumers could pass in a color "
                "configuration directly to the theme mixin. For backwards compatibility, "
                "use the following declaration to retrieve the theme object: "
                f"{THEME_VARIABLE}: {LEGACY_GET_THEME_EXPR}",
                fix=InsertChild(
                    node, 0, Declaration(prop=THEME_VARIABLE, value=LEGACY_GET_THEME_EXPR)
                ),
            )
        )
    elif legacy_decl.prop != THEME_VARIABLE:
        diagnostics.append(
            report(
                legacy_decl,
                f"For consistency, theme variable should be called: {THEME_VARIABLE}",
            )
        )

    if duplicate_check is None:
        # Goes right after the legacy declaration, which is inserted at 0 if missing.
        check_index = node.index(legacy_decl) + 1 if legacy_decl is not None else 1
        diagnostics.append(
            report(
                node,
                "Missing check for duplicative theme styles. Please include the "
                f"duplicate styles check mixin: {check_expr}",
                fix=InsertChild(node, check_index, AtRule(name="include", params=check_expr)),
            )
        )

    if has_nodes_outside_check:
        diagnostics.append(
            report(
                node,
                f'Expected nodes other than the "{LEGACY_GET_THEME_EXPR}" '
                "declaration to be nested inside the duplicate styles check.",
            )
        )

    if legacy_decl is not None and not legacy_decl_is_first:
        diagnostics.append(
            report(legacy_decl, "Legacy configuration should be retrieved first in theme mixin.")
        )

    return diagnostics
