from themelint.validation.component import component_name_from_path
from themelint.validation.locator import MixinKind, ThemeMixin, locate_theme_mixins
from themelint.validation.rules import RULE_NAME
from themelint.validation.validator import (
    LintError,
    apply_findings,
    check_theme_mixin_api,
    lint_or_raise,
    lint_root,
)

__all__ = [
    "RULE_NAME",
    "MixinKind",
    "ThemeMixin",
    "LintError",
    "apply_findings",
    "check_theme_mixin_api",
    "component_name_from_path",
    "lint_or_raise",
    "lint_root",
    "locate_theme_mixins",
]
