"""Theme mixin API check: runs the validators on a tree and applies the results.

Validators never touch the tree.  They return diagnostics, some of which carry
the edit that repairs them; :func:`apply_findings` then either reports the
diagnostics or, in fix mode, applies the edits.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from themelint.config import LintConfig
from themelint.model.diagnostic import Diagnostic
from themelint.model.node import Root
from themelint.validation.component import component_name_from_path
from themelint.validation.locator import MixinKind, locate_theme_mixins
from themelint.validation.system_mixin import validate_system_mixin
from themelint.validation.theme_mixin import validate_theme_mixin

logger = logging.getLogger(__name__)


class LintError(Exception):
    """Raised when linting produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Theme mixin check failed with {len(messages)} error(s): " + "; ".join(messages)
        )


def check_theme_mixin_api(root: Root, component_name: str) -> list[Diagnostic]:
    """Validate every public theme mixin of *root*, in document order."""
    diagnostics: list[Diagnostic] = []
    for mixin in locate_theme_mixins(root):
        logger.debug("Checking %s mixin at %s", mixin.kind.value, mixin.node.source)
        if mixin.kind is MixinKind.THEME:
            diagnostics.extend(validate_theme_mixin(mixin, component_name))
        else:
            diagnostics.extend(validate_system_mixin(mixin))
    return diagnostics


def apply_findings(findings: list[Diagnostic], config: LintConfig) -> list[Diagnostic]:
    """Report *findings*, or in fix mode apply their edits.

    Returns the diagnostics left for the caller: all of them in report mode,
    only those without an edit in fix mode.
    """
    remaining: list[Diagnostic] = []
    for finding in findings:
        if config.fix and finding.fix is not None:
            finding.fix.apply()
            logger.info("Fixed %s: %s", finding.location, finding.fix.describe())
            continue
        if finding.severity is not config.severity:
            finding = replace(finding, severity=config.severity)
        remaining.append(finding)
    return remaining


def lint_root(root: Root, config: LintConfig | None = None) -> list[Diagnostic]:
    """Check the theme mixins of one parsed file.

    Files that are not ``*-theme.scss`` files are skipped.  In fix mode the
    tree is modified in place.
    """
    config = config or LintConfig()
    component_name = component_name_from_path(root.file)
    if component_name is None or not config.enabled:
        logger.debug("Skipping %s", root.file)
        return []
    return apply_findings(check_theme_mixin_api(root, component_name), config)


def lint_or_raise(root: Root, config: LintConfig | None = None) -> list[Diagnostic]:
    """Lint; raises :class:`LintError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings) when no errors are found.
    """
    diagnostics = lint_root(root, config)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise LintError(errors)
    return diagnostics
