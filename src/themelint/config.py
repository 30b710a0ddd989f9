from __future__ import annotations

from dataclasses import dataclass

from themelint.model.diagnostic import Severity


@dataclass(frozen=True)
class LintConfig:
    """Run configuration for the theme mixin check.

    Attributes:
        enabled: When False, every file is skipped.
        fix: Apply the edits of fixable problems to the tree instead of
            reporting them.
        severity: Severity given to every reported diagnostic.
    """

    enabled: bool = True
    fix: bool = False
    severity: Severity = Severity.ERROR
