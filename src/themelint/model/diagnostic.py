"""Diagnostic model: structured findings about theme mixins."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from themelint.model.edit import Edit
from themelint.model.node import StyleNode


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a style sheet.

    Attributes:
        rule: Identifier for the rule that produced this diagnostic.
        message: Human-readable description of the problem.
        node: The node the problem is reported on.
        severity: How serious the issue is; set from the run configuration.
        fix: The edit that repairs the problem, or None when the problem
            cannot be repaired automatically.
    """

    rule: str
    message: str
    node: StyleNode
    severity: Severity = Severity.ERROR
    fix: Edit | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def fixable(self) -> bool:
        return self.fix is not None

    @property
    def location(self) -> str:
        if self.node.source is None:
            return "<unknown>"
        return str(self.node.source)

    def __str__(self) -> str:
        return f"{self.location}: {self.severity.value}: {self.message} [{self.rule}]"
