"""Themelint: checks that Sass theme mixins follow a consistent API."""

__version__ = "0.1.0"

from themelint.config import LintConfig  # noqa: E402
from themelint.model import Diagnostic, Root, Severity  # noqa: E402
from themelint.parser import ParseError, parse_scss  # noqa: E402
from themelint.printer import to_scss  # noqa: E402
from themelint.validation import LintError, lint_or_raise, lint_root  # noqa: E402

__all__ = [
    "__version__",
    "Diagnostic",
    "LintConfig",
    "LintError",
    "ParseError",
    "Root",
    "Severity",
    "lint_or_raise",
    "lint_root",
    "parse_scss",
    "to_scss",
]
