"""Component-name resolution for theme files."""

from __future__ import annotations

import re
from pathlib import PurePath

# `_button-theme.scss` -> `button`
_THEME_FILE_RE = re.compile(r"_?(.*)-theme\.scss$")


def component_name_from_path(file_path: str) -> str | None:
    """Figure out the name of the component from a file path.

    Returns None when the file is not a ``*-theme.scss`` file.  Components of
    the MDC-based experimental package are prefixed with ``mat-mdc-``, other
    Material components with ``mat-``.
    """
    match = _THEME_FILE_RE.match(PurePath(file_path).name)
    if match is None:
        return None

    prefix = ""
    if "material-experimental" in file_path and "mdc-" in file_path:
        prefix = "mat-mdc-"
    elif "material" in file_path:
        prefix = "mat-"

    return prefix + match.group(1)
