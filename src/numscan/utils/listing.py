"""Plain-text parameter listings for specs and kernels."""
from __future__ import annotations

from collections.abc import Iterable

MAX_LINE_LEN = 70
MAX_LABEL_LEN = 31


def format_parameter_listing(title: str, rows: Iterable[tuple[str, object]], description: str = "") -> str:
    """Render *rows* as a titled block of right-justified ``label: value`` lines.

    Values that render to an empty string are shown as ``<empty>``.
    """
    rule = " " + "=" * (MAX_LINE_LEN - 2)
    lines = [rule, title.center(MAX_LINE_LEN).rstrip()]
    if description:
        lines.append(description.center(MAX_LINE_LEN).rstrip())
    lines.append("Parameter Listing".center(MAX_LINE_LEN).rstrip())
    lines.append(rule)
    for label, value in rows:
        text = str(value) if value is not None else "None"
        if text == "":
            text = "<empty>"
        lines.append(f" {label.rjust(MAX_LABEL_LEN)}: {text}")
    lines.append(rule)
    return "\n".join(lines)
