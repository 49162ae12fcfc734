"""Value formatting helpers for mockfunc log messages."""

from __future__ import annotations

from typing import Any


def truncate_text(text: str, max_length: int) -> str:
    """Truncate text to max_length, adding ellipsis if truncated."""
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def format_value(
    value: Any,  # noqa: ANN401
    max_length: int = 200,
    *,
    verbose: bool = False,
) -> str:
    """Render an input or output value for a log message.

    Falls back to the type name when the value's repr raises.
    """
    try:
        text = repr(value)
    except Exception:  # noqa: BLE001 - repr of arbitrary test values
        text = f"<{type(value).__name__} (repr failed)>"
    text = text.replace("\n", "\\n")
    if verbose:
        return text
    return truncate_text(text, max_length)
