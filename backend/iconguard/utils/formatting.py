"""Message formatting shared by the checks.

The UI renders messages verbatim as HTML, so number rendering here is part
of the output contract.
"""

from __future__ import annotations


def format_number(value: float) -> str:
    """Shortest rendering: ``24`` for whole numbers, ``1.75`` otherwise."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def px(value: float) -> str:
    return f"{format_number(value)}px"


def px2(value: float) -> str:
    """Two-decimal pixel value, e.g. ``2.99px``."""
    return f"{value:.2f}px"


def strong(text: str) -> str:
    return f"<strong>{text}</strong>"


def px2_flagged(value: float, flagged: bool) -> str:
    rendered = px2(value)
    return strong(rendered) if flagged else rendered
