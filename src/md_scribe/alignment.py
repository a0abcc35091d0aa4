from __future__ import annotations

from enum import StrEnum


class Alignment(StrEnum):
    """Per-column alignment of a Markdown table."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    DEFAULT = "default"


_SEPARATORS = {
    Alignment.LEFT: ":---",
    Alignment.CENTER: ":---:",
    Alignment.RIGHT: "---:",
}


def separator_for(value: str) -> str:
    # unknown values fall back to a plain separator
    return _SEPARATORS.get(str(value).lower(), "---")
