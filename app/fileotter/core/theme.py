"""Color theme for fileotter CLI output.

Colors are configured in the ``[colors]`` section of config.toml and
converted into a Rich theme.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")

# Style name -> (color field, extra attributes)
_STYLE_MAP: dict[str, tuple[str, str]] = {
    "text": ("text", ""),
    "muted": ("muted", ""),
    "dim": ("muted", ""),
    "header": ("header", ""),
    "bold_header": ("header", "bold"),
    "border": ("border", ""),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "info": ("info", ""),
    "directory": ("directory", "bold"),
    "file": ("file", ""),
    "symlink": ("symlink", "italic"),
}


class ThemeColors(BaseModel):
    """Palette used by tables and status messages.

    Every field takes a ``#RGB`` or ``#RRGGBB`` hex code.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    directory: str = "#0e8ac8"
    file: str = "#ffffff"
    symlink: str = "#d44ebc"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, value: object, info: Any) -> str:
        name = info.field_name
        if not isinstance(value, str):
            raise ValueError(f"{name}: color must be a string, got {type(value).__name__}")
        color = value.strip()
        if color[:1] != "#":
            raise ValueError(f"{name}: color must start with '#', got {color!r}")
        if len(color) not in (4, 7):
            raise ValueError(f"{name}: {color!r} is not in #RGB or #RRGGBB form")
        if not _HEX_DIGITS.fullmatch(color[1:]):
            raise ValueError(f"{name}: invalid hex color {color!r}")
        return color


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme used by the shared consoles."""
    palette = colors or ThemeColors()
    styles = {}
    for style, (field, attrs) in _STYLE_MAP.items():
        color = getattr(palette, field)
        styles[style] = f"{attrs} {color}" if attrs else color
    return Theme(styles)
