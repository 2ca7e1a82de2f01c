"""Unit tests for theme module.

Tests for color validation and Rich theme generation.
"""

import pytest
from fileotter.core.theme import ThemeColors, get_rich_theme
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.directory == "#0e8ac8"
        assert colors.error == "#f53263"

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts #RGB and #RRGGBB codes."""
        colors = ThemeColors(directory="#AABBCC", symlink="#abc")
        assert colors.directory == "#AABBCC"
        assert colors.symlink == "#abc"

    def test_whitespace_stripped(self) -> None:
        """Surrounding whitespace is removed."""
        assert ThemeColors(file="  #123456 ").file == "#123456"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_length(self) -> None:
        """ThemeColors rejects codes of the wrong length."""
        with pytest.raises(ValueError, match="#RGB or #RRGGBB"):
            ThemeColors(text="#abcd")

    def test_invalid_hex_digits(self) -> None:
        """ThemeColors rejects non-hex digits."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(text="#gggggg")

    def test_non_string_rejected(self) -> None:
        """Colors must be strings."""
        with pytest.raises(ValueError, match="must be a string"):
            ThemeColors(text=123)  # type: ignore[arg-type]

    def test_unknown_color_rejected(self) -> None:
        """Unknown color names are rejected."""
        with pytest.raises(ValueError):
            ThemeColors(background="#000000")  # type: ignore[call-arg]


class TestGetRichTheme:
    """Tests for get_rich_theme."""

    def test_returns_theme(self) -> None:
        """get_rich_theme returns a Rich Theme with entry styles."""
        theme = get_rich_theme()

        assert isinstance(theme, Theme)
        for name in ("directory", "file", "symlink", "error", "warning", "bold_header"):
            assert name in theme.styles

    def test_custom_colors_applied(self) -> None:
        """Configured colors end up in the theme."""
        theme = get_rich_theme(ThemeColors(directory="#112233"))

        style = theme.styles["directory"]
        assert style.bold is True
        assert style.color is not None
        assert style.color.name == "#112233"
