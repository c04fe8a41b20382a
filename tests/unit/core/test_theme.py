"""Unit tests for the console color theme."""

import io
from pathlib import Path

import pytest
from dsclean.core.theme import BOLD_STYLES, ThemeColors, build_theme, load_theme
from pydantic import ValidationError
from rich.console import Console


def _write_theme(path: Path, body: str) -> Path:
    path.write_text(body)
    return path


class TestThemeColors:
    """Tests for color validation."""

    @pytest.mark.parametrize("color", ["#abc", "#A1B2C3", "  #0e8ac8  "])
    def test_accepts_hex(self, color: str) -> None:
        """Short and long hex codes are accepted, surrounding spaces stripped."""
        assert ThemeColors(found=color).found == color.strip()

    @pytest.mark.parametrize("color", ["0e8ac8", "#0e8a", "#zzzzzz", "blue", ""])
    def test_rejects_non_hex(self, color: str) -> None:
        """Anything but #RGB or #RRGGBB is rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(preview=color)

    def test_unknown_color_rejected(self) -> None:
        """Colors dsclean does not render are rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(sidebar="#ffffff")  # type: ignore[call-arg]


class TestLoadTheme:
    """Tests for load_theme."""

    def test_bundled_defaults(self, tmp_path: Path) -> None:
        """Without a user file the bundled colors match the model defaults."""
        assert load_theme(tmp_path / "missing.toml") == ThemeColors()

    def test_user_override_is_partial(self, tmp_path: Path) -> None:
        """A user file replaces only the colors it names."""
        user = _write_theme(tmp_path / "theme.toml", '[colors]\npath = "#123456"\n')

        colors = load_theme(user)

        assert colors.path == "#123456"
        assert colors.preview == ThemeColors().preview

    def test_invalid_user_color_falls_back(self, tmp_path: Path) -> None:
        """An invalid user color falls back to the defaults."""
        user = _write_theme(tmp_path / "theme.toml", '[colors]\nfound = "blue"\n')

        assert load_theme(user) == ThemeColors()

    def test_malformed_user_file_ignored(self, tmp_path: Path) -> None:
        """A user file that is not valid TOML is ignored."""
        user = _write_theme(tmp_path / "theme.toml", "[colors\n")

        assert load_theme(user) == ThemeColors()

    def test_colors_not_a_table_ignored(self, tmp_path: Path) -> None:
        """A scalar colors key is ignored."""
        user = _write_theme(tmp_path / "theme.toml", 'colors = "dark"\n')

        assert load_theme(user) == ThemeColors()


class TestBuildTheme:
    """Tests for build_theme."""

    def test_scan_styles_present(self) -> None:
        """Every style used by scan output is defined."""
        theme = build_theme(ThemeColors())

        for style in ("path", "preview", "found", "success", "error", "warning", "muted"):
            assert style in theme.styles
        assert "bold_header" in theme.styles

    def test_bold_styles(self) -> None:
        """Emphasized styles are bold, the others are plain colors."""
        theme = build_theme(ThemeColors())

        for name in BOLD_STYLES:
            assert theme.styles[name].bold is True
        assert not theme.styles["path"].bold
        assert theme.styles["bold_header"].bold is True

    def test_user_color_reaches_style(self, tmp_path: Path) -> None:
        """An override changes the color of the matching style."""
        user = _write_theme(tmp_path / "theme.toml", '[colors]\npreview = "#ff0000"\n')
        theme = build_theme(load_theme(user))

        assert theme.styles["preview"].color is not None
        assert theme.styles["preview"].color.name == "#ff0000"

    def test_markup_renders(self) -> None:
        """Scan markup renders with the theme without unknown-style errors."""
        buf = io.StringIO()
        console = Console(theme=build_theme(ThemeColors()), file=buf, color_system=None)

        console.print("[preview]x[/] [found]y[/] [path]z[/] [bold_header]h[/]")

        assert buf.getvalue().strip() == "x y z h"
