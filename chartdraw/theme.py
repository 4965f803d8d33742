from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Any, Mapping

from chartdraw.style import Color, parse_color

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

THEME_LIGHT = "light"
THEME_DARK = "dark"

DEFAULT_SERIES_COLORS = (
    "#5470C6",
    "#91CC75",
    "#FAC858",
    "#EE6666",
    "#73C0DE",
    "#3BA272",
    "#FC8452",
    "#9A60B4",
    "#EA7CCC",
)


@dataclass(frozen=True)
class ThemeTokens:
    """Color palette of a chart."""

    series_colors: tuple[str, ...] = DEFAULT_SERIES_COLORS
    text_color: str = "#464646"
    axis_stroke_color: str = "#6E7079"
    split_line_color: str = "#E0E6F1"
    background_color: str = "#FFFFFF"

    def get_series_color(self, index: int) -> Color:
        colors = self.series_colors
        color = parse_color(colors[index % len(colors)])
        assert color is not None
        return color

    def get_text_color(self) -> Color:
        return _color(self.text_color)

    def get_axis_stroke_color(self) -> Color:
        return _color(self.axis_stroke_color)

    def get_split_line_color(self) -> Color:
        return _color(self.split_line_color)

    def get_background_color(self) -> Color:
        return _color(self.background_color)


def _color(value: str) -> Color:
    color = parse_color(value)
    assert color is not None
    return color


LIGHT_THEME = ThemeTokens()
DARK_THEME = ThemeTokens(
    text_color="#EEEEEE",
    axis_stroke_color="#B9B8CE",
    split_line_color="#484753",
    background_color="#100C2A",
)

_THEMES: dict[str, ThemeTokens] = {
    THEME_LIGHT: LIGHT_THEME,
    THEME_DARK: DARK_THEME,
}

DEFAULT_THEME = LIGHT_THEME


def get_theme(name: str) -> ThemeTokens:
    try:
        return _THEMES[name]
    except KeyError:
        raise ValueError(f"Unknown theme: {name}") from None


def validate_theme_tokens(overrides: Mapping[str, Any] | None = None, *, base: ThemeTokens = DEFAULT_THEME) -> ThemeTokens:
    """Validate and merge user token overrides against `base`."""

    raw: dict[str, Any] = asdict(base)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in ("text_color", "axis_stroke_color", "split_line_color", "background_color"):
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ValueError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    series_colors = raw["series_colors"]
    if isinstance(series_colors, str) or not series_colors:
        raise ValueError("Token `series_colors` must be a non-empty list of hex colors")
    for value in series_colors:
        if not isinstance(value, str) or not _HEX_COLOR.match(value):
            raise ValueError("Token `series_colors` must be a non-empty list of hex colors")

    return ThemeTokens(
        series_colors=tuple(str(v) for v in series_colors),
        text_color=str(raw["text_color"]),
        axis_stroke_color=str(raw["axis_stroke_color"]),
        split_line_color=str(raw["split_line_color"]),
        background_color=str(raw["background_color"]),
    )
