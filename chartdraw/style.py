from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


Color = tuple[int, int, int, int]

TRANSPARENT: Color = (0, 0, 0, 0)
DEFAULT_FONT_SIZE_PX = 12.0
LABEL_FONT_SIZE_PX = 10.0


@dataclass(frozen=True)
class Style:
    fill_color: Optional[Color] = None
    stroke_color: Optional[Color] = None
    stroke_width: float = 0.0
    stroke_dash_array: tuple[float, ...] = ()
    font_color: Optional[Color] = None
    font_size_px: float = DEFAULT_FONT_SIZE_PX
    font_family: str = ""

    def should_draw_stroke(self) -> bool:
        return is_visible(self.stroke_color) and self.stroke_width > 0

    def should_draw_fill(self) -> bool:
        return is_visible(self.fill_color)


@dataclass(frozen=True)
class LineStyle:
    stroke_color: Optional[Color] = None
    stroke_width: float = 1.0
    stroke_dash_array: tuple[float, ...] = ()
    fill_color: Optional[Color] = None

    def style(self) -> Style:
        return Style(
            fill_color=self.fill_color,
            stroke_color=self.stroke_color,
            stroke_width=self.stroke_width,
            stroke_dash_array=self.stroke_dash_array,
        )


def is_visible(color: Optional[Color]) -> bool:
    return color is not None and color[3] > 0


def parse_color(value: object) -> Optional[Color]:
    """Accept `#RGB`, `#RGBA`, `#RRGGBB`, `#RRGGBBAA`, `rgb(...)`, `rgba(...)` or a 3/4-tuple."""

    if value is None:
        return None
    if isinstance(value, (tuple, list)):
        if len(value) == 3:
            r, g, b = (int(v) for v in value)
            return (r, g, b, 255)
        if len(value) == 4:
            r, g, b, a = (int(v) for v in value)
            return (r, g, b, a)
        raise ValueError(f"color tuple must have 3 or 4 components: {value!r}")
    if not isinstance(value, str):
        raise ValueError(f"unsupported color value: {value!r}")
    text = value.strip()
    if text in {"", "none"}:
        return None
    if text.startswith("#"):
        hex_value = text[1:]
        try:
            if len(hex_value) in (3, 4):
                parts = [int(ch * 2, 16) for ch in hex_value]
            elif len(hex_value) in (6, 8):
                parts = [int(hex_value[i : i + 2], 16) for i in range(0, len(hex_value), 2)]
            else:
                raise ValueError(f"invalid hex color: {value!r}")
        except ValueError as exc:
            raise ValueError(f"invalid hex color: {value!r}") from exc
        if len(parts) == 3:
            parts.append(255)
        return (parts[0], parts[1], parts[2], parts[3])
    if text.startswith("rgb"):
        numbers = text[text.find("(") + 1 : text.find(")")].split(",")
        if len(numbers) < 3:
            raise ValueError(f"invalid rgb color: {value!r}")
        try:
            r, g, b = (int(n) for n in numbers[:3])
            a = 255
            if len(numbers) >= 4:
                alpha = float(numbers[3])
                a = int(round(alpha * 255)) if alpha <= 1.0 else int(alpha)
        except ValueError as exc:
            raise ValueError(f"invalid rgb color: {value!r}") from exc
        return (r, g, b, max(0, min(255, a)))
    raise ValueError(f"unsupported color value: {value!r}")


def color_to_svg(color: Optional[Color]) -> str:
    if color is None or color[3] <= 0:
        return "none"
    r, g, b, a = color
    if a >= 255:
        return f"rgba({r},{g},{b},1.0)"
    return f"rgba({r},{g},{b},{a / 255.0:.2f})"
