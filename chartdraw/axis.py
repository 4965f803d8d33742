from __future__ import annotations

from typing import Sequence

from chartdraw.axis_range import AxisRange
from chartdraw.draw import POSITION_LEFT, POSITION_RIGHT, Draw
from chartdraw.geometry import Point
from chartdraw.scales import ValueScaler, format_axis_values
from chartdraw.style import LABEL_FONT_SIZE_PX, LineStyle, Style
from chartdraw.theme import ThemeTokens

TICK_LENGTH = 5
LABEL_GAP = 5


def axis_label_style(theme: ThemeTokens, font_family: str) -> Style:
    return Style(font_color=theme.get_text_color(), font_size_px=LABEL_FONT_SIZE_PX, font_family=font_family)


def measure_labels(draw: Draw, labels: Sequence[str], style: Style) -> tuple[int, int]:
    """Return the widest and tallest label extents."""

    max_w = 0
    max_h = 0
    for text in labels:
        box = draw.measure_text(text, style)
        max_w = max(max_w, box.width())
        max_h = max(max_h, box.height())
    return max_w, max_h


def x_axis_height(draw: Draw, categories: Sequence[str], style: Style) -> int:
    _, h = measure_labels(draw, categories or ("0",), style)
    return TICK_LENGTH + LABEL_GAP + h + 2


def y_axis_width(draw: Draw, scaler_values: Sequence[float], style: Style) -> int:
    w, _ = measure_labels(draw, format_axis_values(list(scaler_values)), style)
    return w + LABEL_GAP * 2


def draw_x_axis(draw: Draw, categories: Sequence[str], theme: ThemeTokens, font_family: str) -> None:
    """Draw the category axis with its top edge on the plot baseline."""

    width = draw.width()
    line = LineStyle(stroke_color=theme.get_axis_stroke_color(), stroke_width=1)
    draw.line_stroke([Point(0, 0), Point(width, 0)], line)

    x_range = AxisRange(len(categories), width)
    for x in x_range.auto_divide():
        draw.line_stroke([Point(x, 0), Point(x, TICK_LENGTH)], line)

    style = axis_label_style(theme, font_family)
    for index, text in enumerate(categories):
        x0, x1 = x_range.get_range(index)
        box = draw.measure_text(text, style)
        draw.text_with_style(
            text,
            x0 + ((x1 - x0) - box.width()) // 2,
            TICK_LENGTH + LABEL_GAP + box.height(),
            style,
        )


def draw_split_lines(draw: Draw, scaler: ValueScaler, theme: ThemeTokens) -> None:
    line = LineStyle(stroke_color=theme.get_split_line_color(), stroke_width=1)
    width = draw.width()
    # The zero line coincides with the x axis baseline.
    for value in scaler.values()[1:]:
        y = int(scaler.get_rest_height(value))
        draw.line_stroke([Point(0, y), Point(width, y)], line)


def draw_y_axis_labels(
    draw: Draw,
    scaler: ValueScaler,
    theme: ThemeTokens,
    font_family: str,
    position: str = POSITION_LEFT,
) -> None:
    """Draw value labels just outside the plotting area `draw`."""

    if position not in (POSITION_LEFT, POSITION_RIGHT):
        raise ValueError(f"unsupported y axis position: {position}")
    style = axis_label_style(theme, font_family)
    values = scaler.values()
    for value, text in zip(values, format_axis_values(values)):
        box = draw.measure_text(text, style)
        y = int(scaler.get_rest_height(value)) + box.height() // 2
        if position == POSITION_LEFT:
            x = -LABEL_GAP - box.width()
        else:
            x = draw.width() + LABEL_GAP
        draw.text_with_style(text, x, y, style)
