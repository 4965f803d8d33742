from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, Sequence

from chartdraw.axis_range import AxisRange
from chartdraw.draw import Draw
from chartdraw.formatter import new_value_label_formatter
from chartdraw.geometry import Box, Point
from chartdraw.mark import MarkLinePainter, MarkLineRenderOption, MarkPointPainter, MarkPointRenderOption, do_render
from chartdraw.scales import ValueScaler
from chartdraw.series import CHART_TYPE_BAR, Series, SeriesList
from chartdraw.style import LABEL_FONT_SIZE_PX, Color, Style
from chartdraw.theme import DEFAULT_THEME, ThemeTokens


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class YAxisOption:
    min: Optional[float] = None
    max: Optional[float] = None


@dataclass(frozen=True)
class BarChartOption:
    series_list: SeriesList
    x_axis_data: tuple[str, ...] = ()
    theme: ThemeTokens = DEFAULT_THEME
    font_family: str = ""
    y_axis_options: tuple[YAxisOption, ...] = ()


@dataclass(frozen=True)
class LabelRenderOption:
    text: str
    style: Style
    x: int
    y: int


@dataclass(frozen=True)
class BarRect:
    series_index: int
    data_index: int
    box: Box
    fill_color: Color


@dataclass
class BarSeriesLayout:
    series: Series
    color: Color
    scaler: ValueScaler
    points: list[Optional[Point]]


@dataclass
class BarLayout:
    width: int = 0
    margin: int = 0
    bar_margin: int = 0
    bar_width: int = 0
    rects: list[BarRect] = field(default_factory=list)
    labels: list[LabelRenderOption] = field(default_factory=list)
    series: list[BarSeriesLayout] = field(default_factory=list)


def bar_spacing(width: int) -> tuple[int, int]:
    """Return `(margin, bar_margin)` for a category slot `width` pixels wide."""

    if width < 20:
        return 2, 2
    if width < 50:
        return 5, 3
    return 10, 5


def compute_bar_width(width: int, series_count: int, margin: int, bar_margin: int) -> int:
    """Width of one bar; a non-positive result is returned as is.

    Dense charts can leave no room for bars. The value is not raised to a
    minimum so the chart still renders (as zero-width or inverted rectangles)
    and callers can detect the condition.
    """

    if series_count <= 0:
        return 0
    bar_width = (width - 2 * margin - bar_margin * (series_count - 1)) // series_count
    if bar_width <= 0:
        LOGGER.warning(
            "bar width %d is not positive: slot=%dpx series=%d margin=%d bar_margin=%d",
            bar_width,
            width,
            series_count,
            margin,
            bar_margin,
        )
    return bar_width


def _scaler_for(series: Series, ranges: Sequence[ValueScaler]) -> ValueScaler:
    if 0 <= series.axis_index < len(ranges):
        return ranges[series.axis_index]
    LOGGER.warning("series %r uses missing y axis %d; falling back to axis 0", series.name, series.axis_index)
    return ranges[0]


def layout_bars(
    draw: Draw,
    series_list: SeriesList,
    categories: Sequence[str],
    ranges: Sequence[ValueScaler],
    *,
    theme: ThemeTokens = DEFAULT_THEME,
    font_family: str = "",
) -> BarLayout:
    """Compute bar rectangles, deferred labels and overlay points.

    Nothing is drawn here; text is only measured.
    """

    x_range = AxisRange(len(categories), draw.width())
    width = 0
    if x_range.divide_count > 0:
        x0, x1 = x_range.get_range(0)
        width = x1 - x0
    margin, bar_margin = bar_spacing(width)
    layout = BarLayout(width=width, margin=margin, bar_margin=bar_margin)
    if not series_list or not ranges:
        return layout

    bar_width = compute_bar_width(width, len(series_list), margin, bar_margin)
    layout.bar_width = bar_width
    bar_max_height = draw.height()
    series_names = series_list.names()
    divide_values = x_range.auto_divide()

    for index, series in enumerate(series_list):
        scaler = _scaler_for(series, ranges)
        series_color = theme.get_series_color(series.index)
        points: list[Optional[Point]] = [None] * len(series.data)
        formatter = new_value_label_formatter(series_names, series.label.formatter, categories)
        label_style = Style(
            font_color=series.label.color or theme.get_text_color(),
            font_size_px=LABEL_FONT_SIZE_PX,
            font_family=font_family,
        )

        if len(series.data) > x_range.divide_count:
            LOGGER.debug(
                "series %r truncated from %d to %d items",
                series.name,
                len(series.data),
                x_range.divide_count,
            )
        for j, item in enumerate(series.data[: x_range.divide_count]):
            x = divide_values[j] + margin + index * (bar_width + bar_margin)
            h = int(scaler.get_height(item.value))
            top = bar_max_height - h
            fill_color = item.style.fill_color or series_color

            layout.rects.append(
                BarRect(
                    series_index=index,
                    data_index=j,
                    box=Box(left=x, top=top, right=x + bar_width, bottom=bar_max_height - 1),
                    fill_color=fill_color,
                )
            )
            points[j] = Point(x=x + bar_width // 2, y=top)

            if not series.label.show:
                continue
            text = formatter(index, item.value, j)
            text_box = draw.measure_text(text, label_style)
            layout.labels.append(
                LabelRenderOption(
                    text=text,
                    style=label_style,
                    x=x + (bar_width - text_box.width()) // 2,
                    y=top - series.label.resolved_distance(),
                )
            )

        layout.series.append(BarSeriesLayout(series=series, color=series_color, scaler=scaler, points=points))

    return layout


class BarChart:
    """Draws the bars of `opt.series_list` into the plotting area `draw`."""

    def __init__(self, draw: Draw, opt: BarChartOption) -> None:
        self.draw = draw
        self.opt = opt

    def render(self, ranges: Sequence[ValueScaler]) -> Box:
        opt = self.opt
        d = self.draw
        series_list = opt.series_list.filter(CHART_TYPE_BAR)
        font_family = opt.font_family or d.font_family
        layout = layout_bars(d, series_list, opt.x_axis_data, ranges, theme=opt.theme, font_family=font_family)
        LOGGER.debug(
            "bar layout: slot=%d margin=%d bar_margin=%d bar_width=%d rects=%d labels=%d",
            layout.width,
            layout.margin,
            layout.bar_margin,
            layout.bar_width,
            len(layout.rects),
            len(layout.labels),
        )

        mark_point_painter = MarkPointPainter(d)
        mark_line_painter = MarkLinePainter(d)
        for item in layout.series:
            mark_point_painter.add(
                MarkPointRenderOption(
                    fill_color=item.color,
                    font_family=font_family,
                    series=item.series,
                    points=item.points,
                )
            )
            mark_line_painter.add(
                MarkLineRenderOption(
                    fill_color=item.color,
                    font_color=opt.theme.get_text_color(),
                    stroke_color=item.color,
                    font_family=font_family,
                    series=item.series,
                    range=item.scaler,
                )
            )

        for rect in layout.rects:
            d.rect(rect.box, Style(fill_color=rect.fill_color))
        # Labels go last so a later series never covers them.
        for label in layout.labels:
            d.text_with_style(label.text, label.x, label.y, label.style)

        do_render(mark_point_painter, mark_line_painter)
        return d.box
