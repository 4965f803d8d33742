from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
import math
from typing import Optional, Sequence

from chartdraw.draw import Draw
from chartdraw.formatter import format_label_value
from chartdraw.geometry import Point
from chartdraw.scales import ValueScaler
from chartdraw.series import MARK_AVERAGE, MARK_MAX, MARK_MIN, Series
from chartdraw.style import LABEL_FONT_SIZE_PX, Color, LineStyle, Style


LOGGER = logging.getLogger(__name__)

MARK_POINT_TEXT_COLOR: Color = (238, 238, 238, 255)


class Renderer(ABC):
    @abstractmethod
    def render(self) -> None:
        raise NotImplementedError


def do_render(*renderers: Renderer) -> None:
    for renderer in renderers:
        renderer.render()


@dataclass(frozen=True)
class MarkPointRenderOption:
    fill_color: Color
    font_family: str
    series: Series
    points: Sequence[Optional[Point]]


@dataclass(frozen=True)
class MarkLineRenderOption:
    fill_color: Color
    font_color: Color
    stroke_color: Color
    font_family: str
    series: Series
    range: ValueScaler


def _extreme_index(series: Series, points: Sequence[Optional[Point]], kind: str) -> int | None:
    best: int | None = None
    for j, item in enumerate(series.data):
        if j >= len(points) or points[j] is None or not math.isfinite(item.value):
            continue
        if best is None:
            best = j
            continue
        if kind == MARK_MAX and item.value > series.data[best].value:
            best = j
        elif kind == MARK_MIN and item.value < series.data[best].value:
            best = j
    return best


def summarize(series: Series, kind: str) -> float | None:
    values = [v for v in series.values() if math.isfinite(v)]
    if not values:
        return None
    if kind == MARK_MAX:
        return max(values)
    if kind == MARK_MIN:
        return min(values)
    if kind == MARK_AVERAGE:
        return sum(values) / len(values)
    raise ValueError(f"unsupported mark type: {kind}")


class MarkPointPainter(Renderer):
    """Draws a pin with the value above the max/min data points of each series."""

    def __init__(self, draw: Draw) -> None:
        self.draw = draw
        self.options: list[MarkPointRenderOption] = []

    def add(self, opt: MarkPointRenderOption) -> None:
        self.options.append(opt)

    def render(self) -> None:
        for opt in self.options:
            for kind in opt.series.mark_point.data:
                if kind not in (MARK_MAX, MARK_MIN):
                    raise ValueError(f"unsupported mark point type: {kind}")
                index = _extreme_index(opt.series, opt.points, kind)
                if index is None:
                    LOGGER.debug("series %r has no point for mark %s", opt.series.name, kind)
                    continue
                point = opt.points[index]
                assert point is not None
                self._pin(opt, point, opt.series.data[index].value)

    def _pin(self, opt: MarkPointRenderOption, point: Point, value: float) -> None:
        d = self.draw
        radius = max(4, opt.series.mark_point.symbol_size // 2)
        cy = point.y - radius - radius // 2
        d.fill_circle(radius, point.x, cy, opt.fill_color)
        half = max(2, int(radius * 0.6))
        d.fill_area(
            [Point(point.x - half, cy + radius // 2), Point(point.x + half, cy + radius // 2), Point(point.x, point.y)],
            Style(fill_color=opt.fill_color),
        )
        text = format_label_value(value)
        style = Style(font_color=MARK_POINT_TEXT_COLOR, font_size_px=LABEL_FONT_SIZE_PX, font_family=opt.font_family)
        text_box = d.measure_text(text, style)
        d.text_with_style(text, point.x - text_box.width() // 2, cy + text_box.height() // 2, style)


class MarkLinePainter(Renderer):
    """Draws dashed horizontal lines at the max/min/average value of each series."""

    def __init__(self, draw: Draw) -> None:
        self.draw = draw
        self.options: list[MarkLineRenderOption] = []

    def add(self, opt: MarkLineRenderOption) -> None:
        self.options.append(opt)

    def render(self) -> None:
        d = self.draw
        width = d.width()
        for opt in self.options:
            for kind in opt.series.mark_line.data:
                value = summarize(opt.series, kind)
                if value is None:
                    continue
                y = int(opt.range.get_rest_height(value))
                d.fill_circle(3, 3, y, opt.fill_color)
                end_x = width - 12
                d.dashed_line([Point(6, y), Point(end_x, y)], LineStyle(stroke_color=opt.stroke_color, stroke_width=1))
                d.fill_area(
                    [Point(end_x, y - 4), Point(end_x + 8, y), Point(end_x, y + 4)],
                    Style(fill_color=opt.fill_color),
                )
                text = format_label_value(value)
                style = Style(font_color=opt.font_color, font_size_px=LABEL_FONT_SIZE_PX, font_family=opt.font_family)
                text_box = d.measure_text(text, style)
                d.text_with_style(text, end_x - text_box.width(), y - 4, style)
