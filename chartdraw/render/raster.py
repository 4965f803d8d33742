from __future__ import annotations

from typing import BinaryIO

import numpy as np
from PIL import Image

from chartdraw.render.base import CirclePath, SurfaceRenderer
from chartdraw.render.canvas import fill_circle, fill_polygon, new_canvas
from chartdraw.render.draw_lines import draw_polyline
from chartdraw.render.text import draw_text, text_size
from chartdraw.style import is_visible


class RasterRenderer(SurfaceRenderer):
    """RGBA numpy canvas encoded as PNG by Pillow."""

    format = "png"

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self.canvas = new_canvas(self.width, self.height)

    def stroke(self) -> None:
        self._paint(fill=False, stroke=True)

    def fill(self) -> None:
        self._paint(fill=True, stroke=False)

    def fill_stroke(self) -> None:
        self._paint(fill=True, stroke=True)

    def _paint(self, *, fill: bool, stroke: bool) -> None:
        path = self.take_path()
        fill_color = self.fill_color if fill and is_visible(self.fill_color) else None
        stroke_color = self.stroke_color if stroke and is_visible(self.stroke_color) and self.stroke_width > 0 else None
        width = max(1, int(round(self.stroke_width)))
        for item in path:
            if isinstance(item, CirclePath):
                if fill_color is not None:
                    fill_circle(self.canvas, item.cx, item.cy, item.radius, fill_color)
                if stroke_color is not None:
                    draw_polyline(self.canvas, _circle_outline(item), stroke_color, width=width)
                continue
            if fill_color is not None:
                fill_polygon(self.canvas, item.points, fill_color)
            if stroke_color is not None:
                draw_polyline(self.canvas, item.points, stroke_color, width=width, dash=self.stroke_dash_array)

    def text(self, body: str, x: int, y: int) -> None:
        if not body or not is_visible(self.font_color):
            return
        _, h = text_size(body, font_family=self.font_family, font_size_px=self.font_size_px)
        assert self.font_color is not None
        draw_text(
            self.canvas,
            int(x),
            int(y) - h,
            body,
            self.font_color,
            font_family=self.font_family,
            font_size_px=self.font_size_px,
        )

    def save(self, sink: BinaryIO) -> None:
        Image.fromarray(np.ascontiguousarray(self.canvas)).save(sink, format="PNG")


def _circle_outline(item: CirclePath, segments: int = 32) -> list[tuple[int, int]]:
    angles = np.linspace(0.0, 2.0 * np.pi, segments + 1)
    xs = np.rint(item.cx + item.radius * np.cos(angles)).astype(np.int32)
    ys = np.rint(item.cy + item.radius * np.sin(angles)).astype(np.int32)
    return list(zip(xs.tolist(), ys.tolist()))
