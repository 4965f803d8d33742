from __future__ import annotations

from typing import Sequence

import numpy as np

from chartdraw.render.canvas import draw_pixel
from chartdraw.style import Color


def draw_polyline(
    dst: np.ndarray,
    points: Sequence[tuple[int, int]],
    color: Color,
    width: int = 1,
    dash: Sequence[float] = (),
) -> None:
    if len(points) < 2:
        return
    pattern = [max(1, int(round(v))) for v in dash if v > 0]
    walked = 0
    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        walked = _draw_line_segment(dst, x0, y0, x1, y1, color=color, width=width, pattern=pattern, walked=walked)


def _dash_on(pattern: list[int], walked: int) -> bool:
    if not pattern:
        return True
    pos = walked % sum(pattern)
    for i, length in enumerate(pattern):
        if pos < length:
            return i % 2 == 0
        pos -= length
    return True


def _draw_line_segment(
    dst: np.ndarray,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    *,
    color: Color,
    width: int,
    pattern: list[int],
    walked: int,
) -> int:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        if _dash_on(pattern, walked):
            _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        walked += 1
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
    return walked


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: Color, width: int) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)
