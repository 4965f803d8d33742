from __future__ import annotations

from typing import Sequence

import numpy as np

from chartdraw.style import Color


def new_canvas(width: int, height: int, color: Color = (0, 0, 0, 0)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    canvas[:, :, 3] = color[3]
    return canvas


def _blend(segment: np.ndarray, color: Color) -> None:
    src_a = color[3] / 255.0
    if src_a <= 0:
        return
    src_rgb = np.asarray(color[0:3], dtype=np.float32)
    dst_a = segment[..., 3:4].astype(np.float32) / 255.0
    out_a = src_a + dst_a * (1.0 - src_a)
    num = src_rgb * src_a + segment[..., :3].astype(np.float32) * dst_a * (1.0 - src_a)
    safe_a = np.where(out_a > 1e-6, out_a, 1.0)
    segment[..., :3] = np.clip(num / safe_a, 0, 255).astype(np.uint8)
    segment[..., 3] = np.clip(out_a[..., 0] * 255.0, 0, 255).astype(np.uint8)


def draw_pixel(dst: np.ndarray, x: int, y: int, color: Color) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    _blend(dst[y : y + 1, x : x + 1], color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: Color) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    _blend(dst[y : y + 1, xa : xb + 1], color)


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
    left = max(0, min(x0, x1))
    right = min(dst.shape[1] - 1, max(x0, x1))
    top = max(0, min(y0, y1))
    bottom = min(dst.shape[0] - 1, max(y0, y1))
    if right < left or bottom < top:
        return
    _blend(dst[top : bottom + 1, left : right + 1], color)


def fill_polygon(dst: np.ndarray, points: Sequence[tuple[int, int]], color: Color) -> None:
    pts = list(points)
    if len(pts) < 3:
        return
    # Axis-aligned rectangles are the common case (bars, backgrounds).
    xs = {x for x, _ in pts}
    ys = {y for _, y in pts}
    if len(xs) <= 2 and len(ys) <= 2:
        fill_rect(dst, min(xs), min(ys), max(xs), max(ys), color)
        return
    min_y = max(0, min(y for _, y in pts))
    max_y = min(dst.shape[0] - 1, max(y for _, y in pts))
    for y in range(min_y, max_y + 1):
        intersections: list[int] = []
        for (x0, y0), (x1, y1) in zip(pts, pts[1:] + pts[:1]):
            if y0 == y1:
                continue
            if min(y0, y1) <= y < max(y0, y1):
                intersections.append(int(round(x0 + (y - y0) * (x1 - x0) / (y1 - y0))))
        intersections.sort()
        for xa, xb in zip(intersections[0::2], intersections[1::2]):
            draw_hline(dst, xa, xb, y, color)


def fill_circle(dst: np.ndarray, cx: int, cy: int, radius: float, color: Color) -> None:
    if radius <= 0:
        return
    r = int(round(radius))
    r2 = radius * radius
    for yy in range(cy - r, cy + r + 1):
        dy2 = (yy - cy) ** 2
        if dy2 > r2:
            continue
        span = int((r2 - dy2) ** 0.5)
        draw_hline(dst, cx - span, cx + span, yy, color)
