from __future__ import annotations

import unittest

from chartdraw.axis import TICK_LENGTH, draw_split_lines, draw_x_axis, draw_y_axis_labels, x_axis_height, y_axis_width
from chartdraw.draw import POSITION_LEFT, POSITION_RIGHT, Draw
from chartdraw.geometry import Box
from chartdraw.render import SurfaceRenderer
from chartdraw.scales import ValueScaler
from chartdraw.style import Style
from chartdraw.theme import DEFAULT_THEME


class _TextRecorder(SurfaceRenderer):
    def __init__(self) -> None:
        super().__init__(400, 300)
        self.texts: list[tuple[str, int, int]] = []
        self.strokes: list[list[tuple[int, int]]] = []

    def measure_text(self, body: str) -> Box:
        return Box(left=0, top=0, right=6 * len(body), bottom=10)

    def stroke(self) -> None:
        self.strokes.extend(item.points for item in self.take_path())

    def fill(self) -> None:
        self.take_path()

    def fill_stroke(self) -> None:
        self.take_path()

    def text(self, body: str, x: int, y: int) -> None:
        self.texts.append((body, x, y))

    def save(self, sink) -> None:
        sink.write(b"")


def _draw(left: int = 40, top: int = 20, right: int = 340, bottom: int = 220) -> Draw:
    return Draw(render=_TextRecorder(), box=Box(left=left, top=top, right=right, bottom=bottom))


class AxisTests(unittest.TestCase):
    def test_gutter_sizes(self) -> None:
        d = _draw()
        style = Style(font_color=(0, 0, 0, 255))
        self.assertEqual(x_axis_height(d, ["Mon"], style), TICK_LENGTH + 5 + 10 + 2)
        self.assertEqual(y_axis_width(d, [0.0, 50.0, 100.0], style), 18 + 10)

    def test_x_axis_labels_are_centered_in_slots(self) -> None:
        d = _draw(left=0, top=0, right=300, bottom=30)
        draw_x_axis(d, ["a", "bb", "c"], DEFAULT_THEME, "")
        self.assertEqual([t[0] for t in d.render.texts], ["a", "bb", "c"])
        self.assertEqual([t[1] for t in d.render.texts], [47, 144, 247])
        # baseline plus one tick per boundary
        self.assertEqual(len(d.render.strokes), 1 + 4)

    def test_split_lines_skip_zero(self) -> None:
        d = _draw(left=0, top=0, right=100, bottom=100)
        draw_split_lines(d, ValueScaler(0, 20, 100, divide_count=4), DEFAULT_THEME)
        self.assertEqual([points[0][1] for points in d.render.strokes], [75, 50, 25, 0])

    def test_y_axis_labels_sides(self) -> None:
        scaler = ValueScaler(0, 20, 200, divide_count=4)
        left = _draw()
        draw_y_axis_labels(left, scaler, DEFAULT_THEME, "", POSITION_LEFT)
        self.assertEqual(left.render.texts[0], ("0", 40 - 5 - 6, 20 + 200 + 5))
        right = _draw()
        draw_y_axis_labels(right, scaler, DEFAULT_THEME, "", POSITION_RIGHT)
        self.assertEqual(right.render.texts[-1], ("20", 40 + 300 + 5, 20 + 0 + 5))

    def test_unknown_position(self) -> None:
        with self.assertRaises(ValueError):
            draw_y_axis_labels(_draw(), ValueScaler(0, 1, 10), DEFAULT_THEME, "", "top")


if __name__ == "__main__":
    unittest.main()
