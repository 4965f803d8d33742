from __future__ import annotations

import unittest
from unittest import mock

from chartdraw.draw import MAX_PARENT_HOPS, Draw, DrawOption, box_option, new_draw, padding_option
from chartdraw.errors import ConfigurationError, EncodingError, RendererInitError
from chartdraw.geometry import Box, Point
from chartdraw.render import RasterRenderer, SurfaceRenderer, VectorRenderer
from chartdraw.style import TRANSPARENT, LineStyle, Style


class _RecordingRenderer(SurfaceRenderer):
    def __init__(self, width: int = 200, height: int = 100) -> None:
        super().__init__(width, height)
        self.calls: list[tuple] = []

    def move_to(self, x: int, y: int) -> None:
        self.calls.append(("move_to", x, y))
        super().move_to(x, y)

    def line_to(self, x: int, y: int) -> None:
        self.calls.append(("line_to", x, y))
        super().line_to(x, y)

    def circle(self, radius: float, x: int, y: int) -> None:
        self.calls.append(("circle", radius, x, y))
        super().circle(radius, x, y)

    def stroke(self) -> None:
        self.calls.append(("stroke", self.stroke_color, self.stroke_dash_array))
        self.take_path()

    def fill(self) -> None:
        self.calls.append(("fill", self.fill_color))
        self.take_path()

    def fill_stroke(self) -> None:
        self.calls.append(("fill_stroke", self.fill_color))
        self.take_path()

    def text(self, body: str, x: int, y: int) -> None:
        self.calls.append(("text", body, x, y))

    def save(self, sink) -> None:
        sink.write(b"recorded")


class _BrokenRenderer(_RecordingRenderer):
    def save(self, sink) -> None:
        raise OSError("disk full")


def _root(width: int = 200, height: int = 100, renderer: SurfaceRenderer | None = None) -> Draw:
    render = renderer or _RecordingRenderer(width, height)
    return Draw(render=render, box=Box(left=0, top=0, right=width, bottom=height))


class NewDrawTests(unittest.TestCase):
    def test_requires_parent_or_dimensions(self) -> None:
        with self.assertRaises(ConfigurationError):
            new_draw(DrawOption())
        with self.assertRaises(ConfigurationError):
            new_draw(DrawOption(width=100, height=0))

    def test_root_creates_renderer_of_requested_type(self) -> None:
        svg = new_draw(DrawOption(width=120, height=80))
        png = new_draw(DrawOption(type="png", width=120, height=80))
        self.assertIsInstance(svg.render, VectorRenderer)
        self.assertIsInstance(png.render, RasterRenderer)
        self.assertEqual(svg.box, Box(left=0, top=0, right=120, bottom=80))
        self.assertIsNone(svg.parent())

    def test_unknown_output_type_fails_to_init(self) -> None:
        with self.assertRaises(RendererInitError):
            new_draw(DrawOption(type="gif", width=10, height=10))

    def test_backend_failure_is_wrapped(self) -> None:
        def _boom(width: int, height: int) -> SurfaceRenderer:
            raise ValueError("no surface")

        with mock.patch.dict("chartdraw.draw.RENDERERS", {"svg": _boom}):
            with self.assertRaises(RendererInitError) as ctx:
                new_draw(DrawOption(width=10, height=10))
        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    def test_child_inherits_parent_bounds_and_renderer(self) -> None:
        root = new_draw(DrawOption(width=300, height=200), padding_option(Box(left=10, top=20, right=10, bottom=20)))
        child = new_draw(DrawOption(parent=root))
        self.assertIs(child.render, root.render)
        self.assertIs(child.parent(), root)
        self.assertEqual(child.box, root.box)

    def test_child_with_size_is_carved_from_parent_top_left(self) -> None:
        root = new_draw(DrawOption(width=300, height=200), padding_option(Box(left=10, top=20, right=0, bottom=0)))
        child = new_draw(DrawOption(parent=root, width=50, height=40))
        self.assertEqual(child.box, Box(left=10, top=20, right=60, bottom=60))

    def test_padding_is_not_validated(self) -> None:
        root = new_draw(DrawOption(width=20, height=20), padding_option(Box(left=15, top=0, right=15, bottom=0)))
        self.assertEqual(root.width(), -10)

    def test_box_option_is_relative_to_parent(self) -> None:
        root = new_draw(DrawOption(width=300, height=200), padding_option(Box(left=10, top=20, right=0, bottom=0)))
        child = new_draw(DrawOption(parent=root), box_option(Box(left=0, top=100, right=50, bottom=120)))
        self.assertEqual(child.box, Box(left=10, top=120, right=60, bottom=140))


class DrawTreeTests(unittest.TestCase):
    def test_root_of_three_level_chain(self) -> None:
        root = _root()
        c1 = new_draw(DrawOption(parent=root))
        c2 = new_draw(DrawOption(parent=c1))
        c3 = new_draw(DrawOption(parent=c2))
        self.assertIs(c3.top(), root)
        self.assertIs(c3.root(), root)
        self.assertIsNone(root.top())
        self.assertIs(root.root(), root)

    def test_cyclic_chain_terminates(self) -> None:
        a = _root()
        b = new_draw(DrawOption(parent=a))
        a._parent = b
        with self.assertLogs("chartdraw.draw", level="WARNING") as logs:
            found = b.top()
        self.assertIn(found, (a, b))
        self.assertIn(str(MAX_PARENT_HOPS), logs.output[0])


class DrawPrimitiveTests(unittest.TestCase):
    def test_primitives_are_translated_by_box_offset(self) -> None:
        root = _root()
        child = new_draw(DrawOption(parent=root), padding_option(Box(left=7, top=3, right=0, bottom=0)))
        child.move_to(1, 2)
        child.line_to(4, 5)
        child.circle(2.0, 0, 0)
        child.text("hi", 10, 10)
        self.assertEqual(
            root.render.calls,
            [("move_to", 8, 5), ("line_to", 11, 8), ("circle", 2.0, 7, 3), ("text", "hi", 17, 13)],
        )

    def test_line_stroke_without_visible_stroke_issues_no_calls(self) -> None:
        d = _root()
        points = [Point(0, 0), Point(10, 10)]
        d.line_stroke(points, LineStyle(stroke_color=(255, 0, 0, 255), stroke_width=0))
        d.line_stroke(points, LineStyle(stroke_color=TRANSPARENT, stroke_width=2))
        d.line_stroke(points, LineStyle(stroke_color=None))
        self.assertEqual(d.render.calls, [])

    def test_line_stroke_traces_points(self) -> None:
        d = _root()
        d.line_stroke([Point(0, 0), Point(10, 0), Point(10, 10)], LineStyle(stroke_color=(0, 0, 0, 255), stroke_dash_array=(4.0, 2.0)))
        self.assertEqual(
            d.render.calls,
            [("move_to", 0, 0), ("line_to", 10, 0), ("line_to", 10, 10), ("stroke", (0, 0, 0, 255), (4.0, 2.0))],
        )

    def test_dashed_line_uses_default_pattern(self) -> None:
        d = _root()
        d.dashed_line([Point(0, 0), Point(10, 0)], LineStyle(stroke_color=(0, 0, 0, 255)))
        self.assertEqual(d.render.calls[-1], ("stroke", (0, 0, 0, 255), (4.0, 2.0)))

    def test_rect_is_translated(self) -> None:
        root = _root()
        child = new_draw(DrawOption(parent=root), padding_option(Box(left=5, top=6, right=0, bottom=0)))
        child.rect(Box(left=0, top=0, right=4, bottom=3), Style(fill_color=(9, 9, 9, 255)))
        self.assertEqual(
            root.render.calls,
            [
                ("move_to", 5, 6),
                ("line_to", 9, 6),
                ("line_to", 9, 9),
                ("line_to", 5, 9),
                ("line_to", 5, 6),
                ("fill_stroke", (9, 9, 9, 255)),
            ],
        )

    def test_set_background_traces_four_corners_and_fills(self) -> None:
        d = _root()
        d.set_background(30, 20, (1, 2, 3, 255))
        self.assertEqual(
            d.render.calls,
            [
                ("move_to", 0, 0),
                ("line_to", 30, 0),
                ("line_to", 30, 20),
                ("line_to", 0, 20),
                ("line_to", 0, 0),
                ("fill_stroke", (1, 2, 3, 255)),
            ],
        )

    def test_set_background_on_child_is_translated(self) -> None:
        root = _root()
        child = new_draw(DrawOption(parent=root), padding_option(Box(left=10, top=5, right=0, bottom=0)))
        child.set_background(30, 20, (1, 2, 3, 255))
        self.assertEqual(
            root.render.calls,
            [
                ("move_to", 10, 5),
                ("line_to", 40, 5),
                ("line_to", 40, 25),
                ("line_to", 10, 25),
                ("line_to", 10, 5),
                ("fill_stroke", (1, 2, 3, 255)),
            ],
        )

    def test_rect_skips_invisible_style(self) -> None:
        d = _root()
        d.rect(Box(left=0, top=0, right=5, bottom=5), Style())
        self.assertEqual(d.render.calls, [])

    def test_to_bytes_delegates_to_renderer(self) -> None:
        self.assertEqual(_root().to_bytes(), b"recorded")

    def test_to_bytes_failure_raises_encoding_error(self) -> None:
        d = _root(renderer=_BrokenRenderer())
        with self.assertRaises(EncodingError) as ctx:
            d.to_bytes()
        self.assertIsInstance(ctx.exception.__cause__, OSError)


if __name__ == "__main__":
    unittest.main()
