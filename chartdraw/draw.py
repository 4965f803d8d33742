from __future__ import annotations

from dataclasses import dataclass, replace
import io
import logging
from typing import Callable, Optional, Sequence

from chartdraw.errors import ConfigurationError, EncodingError, RendererInitError
from chartdraw.geometry import Box, Point
from chartdraw.render import RENDERERS, SurfaceRenderer
from chartdraw.render.text import DEFAULT_FONT_FAMILY
from chartdraw.style import Color, LineStyle, Style


LOGGER = logging.getLogger(__name__)

MAX_PARENT_HOPS = 50
DEFAULT_DASH = (4.0, 2.0)

POSITION_LEFT = "left"
POSITION_RIGHT = "right"


@dataclass(frozen=True)
class DrawOption:
    type: str = "svg"
    parent: Optional["Draw"] = None
    width: int = 0
    height: int = 0
    font_family: str = ""


Option = Callable[["Draw"], None]


def padding_option(padding: Box) -> Option:
    def apply(d: "Draw") -> None:
        d.box = d.box.inset(padding)

    return apply


def box_option(box: Box) -> Option:
    def apply(d: "Draw") -> None:
        d.box = box.translate(d.box.left, d.box.top)

    return apply


class Draw:
    """A rectangular region of a shared drawing surface.

    Coordinates passed to the drawing methods are local to the region; they are
    offset by `box.left`/`box.top` before reaching the renderer. Only the root
    region creates the renderer, every descendant shares the same instance.
    """

    def __init__(self, render: SurfaceRenderer, box: Box, parent: Optional["Draw"] = None, font_family: str = "") -> None:
        self.render = render
        self.box = box
        self.font_family = font_family or DEFAULT_FONT_FAMILY
        self._parent = parent

    def parent(self) -> Optional["Draw"]:
        return self._parent

    def top(self) -> Optional["Draw"]:
        """Return the root of the parent chain, or None when this is a root."""

        if self._parent is None:
            return None
        t = self._parent
        for _ in range(MAX_PARENT_HOPS):
            if t._parent is None:
                return t
            t = t._parent
        LOGGER.warning("parent chain exceeds %d hops; returning the last visited draw", MAX_PARENT_HOPS)
        return t

    def root(self) -> "Draw":
        t = self.top()
        return self if t is None else t

    def width(self) -> int:
        return self.box.width()

    def height(self) -> int:
        return self.box.height()

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        try:
            self.render.save(buffer)
        except Exception as exc:
            raise EncodingError(f"failed to encode {getattr(self.render, 'format', 'chart')} output: {exc}") from exc
        return buffer.getvalue()

    def move_to(self, x: int, y: int) -> None:
        self.render.move_to(x + self.box.left, y + self.box.top)

    def line_to(self, x: int, y: int) -> None:
        self.render.line_to(x + self.box.left, y + self.box.top)

    def circle(self, radius: float, x: int, y: int) -> None:
        self.render.circle(radius, x + self.box.left, y + self.box.top)

    def text(self, body: str, x: int, y: int) -> None:
        self.render.text(body, x + self.box.left, y + self.box.top)

    def text_with_style(self, body: str, x: int, y: int, style: Style) -> None:
        self._apply_text_style(style)
        self.text(body, x, y)

    def measure_text(self, body: str, style: Optional[Style] = None) -> Box:
        if style is not None:
            self._apply_text_style(style)
        return self.render.measure_text(body)

    def _apply_text_style(self, style: Style) -> None:
        self.render.set_font_color(style.font_color)
        self.render.set_font_size(style.font_size_px)
        self.render.set_font_family(style.font_family or self.font_family)

    def line_stroke(self, points: Sequence[Point], style: LineStyle) -> None:
        s = style.style()
        if not s.should_draw_stroke():
            return
        r = self.render
        r.set_stroke_color(s.stroke_color)
        r.set_stroke_width(s.stroke_width)
        r.set_stroke_dash_array(s.stroke_dash_array)
        for index, point in enumerate(points):
            if index == 0:
                self.move_to(point.x, point.y)
            else:
                self.line_to(point.x, point.y)
        r.stroke()

    def dashed_line(self, points: Sequence[Point], style: LineStyle, dash: tuple[float, ...] = DEFAULT_DASH) -> None:
        self.line_stroke(points, replace(style, stroke_dash_array=dash))

    def rect(self, box: Box, style: Style) -> None:
        if not style.should_draw_fill() and not style.should_draw_stroke():
            return
        r = self.render
        r.set_fill_color(style.fill_color)
        r.set_stroke_color(style.stroke_color)
        r.set_stroke_width(style.stroke_width)
        r.set_stroke_dash_array(style.stroke_dash_array)
        r.rectangle(box.translate(self.box.left, self.box.top))
        r.fill_stroke()

    def fill_area(self, points: Sequence[Point], style: Style) -> None:
        if len(points) < 3 or not style.should_draw_fill():
            return
        r = self.render
        r.set_fill_color(style.fill_color)
        r.set_stroke_color(style.stroke_color)
        r.set_stroke_width(style.stroke_width)
        for index, point in enumerate(points):
            if index == 0:
                self.move_to(point.x, point.y)
            else:
                self.line_to(point.x, point.y)
        self.line_to(points[0].x, points[0].y)
        r.fill_stroke()

    def fill_circle(self, radius: float, x: int, y: int, color: Color) -> None:
        r = self.render
        r.set_fill_color(color)
        r.set_stroke_color(None)
        self.circle(radius, x, y)
        r.fill()

    def set_background(self, width: int, height: int, color: Color) -> None:
        r = self.render
        r.set_fill_color(color)
        r.set_stroke_color(None)
        r.set_stroke_width(0)
        self.move_to(0, 0)
        self.line_to(width, 0)
        self.line_to(width, height)
        self.line_to(0, height)
        self.line_to(0, 0)
        r.fill_stroke()


def new_draw(opt: DrawOption, *opts: Option) -> Draw:
    if opt.parent is None and (opt.width <= 0 or opt.height <= 0):
        raise ConfigurationError("draw requires a parent or a positive width and height")

    parent = opt.parent
    box = parent.box.clone() if parent is not None else Box()
    if opt.width != 0 and opt.height != 0:
        box = Box(left=box.left, top=box.top, right=box.left + opt.width, bottom=box.top + opt.height)

    if parent is not None:
        d = Draw(render=parent.render, box=box, parent=parent, font_family=opt.font_family or parent.font_family)
    else:
        d = Draw(render=_new_renderer(opt.type, box.right, box.bottom), box=box, font_family=opt.font_family)

    for o in opts:
        o(d)
    return d


def _new_renderer(output_type: str, width: int, height: int) -> SurfaceRenderer:
    factory = RENDERERS.get(output_type)
    if factory is None:
        raise RendererInitError(f"unsupported output type: {output_type!r}")
    try:
        return factory(width, height)
    except (ValueError, MemoryError) as exc:
        raise RendererInitError(f"cannot create {output_type} renderer of size {width}x{height}: {exc}") from exc
