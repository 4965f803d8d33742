from __future__ import annotations

from typing import BinaryIO
import xml.etree.ElementTree as ET

from chartdraw.render.base import CirclePath, SurfaceRenderer
from chartdraw.style import color_to_svg, is_visible


SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _fmt(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


class VectorRenderer(SurfaceRenderer):
    """SVG document builder on top of ElementTree."""

    format = "svg"

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self.root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NAMESPACE,
                "width": str(self.width),
                "height": str(self.height),
                "viewBox": f"0 0 {self.width} {self.height}",
            },
        )

    def stroke(self) -> None:
        self._paint(fill=False, stroke=True)

    def fill(self) -> None:
        self._paint(fill=True, stroke=False)

    def fill_stroke(self) -> None:
        self._paint(fill=True, stroke=True)

    def _paint_attrs(self, *, fill: bool, stroke: bool) -> dict[str, str] | None:
        draw_fill = fill and is_visible(self.fill_color)
        draw_stroke = stroke and is_visible(self.stroke_color) and self.stroke_width > 0
        if not draw_fill and not draw_stroke:
            return None
        attrs = {
            "fill": color_to_svg(self.fill_color) if draw_fill else "none",
            "stroke": color_to_svg(self.stroke_color) if draw_stroke else "none",
        }
        if draw_stroke:
            attrs["stroke-width"] = _fmt(self.stroke_width)
            if self.stroke_dash_array:
                attrs["stroke-dasharray"] = ",".join(_fmt(v) for v in self.stroke_dash_array)
        return attrs

    def _paint(self, *, fill: bool, stroke: bool) -> None:
        path = self.take_path()
        attrs = self._paint_attrs(fill=fill, stroke=stroke)
        if attrs is None:
            return
        commands: list[str] = []
        for item in path:
            if isinstance(item, CirclePath):
                ET.SubElement(
                    self.root,
                    "circle",
                    {"cx": str(item.cx), "cy": str(item.cy), "r": _fmt(item.radius), **attrs},
                )
                continue
            for index, (x, y) in enumerate(item.points):
                commands.append(f"{'M' if index == 0 else 'L'} {x} {y}")
        if commands:
            ET.SubElement(self.root, "path", {"d": " ".join(commands), **attrs})

    def text(self, body: str, x: int, y: int) -> None:
        if not body or not is_visible(self.font_color):
            return
        node = ET.SubElement(
            self.root,
            "text",
            {
                "x": str(int(x)),
                "y": str(int(y)),
                "style": (
                    f"stroke:none;fill:{color_to_svg(self.font_color)};"
                    f"font-size:{_fmt(self.font_size_px)}px;font-family:'{self.font_family}'"
                ),
            },
        )
        node.text = body

    def save(self, sink: BinaryIO) -> None:
        sink.write(ET.tostring(self.root, encoding="unicode").encode("utf-8"))
