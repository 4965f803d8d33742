from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import BinaryIO, Optional, Union

from chartdraw.geometry import Box
from chartdraw.render.text import DEFAULT_FONT_FAMILY, text_size
from chartdraw.style import DEFAULT_FONT_SIZE_PX, Color


@dataclass
class SubPath:
    points: list[tuple[int, int]] = field(default_factory=list)


@dataclass(frozen=True)
class CirclePath:
    cx: int
    cy: int
    radius: float


PathItem = Union[SubPath, CirclePath]


class SurfaceRenderer(ABC):
    """Absolute-coordinate drawing backend.

    Path operations (`move_to`, `line_to`, `circle`) accumulate into a pending
    path that is consumed by the next `stroke`, `fill` or `fill_stroke` call.
    Style setters persist until changed or `reset_style` is called.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"renderer size must be > 0, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._path: list[PathItem] = []
        self.reset_style()

    def reset_style(self) -> None:
        self.fill_color: Optional[Color] = None
        self.stroke_color: Optional[Color] = None
        self.stroke_width: float = 0.0
        self.stroke_dash_array: tuple[float, ...] = ()
        self.font_color: Optional[Color] = None
        self.font_size_px: float = DEFAULT_FONT_SIZE_PX
        self.font_family: str = DEFAULT_FONT_FAMILY

    def set_fill_color(self, color: Optional[Color]) -> None:
        self.fill_color = color

    def set_stroke_color(self, color: Optional[Color]) -> None:
        self.stroke_color = color

    def set_stroke_width(self, width: float) -> None:
        self.stroke_width = float(width)

    def set_stroke_dash_array(self, dash: tuple[float, ...]) -> None:
        self.stroke_dash_array = tuple(dash)

    def set_font_color(self, color: Optional[Color]) -> None:
        self.font_color = color

    def set_font_size(self, size_px: float) -> None:
        self.font_size_px = float(size_px)

    def set_font_family(self, family: str) -> None:
        self.font_family = family or DEFAULT_FONT_FAMILY

    def move_to(self, x: int, y: int) -> None:
        self._path.append(SubPath(points=[(int(x), int(y))]))

    def line_to(self, x: int, y: int) -> None:
        if not self._path or not isinstance(self._path[-1], SubPath):
            self._path.append(SubPath())
        self._path[-1].points.append((int(x), int(y)))  # type: ignore[union-attr]

    def circle(self, radius: float, x: int, y: int) -> None:
        self._path.append(CirclePath(cx=int(x), cy=int(y), radius=float(radius)))

    def rectangle(self, box: Box) -> None:
        self.move_to(box.left, box.top)
        self.line_to(box.right, box.top)
        self.line_to(box.right, box.bottom)
        self.line_to(box.left, box.bottom)
        self.line_to(box.left, box.top)

    def take_path(self) -> list[PathItem]:
        path, self._path = self._path, []
        return path

    def measure_text(self, body: str) -> Box:
        w, h = text_size(body, font_family=self.font_family, font_size_px=self.font_size_px)
        return Box(left=0, top=0, right=w, bottom=h)

    @abstractmethod
    def stroke(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def fill(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def fill_stroke(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def text(self, body: str, x: int, y: int) -> None:
        """Draw `body` with its baseline starting at (x, y)."""

        raise NotImplementedError

    @abstractmethod
    def save(self, sink: BinaryIO) -> None:
        raise NotImplementedError
