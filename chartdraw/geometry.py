from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Box:
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def width(self) -> int:
        return self.right - self.left

    def height(self) -> int:
        return self.bottom - self.top

    def clone(self) -> "Box":
        return replace(self)

    def translate(self, dx: int, dy: int) -> "Box":
        return Box(left=self.left + dx, top=self.top + dy, right=self.right + dx, bottom=self.bottom + dy)

    def inset(self, padding: "Box") -> "Box":
        # Negative extents are allowed through; callers must not over-pad.
        return Box(
            left=self.left + padding.left,
            top=self.top + padding.top,
            right=self.right - padding.right,
            bottom=self.bottom - padding.bottom,
        )

