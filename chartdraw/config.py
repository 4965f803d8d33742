from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from chartdraw.geometry import Box
from chartdraw.render import RENDERERS
from chartdraw.theme import THEME_LIGHT, get_theme

DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 400


@dataclass(frozen=True)
class RenderConfig:
    """Output settings of one chart render."""

    type: str = "svg"
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    padding: tuple[int, int, int, int] = (10, 10, 10, 10)
    theme: str = THEME_LIGHT
    font_family: str = ""

    def padding_box(self) -> Box:
        left, top, right, bottom = self.padding
        return Box(left=left, top=top, right=right, bottom=bottom)


DEFAULT_CONFIG = RenderConfig()


def load_render_config(overrides: Mapping[str, Any] | None = None) -> RenderConfig:
    """Validate and merge overrides against the defaults.

    `padding` accepts one value for all sides or `[left, top, right, bottom]`.
    """

    raw: dict[str, Any] = asdict(DEFAULT_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown render option: {key}")
            raw[key] = value

    if raw["type"] not in RENDERERS:
        raise ValueError(f"Option `type` must be one of {sorted(RENDERERS)}")

    for key in ("width", "height"):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"Option `{key}` must be a positive integer")

    padding = raw["padding"]
    if isinstance(padding, int) and not isinstance(padding, bool):
        padding = (padding,) * 4
    if not isinstance(padding, (list, tuple)) or len(padding) != 4:
        raise ValueError("Option `padding` must be an integer or four integers")
    if any(isinstance(v, bool) or not isinstance(v, int) or v < 0 for v in padding):
        raise ValueError("Option `padding` values must be non-negative integers")

    get_theme(str(raw["theme"]))

    if not isinstance(raw["font_family"], str):
        raise ValueError("Option `font_family` must be a string")

    return RenderConfig(
        type=str(raw["type"]),
        width=int(raw["width"]),
        height=int(raw["height"]),
        padding=tuple(int(v) for v in padding),  # type: ignore[arg-type]
        theme=str(raw["theme"]),
        font_family=raw["font_family"],
    )
