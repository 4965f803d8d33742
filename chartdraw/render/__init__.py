from chartdraw.render.base import SurfaceRenderer
from chartdraw.render.raster import RasterRenderer
from chartdraw.render.vector import VectorRenderer

RENDERERS = {
    "png": RasterRenderer,
    "svg": VectorRenderer,
}

__all__ = [
    "RENDERERS",
    "RasterRenderer",
    "SurfaceRenderer",
    "VectorRenderer",
]
