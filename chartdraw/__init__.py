from chartdraw.api import render_bar_chart
from chartdraw.axis_range import AxisRange
from chartdraw.bar_chart import BarChart, BarChartOption, BarLayout, YAxisOption, layout_bars
from chartdraw.config import RenderConfig, load_render_config
from chartdraw.draw import Draw, DrawOption, new_draw, padding_option
from chartdraw.errors import (
    ChartError,
    ConfigurationError,
    DivisionIndexError,
    EncodingError,
    RendererInitError,
    SeriesDataError,
)
from chartdraw.geometry import Box, Point
from chartdraw.scales import ValueScaler, resolve_value_domain
from chartdraw.series import Series, SeriesItem, SeriesLabel, SeriesList, new_series_list_data
from chartdraw.theme import ThemeTokens, get_theme

__all__ = [
    "AxisRange",
    "BarChart",
    "BarChartOption",
    "BarLayout",
    "Box",
    "ChartError",
    "ConfigurationError",
    "DivisionIndexError",
    "Draw",
    "DrawOption",
    "EncodingError",
    "Point",
    "RenderConfig",
    "RendererInitError",
    "Series",
    "SeriesDataError",
    "SeriesItem",
    "SeriesLabel",
    "SeriesList",
    "ThemeTokens",
    "ValueScaler",
    "YAxisOption",
    "get_theme",
    "layout_bars",
    "load_render_config",
    "new_draw",
    "new_series_list_data",
    "padding_option",
    "render_bar_chart",
    "resolve_value_domain",
]
