from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from chartdraw.adapters import coerce_values
from chartdraw.bar_chart import BarChartOption, YAxisOption
from chartdraw.config import RenderConfig, load_render_config
from chartdraw.errors import SeriesDataError
from chartdraw.series import (
    CHART_TYPE_BAR,
    CHART_TYPE_LINE,
    ItemStyle,
    Series,
    SeriesItem,
    SeriesLabel,
    SeriesList,
    SeriesMarkLine,
    SeriesMarkPoint,
)
from chartdraw.style import parse_color
from chartdraw.theme import get_theme, validate_theme_tokens


def load_chart_document(
    path: str | Path,
    render_overrides: Mapping[str, Any] | None = None,
) -> tuple[BarChartOption, RenderConfig]:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return parse_chart_document(raw, render_overrides)


def parse_chart_document(
    raw: Mapping[str, Any],
    render_overrides: Mapping[str, Any] | None = None,
) -> tuple[BarChartOption, RenderConfig]:
    """Build chart options from a JSON-like document.

    Expected keys: `x_axis` (category names), `series` (list of series
    objects), optional `y_axis`, `theme_tokens` and `render` (see
    `load_render_config`). `render_overrides` win over `render`.
    """

    if not isinstance(raw, Mapping):
        raise SeriesDataError("chart document must be an object")
    render_opts = dict(_mapping(raw.get("render"), "`render`"))
    render_opts.update(render_overrides or {})
    config = load_render_config(render_opts)
    theme = validate_theme_tokens(_mapping(raw.get("theme_tokens"), "`theme_tokens`"), base=get_theme(config.theme))

    categories = raw.get("x_axis") or []
    if not isinstance(categories, list):
        raise SeriesDataError("`x_axis` must be a list of category names")
    series_raw = raw.get("series")
    if not isinstance(series_raw, list) or not series_raw:
        raise SeriesDataError("`series` must be a non-empty list")

    series_list = SeriesList([_parse_series(item, index) for index, item in enumerate(series_raw)])
    y_axis_raw = raw.get("y_axis") or []
    if not isinstance(y_axis_raw, list) or not all(isinstance(axis, Mapping) for axis in y_axis_raw):
        raise SeriesDataError("`y_axis` must be a list of objects")
    y_axis = tuple(
        YAxisOption(min=_bound(axis.get("min"), "`y_axis` `min`"), max=_bound(axis.get("max"), "`y_axis` `max`"))
        for axis in y_axis_raw
    )
    opt = BarChartOption(
        series_list=series_list,
        x_axis_data=tuple(str(c) for c in categories),
        theme=theme,
        font_family=config.font_family,
        y_axis_options=y_axis,
    )
    return opt, config


def _parse_series(raw: Any, index: int) -> Series:
    if not isinstance(raw, Mapping):
        raise SeriesDataError(f"series {index} must be an object")
    name = str(raw.get("name", ""))
    chart_type = raw.get("type", CHART_TYPE_BAR)
    if chart_type not in (CHART_TYPE_BAR, CHART_TYPE_LINE):
        raise SeriesDataError(f"series {index} has unsupported type: {chart_type!r}")

    data = raw.get("data")
    if not isinstance(data, list):
        raise SeriesDataError(f"series {index} `data` must be a list")
    values = coerce_values([d.get("value") if isinstance(d, Mapping) else d for d in data], label=name or f"series {index}")
    items = tuple(
        SeriesItem(
            value=value,
            style=ItemStyle(fill_color=parse_color(d.get("color")) if isinstance(d, Mapping) else None),
        )
        for value, d in zip(values, data)
    )

    label_raw = raw.get("label") or {}
    if not isinstance(label_raw, Mapping):
        raise SeriesDataError(f"series {index} `label` must be an object")
    formatter = label_raw.get("formatter")
    if formatter is not None and not isinstance(formatter, str):
        raise SeriesDataError(f"series {index} label `formatter` must be a string")
    label = SeriesLabel(
        show=bool(label_raw.get("show", False)),
        formatter=formatter,
        color=parse_color(label_raw.get("color")),
        distance=_integer(label_raw.get("distance", 0), f"series {index} label `distance`"),
    )
    return Series(
        data=items,
        name=name,
        type=chart_type,
        axis_index=_integer(raw.get("axis_index", 0), f"series {index} `axis_index`"),
        label=label,
        mark_point=SeriesMarkPoint(data=_mark_kinds(raw, "mark_point", index)),
        mark_line=SeriesMarkLine(data=_mark_kinds(raw, "mark_line", index)),
        index=index,
    )


def _mark_kinds(raw: Mapping[str, Any], key: str, index: int) -> tuple[str, ...]:
    kinds = raw.get(key) or []
    if not isinstance(kinds, list) or not all(isinstance(kind, str) for kind in kinds):
        raise SeriesDataError(f"series {index} `{key}` must be a list of mark names")
    return tuple(kinds)


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SeriesDataError(f"{what} must be an object")
    return value


def _integer(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SeriesDataError(f"{what} must be an integer")
    return value


def _bound(value: Any, what: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SeriesDataError(f"{what} must be a number")
    return float(value)
