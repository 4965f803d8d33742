from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Literal, Optional, Sequence, Union

from chartdraw.adapters import coerce_values
from chartdraw.style import Color


ChartType = Literal["bar", "line"]
CHART_TYPE_BAR: ChartType = "bar"
CHART_TYPE_LINE: ChartType = "line"

MARK_MAX = "max"
MARK_MIN = "min"
MARK_AVERAGE = "average"

DEFAULT_LABEL_DISTANCE = 5

LabelFormatter = Callable[[int, float, int], str]


@dataclass(frozen=True)
class ItemStyle:
    fill_color: Optional[Color] = None


@dataclass(frozen=True)
class SeriesItem:
    value: float
    style: ItemStyle = field(default_factory=ItemStyle)


@dataclass(frozen=True)
class SeriesLabel:
    show: bool = False
    # template string ("{a}" name, "{b}" category, "{c}" value) or callable
    formatter: Union[str, LabelFormatter, None] = None
    color: Optional[Color] = None
    distance: int = 0

    def resolved_distance(self) -> int:
        return self.distance if self.distance != 0 else DEFAULT_LABEL_DISTANCE


@dataclass(frozen=True)
class SeriesMarkPoint:
    data: tuple[str, ...] = ()
    symbol_size: int = 30


@dataclass(frozen=True)
class SeriesMarkLine:
    data: tuple[str, ...] = ()


@dataclass(frozen=True)
class Series:
    data: tuple[SeriesItem, ...]
    name: str = ""
    type: ChartType = CHART_TYPE_BAR
    axis_index: int = 0
    label: SeriesLabel = field(default_factory=SeriesLabel)
    mark_point: SeriesMarkPoint = field(default_factory=SeriesMarkPoint)
    mark_line: SeriesMarkLine = field(default_factory=SeriesMarkLine)
    # position in the chart's full series list; drives the palette color
    index: int = 0

    def values(self) -> list[float]:
        return [item.value for item in self.data]


class SeriesList(tuple):
    def __new__(cls, items: Sequence[Series] = ()) -> "SeriesList":
        return super().__new__(cls, tuple(items))

    def names(self) -> list[str]:
        return [s.name for s in self]

    def filter(self, chart_type: ChartType) -> "SeriesList":
        return SeriesList([s for s in self if s.type == chart_type])

    def with_axis(self, axis_index: int) -> "SeriesList":
        return SeriesList([s for s in self if s.axis_index == axis_index])


def new_series_from_values(values: Any, *, name: str = "", chart_type: ChartType = CHART_TYPE_BAR, **kwargs: Any) -> Series:
    items = tuple(SeriesItem(value=v) for v in coerce_values(values, label=name or "series"))
    return Series(data=items, name=name, type=chart_type, **kwargs)


def new_series_list_data(
    values: Sequence[Any],
    *,
    chart_type: ChartType = CHART_TYPE_BAR,
    names: Sequence[str] = (),
    label: SeriesLabel | None = None,
) -> SeriesList:
    out: list[Series] = []
    for index, row in enumerate(values):
        name = names[index] if index < len(names) else ""
        series = new_series_from_values(row, name=name, chart_type=chart_type, index=index)
        if label is not None:
            series = replace(series, label=label)
        out.append(series)
    return SeriesList(out)
