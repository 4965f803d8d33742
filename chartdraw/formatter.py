from __future__ import annotations

import re
from typing import Sequence, Union

from chartdraw.scales import format_value
from chartdraw.series import LabelFormatter

DEFAULT_VALUE_LAYOUT = "{c}"
_PLACEHOLDER = re.compile(r"\{([abc])\}")


def format_label_value(value: float) -> str:
    return format_value(value, step=0.01)


def new_label_formatter(
    series_names: Sequence[str],
    layout: str,
    categories: Sequence[str] = (),
) -> LabelFormatter:
    """Build a formatter from a template.

    `{a}` is replaced by the series name, `{b}` by the category of the data
    item and `{c}` by the value rounded to two decimals.
    """

    def format_label(series_index: int, value: float, data_index: int) -> str:
        name = series_names[series_index] if 0 <= series_index < len(series_names) else ""
        category = categories[data_index] if 0 <= data_index < len(categories) else ""
        fields = {"a": name, "b": category, "c": format_label_value(value)}
        return _PLACEHOLDER.sub(lambda m: fields[m.group(1)], layout)

    return format_label


def new_value_label_formatter(
    series_names: Sequence[str],
    formatter: Union[str, LabelFormatter, None],
    categories: Sequence[str] = (),
) -> LabelFormatter:
    if callable(formatter):
        return formatter
    return new_label_formatter(series_names, formatter or DEFAULT_VALUE_LAYOUT, categories)
