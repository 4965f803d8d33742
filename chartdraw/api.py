from __future__ import annotations

import logging

from chartdraw.axis import (
    axis_label_style,
    draw_split_lines,
    draw_x_axis,
    draw_y_axis_labels,
    x_axis_height,
    y_axis_width,
)
from chartdraw.bar_chart import BarChart, BarChartOption, YAxisOption
from chartdraw.config import DEFAULT_CONFIG, RenderConfig
from chartdraw.draw import POSITION_LEFT, POSITION_RIGHT, DrawOption, box_option, new_draw, padding_option
from chartdraw.geometry import Box
from chartdraw.scales import ValueScaler, resolve_value_domain
from chartdraw.series import CHART_TYPE_BAR


LOGGER = logging.getLogger(__name__)


def resolve_axis_domains(opt: BarChartOption) -> list[tuple[float, float]]:
    """One `(min, max)` domain per y axis used by the bar series."""

    series_list = opt.series_list.filter(CHART_TYPE_BAR)
    axis_count = max([s.axis_index for s in series_list] + [len(opt.y_axis_options) - 1, 0]) + 1
    domains: list[tuple[float, float]] = []
    for axis_index in range(axis_count):
        axis_opt = opt.y_axis_options[axis_index] if axis_index < len(opt.y_axis_options) else YAxisOption()
        values: list[float] = []
        for series in series_list.with_axis(axis_index):
            values.extend(series.values()[: len(opt.x_axis_data)])
        domains.append(resolve_value_domain(values, vmin=axis_opt.min, vmax=axis_opt.max))
    return domains


def render_bar_chart(opt: BarChartOption, config: RenderConfig = DEFAULT_CONFIG) -> bytes:
    """Render a complete bar chart (background, axes, bars, labels, marks)."""

    font_family = opt.font_family or config.font_family
    surface = new_draw(DrawOption(type=config.type, width=config.width, height=config.height, font_family=font_family))
    surface.set_background(config.width, config.height, opt.theme.get_background_color())
    chart = new_draw(DrawOption(parent=surface), padding_option(config.padding_box()))

    domains = resolve_axis_domains(opt)
    label_style = axis_label_style(opt.theme, chart.font_family)
    unit_scalers = [ValueScaler(lo, hi, 1) for lo, hi in domains]
    left = y_axis_width(chart, unit_scalers[0].values(), label_style)
    right = y_axis_width(chart, unit_scalers[1].values(), label_style) if len(unit_scalers) > 1 else 0
    bottom = x_axis_height(chart, opt.x_axis_data, label_style)
    # Leave room above the plot for the top value label.
    top = chart.measure_text("0", label_style).height() // 2 + 2

    plot = new_draw(DrawOption(parent=chart), padding_option(Box(left=left, top=top, right=right, bottom=bottom)))
    ranges = [ValueScaler(lo, hi, plot.height()) for lo, hi in domains]
    LOGGER.debug("plot area %s, y domains %s", plot.box, domains)

    draw_split_lines(plot, ranges[0], opt.theme)
    BarChart(plot, opt).render(ranges)

    x_axis = new_draw(
        DrawOption(parent=plot),
        box_option(Box(left=0, top=plot.height(), right=plot.width(), bottom=plot.height() + bottom)),
    )
    draw_x_axis(x_axis, opt.x_axis_data, opt.theme, chart.font_family)
    draw_y_axis_labels(plot, ranges[0], opt.theme, chart.font_family, POSITION_LEFT)
    if len(ranges) > 1:
        draw_y_axis_labels(plot, ranges[1], opt.theme, chart.font_family, POSITION_RIGHT)

    return surface.to_bytes()
