from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
import math

import numpy as np


DEFAULT_Y_DIVIDE_COUNT = 5


class ValueScaler:
    """Maps data values of one Y axis onto a pixel extent."""

    def __init__(self, vmin: float, vmax: float, size: int, divide_count: int = DEFAULT_Y_DIVIDE_COUNT) -> None:
        self.min = float(vmin)
        self.max = float(vmax)
        self.size = int(size)
        self.divide_count = divide_count

    def get_height(self, value: float) -> float:
        span = self.max - self.min
        if span <= 0 or not math.isfinite(value):
            return 0.0
        h = (float(value) - self.min) / span * self.size
        # Out-of-domain values are pinned to the edges instead of producing negative geometry.
        return float(min(max(h, 0.0), float(self.size)))

    def get_rest_height(self, value: float) -> float:
        return self.size - self.get_height(value)

    def values(self) -> list[float]:
        """Tick values: the domain ends plus the nice ticks strictly between them."""

        count = max(1, self.divide_count)
        span = self.max - self.min
        if span <= 0 or not math.isfinite(span):
            return np.linspace(self.min, self.max, count + 1).tolist()
        ticks = generate_nice_ticks(self.min, self.max, count + 1)
        eps = span * 1e-9
        inner = ticks[(ticks > self.min + eps) & (ticks < self.max - eps)]
        return [self.min, *inner.tolist(), self.max]

    def __repr__(self) -> str:
        return f"ValueScaler(min={self.min}, max={self.max}, size={self.size})"


def resolve_value_domain(
    values: Iterable[float],
    *,
    vmin: float | None = None,
    vmax: float | None = None,
    divide_count: int = DEFAULT_Y_DIVIDE_COUNT,
) -> tuple[float, float]:
    """Resolve a `(min, max)` domain that contains zero and ends on nice ticks.

    Explicit `vmin`/`vmax` always win over the data.
    """

    arr = np.asarray([float(v) for v in values], dtype=np.float64)
    finite = arr[np.isfinite(arr)]
    data_min = float(np.min(finite)) if finite.size else 0.0
    data_max = float(np.max(finite)) if finite.size else 1.0

    lo = float(vmin) if vmin is not None else min(0.0, data_min)
    hi = float(vmax) if vmax is not None else max(0.0, data_max)
    if hi <= lo:
        hi = lo + 1.0

    ticks = generate_nice_ticks(lo, hi, divide_count + 1)
    out_lo = lo if vmin is not None else float(ticks[0])
    out_hi = hi if vmax is not None else float(ticks[-1])
    return out_lo, out_hi


def generate_nice_ticks(vmin: float, vmax: float, target: int) -> np.ndarray:
    if target <= 0:
        raise ValueError("target must be > 0")
    if vmin == vmax:
        return np.asarray([vmin], dtype=np.float64)

    span = _nice_number(vmax - vmin, round_result=False)
    step = _nice_number(span / max(target - 1, 1), round_result=True)
    tick_min = np.floor(vmin / step) * step
    tick_max = np.ceil(vmax / step) * step

    ticks = np.arange(tick_min, tick_max + 0.5 * step, step, dtype=np.float64)
    # Normalize floating-point drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks


def format_value(value: float, *, step: float | None = None) -> str:
    if not np.isfinite(value):
        return str(value)
    if step is not None and np.isfinite(step) and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    decimals = _decimals_from_step(step) if step is not None else 6
    if abs_v != 0 and (abs_v >= 1e9 or abs_v < 1e-6):
        return f"{value:.4e}"

    d = Decimal(str(value))
    quant = Decimal("1").scaleb(-decimals)
    try:
        q = d.quantize(quant)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_axis_values(values: list[float]) -> list[str]:
    if not values:
        return []
    if len(values) == 1:
        return [format_value(values[0])]
    step = abs(values[1] - values[0])
    return [format_value(v, step=step) for v in values]


def _nice_number(value: float, *, round_result: bool) -> float:
    exp = np.floor(np.log10(value))
    frac = value / (10**exp)

    if round_result:
        if frac < 1.5:
            nice_frac = 1.0
        elif frac < 3.0:
            nice_frac = 2.0
        elif frac < 7.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0
    else:
        if frac <= 1.0:
            nice_frac = 1.0
        elif frac <= 2.0:
            nice_frac = 2.0
        elif frac <= 5.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0

    return float(nice_frac * (10**exp))


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    d = Decimal(str(step)).normalize()
    exp = d.as_tuple().exponent
    decimals = max(0, -int(exp))
    return min(12, decimals)
