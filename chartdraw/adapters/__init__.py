from chartdraw.adapters.normalize import coerce_values

__all__ = ["coerce_values"]
