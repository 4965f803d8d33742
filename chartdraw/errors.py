from __future__ import annotations


class ChartError(Exception):
    pass


class ConfigurationError(ChartError):
    pass


class RendererInitError(ChartError):
    pass


class EncodingError(ChartError):
    pass


class SeriesDataError(ChartError):
    pass


class DivisionIndexError(ChartError, IndexError):
    pass
