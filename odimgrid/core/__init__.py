"""
Core odimgrid classes: the axes of the output grid, the map areas and the
gridded time series itself.

"""

from .area import Area, PlaceAxis  # noqa
from .axes import DataDescriptor, Level, LevelAxis, NO_LEVEL  # noqa
from .axes import ParamAxis, TimeAxis  # noqa
from .grid_series import GridTimeSeries  # noqa
from .kinds import LevelKind, ObjectKind, ProductKind  # noqa
from .parameters import DEFAULT_PARAMETER_TABLE, Parameter  # noqa
from .parameters import ParameterTable  # noqa

__all__ = [s for s in dir() if not s.startswith("_")]
