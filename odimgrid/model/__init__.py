"""
Builders of the time, parameter, level and horizontal axes of the output
from the metadata of an ODIM_H5 file.

"""

from .level import create_level_axis  # noqa
from .parameter import create_param_axis, resolve_parameter  # noqa
from .place import calculate_max_nbins, calculate_pvol_range  # noqa
from .place import create_place_axis  # noqa
from .time import create_time_axis, extract_origin_time  # noqa
from .time import extract_valid_time  # noqa

__all__ = [s for s in dir() if not s.startswith("_")]
