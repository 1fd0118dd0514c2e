"""
Filling the output grid from the payloads of an ODIM_H5 file, resampling of
polar volumes and reprojection of finished grids.

"""

from .copy import apply_conversion, copy_dataset, copy_datasets  # noqa
from .copy import flip_rows  # noqa
from .polar_to_cartesian import polar_sample_coordinates  # noqa
from .polar_to_cartesian import resample_pvol_dataset  # noqa
from .reproject import parse_projection, reproject  # noqa

__all__ = [s for s in dir() if not s.startswith("_")]
