"""
odimgrid: conversion of OPERA ODIM_H5 radar files to gridded time series.

The data of a file is stored in a 4-axis (time, parameter, level, location)
grid which can be written to netCDF.

"""

from . import config  # noqa
from . import core  # noqa
from . import exceptions  # noqa
from . import io  # noqa
from . import map  # noqa
from . import model  # noqa
from . import testing  # noqa
from .convert import convert_odim_h5, read_odim_h5_grid  # noqa

__version__ = '0.1.0'

__all__ = [s for s in dir() if not s.startswith("_")]
