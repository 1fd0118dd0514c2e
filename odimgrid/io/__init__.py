"""
=====================================
Input and output (:mod:`odimgrid.io`)
=====================================

.. currentmodule:: odimgrid.io

Reading ODIM_H5 files and writing the converted grids.

Reading ODIM_H5 files
=====================

.. autosummary::
    :toctree: generated/

    open_odim_h5
    OdimSource
    AttributeResolver
    validate_odim_h5
    enumerate_layout
    describe_odim_h5

Writing grids
=============

.. autosummary::
    :toctree: generated/

    write_grid_netcdf
    read_grid_netcdf

"""

from .attributes import AttributeResolver, coerce_attribute  # noqa
from .hdf_source import OdimSource, open_odim_h5  # noqa
from .info import describe_odim_h5  # noqa
from .netcdf_writer import read_grid_netcdf, write_grid_netcdf  # noqa
from .schema import OdimLayout, count_data_units, count_datasets  # noqa
from .schema import enumerate_layout, read_object_kind  # noqa
from .schema import validate_odim_h5  # noqa

__all__ = [s for s in dir() if not s.startswith("_")]
