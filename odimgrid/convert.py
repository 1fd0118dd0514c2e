"""
odimgrid.convert
================

Conversion of ODIM_H5 files to gridded time series.

.. autosummary::
    :toctree: generated/

    read_odim_h5_grid
    convert_odim_h5

"""

import logging
import os

from .config import get_dataset_prefix, get_default_producer
from .core.axes import DataDescriptor
from .core.grid_series import GridTimeSeries
from .core.parameters import DEFAULT_PARAMETER_TABLE
from .io.attributes import AttributeResolver
from .io.common import _test_arguments
from .io.hdf_source import open_odim_h5
from .io.info import describe_odim_h5
from .io.netcdf_writer import write_grid_netcdf
from .io.schema import enumerate_layout, read_object_kind, validate_odim_h5
from .map.copy import copy_datasets
from .map.reproject import parse_projection, reproject
from .model.level import create_level_axis
from .model.parameter import create_param_axis
from .model.place import create_place_axis
from .model.time import create_time_axis


def read_odim_h5_grid(filename, dataset_prefix=None, projection=None,
                      producer=None, table=DEFAULT_PARAMETER_TABLE,
                      verbose=False, **kwargs):
    """
    Read an ODIM_H5 file into a grid time series.

    Composites, images and Cartesian volumes are copied as is, polar
    volumes are resampled to an azimuthal equidistant grid centered at the
    radar.

    Parameters
    ----------
    filename : str
        Name of the ODIM_H5 file to read.
    dataset_prefix : str, optional
        Prefix of the numbered dataset groups. None uses the configured
        default, normally ``dataset``.
    projection : str, optional
        Target grid description, see :py:mod:`odimgrid.map.reproject`. None
        keeps the grid of the file.
    producer : tuple, optional
        (number, name) of the producer stored with the data. None uses the
        configured default.
    table : ParameterTable
        Product and quantity mapping.
    verbose : bool
        True to log the progress and the metadata of the file.

    Returns
    -------
    series : GridTimeSeries
        The converted data.

    """
    if verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    # test for non empty kwargs
    _test_arguments(kwargs)

    if dataset_prefix is None:
        dataset_prefix = get_dataset_prefix()
    if producer is None:
        producer = get_default_producer()

    target = None
    with open_odim_h5(filename) as source:
        resolver = AttributeResolver(source)
        validate_odim_h5(source, dataset_prefix)
        layout = enumerate_layout(source, dataset_prefix)
        logging.info(f'{filename}: {layout.ndatasets} datasets')
        if verbose:
            describe_odim_h5(source, layout)

        object_kind = read_object_kind(resolver)
        time_axis = create_time_axis(resolver, layout)
        param_axis = create_param_axis(resolver, layout, table)
        level_axis = create_level_axis(resolver, layout, object_kind)
        place_axis = create_place_axis(resolver, layout, object_kind)

        # fail on a bad target grid before any data is read
        if projection is not None:
            target = parse_projection(
                projection, (place_axis.ncols, place_axis.nrows))

        metadata = {'source_file': os.path.basename(filename),
                    'odim_object': object_kind.value}
        conventions = resolver.get_optional('/', 'Conventions', str)
        if conventions is not None:
            metadata['odim_conventions'] = conventions

        descriptor = DataDescriptor(time_axis, param_axis, level_axis,
                                    place_axis)
        logging.info(f'Allocating grid of shape {descriptor.shape}')
        series = GridTimeSeries(descriptor, producer=producer,
                                metadata=metadata)
        copy_datasets(resolver, series, layout, object_kind, table)

    if target is not None:
        series = reproject(series, target)
    return series


def convert_odim_h5(infile, outfile, **kwargs):
    """
    Convert an ODIM_H5 file to a netCDF grid file.

    Parameters
    ----------
    infile : str
        Name of the ODIM_H5 file.
    outfile : str
        Name of the netCDF file to write.
    kwargs
        Passed to :py:func:`read_odim_h5_grid`.

    Returns
    -------
    series : GridTimeSeries
        The converted data.

    """
    series = read_odim_h5_grid(infile, **kwargs)
    logging.info(f'Writing {outfile}')
    write_grid_netcdf(outfile, series)
    return series
