"""
odimgrid.map.copy
=================

Copy gridded ODIM_H5 payloads into the output.

.. autosummary::
    :toctree: generated/

    Conversion
    read_conversion
    apply_conversion
    flip_rows
    copy_dataset
    copy_datasets

"""

import logging
from collections import namedtuple

import numpy as np

from ..core.kinds import ObjectKind
from ..core.parameters import DEFAULT_PARAMETER_TABLE
from ..exceptions import InconsistentLevelModel, SchemaError
from ..model.level import read_dataset_product
from ..model.parameter import resolve_parameter
from ..model.time import extract_valid_time

Conversion = namedtuple('Conversion', ['nodata', 'undetect', 'gain', 'offset'])
Conversion.__new__.__defaults__ = (None, None, None, None)
Conversion.__doc__ = """
Raw value conversion of a data unit. Each member is None if the file does
not declare it.
"""


def read_conversion(resolver, unit_path):
    """ nodata, undetect, gain and offset of a data unit. """
    return Conversion(
        nodata=resolver.find_optional(unit_path, 'what', 'nodata', float),
        undetect=resolver.find_optional(unit_path, 'what', 'undetect', float),
        gain=resolver.find_optional(unit_path, 'what', 'gain', float),
        offset=resolver.find_optional(unit_path, 'what', 'offset', float))


def apply_conversion(raw, conversion, fill_value):
    """
    Convert raw stored values to physical values.

    Values equal to nodata become fill_value, values equal to undetect are
    converted as if they were 0 and all others as value * gain + offset.
    A missing gain or offset leaves the value unchanged.

    Parameters
    ----------
    raw : array_like
        Raw values.
    conversion : Conversion
        Conversion parameters.
    fill_value : float
        Value of missing data.

    Returns
    -------
    values : ndarray
        Converted float64 values.

    """
    raw = np.asarray(raw, dtype='float64')
    gain = 1. if conversion.gain is None else conversion.gain
    offset = 0. if conversion.offset is None else conversion.offset

    values = raw * gain + offset
    if conversion.undetect is not None:
        values[raw == conversion.undetect] = 0. * gain + offset
    if conversion.nodata is not None:
        values[raw == conversion.nodata] = fill_value
    return values


def flip_rows(payload):
    """
    Reverse the row order of a payload.

    The first row of an ODIM_H5 image is the northernmost one while row 0 of
    the output is the southernmost one.
    """
    return payload[::-1, :]


def _find_level(resolver, series, unit_path):
    product = read_dataset_product(resolver, unit_path)
    if not product.has_level:
        return 0
    prodpar = resolver.find(unit_path, 'what', 'prodpar', float)
    index = series.level.index(prodpar)
    if index is None:
        raise InconsistentLevelModel(
            f'Failed to activate level {product.value} {prodpar} for '
            f'{unit_path} in output data')
    return index


def copy_dataset(resolver, series, layout, index,
                 table=DEFAULT_PARAMETER_TABLE):
    """
    Copy all data units of a gridded dataset.

    Parameters
    ----------
    resolver : AttributeResolver
        Attribute reader of the file.
    series : GridTimeSeries
        Output, modified in place.
    layout : OdimLayout
        Dataset numbering of the file.
    index : int
        Dataset number.
    table : ParameterTable
        Product and quantity mapping.

    """
    valid_time = extract_valid_time(resolver, layout, index)
    time_index = series.time.index(valid_time)
    nrows, ncols = series.place.nrows, series.place.ncols

    for part, unit_path in enumerate(layout.unit_paths(index), start=1):
        parameter = resolve_parameter(resolver, unit_path, table)
        param_index = series.param.index(parameter)
        level_index = _find_level(resolver, series, unit_path)
        conversion = read_conversion(resolver, unit_path)

        logging.info(f'Copying dataset {index} part {part} with valid time '
                     f'{valid_time}')
        logging.info(f'Reading {unit_path}/data')
        payload = resolver.source.read_array(unit_path + '/data')
        if payload.shape != (nrows, ncols):
            raise SchemaError(
                f'{unit_path}/data has shape {payload.shape}, expected '
                f'{(nrows, ncols)} from /where xsize and ysize')

        series.data[time_index, param_index, level_index] = apply_conversion(
            flip_rows(payload), conversion, series.fill_value)


def copy_datasets(resolver, series, layout, object_kind,
                  table=DEFAULT_PARAMETER_TABLE):
    """
    Fill the output from all datasets of a file.

    Polar volumes are resampled with
    :py:func:`~odimgrid.map.polar_to_cartesian.resample_pvol_dataset`, all
    other objects are copied as is.
    """
    from .polar_to_cartesian import resample_pvol_dataset

    for i in layout.dataset_indices():
        if object_kind == ObjectKind.PVOL:
            resample_pvol_dataset(resolver, series, layout, i, table)
        else:
            copy_dataset(resolver, series, layout, i, table)
