"""
odimgrid.core.grid_series
=========================

Gridded time series produced from an ODIM_H5 file.

.. autosummary::
    :toctree: generated/
    :template: dev_template.rst

    GridTimeSeries

"""

import numpy as np

from ..config import get_default_producer, get_fillvalue
from ..exceptions import AllocationFailure


class GridTimeSeries:
    """
    A 4-axis (time, parameter, level, location) store of float values.

    The data array is allocated once from the axes of the descriptor and is
    only modified in place afterwards. Cells which were never written hold
    the fill value.

    Attributes
    ----------
    descriptor : DataDescriptor
        Time, parameter, level and horizontal place axes.
    data : ndarray
        float32 array of shape (time, param, level, rows, columns). Row 0 is
        the southernmost row.
    fill_value : float
        Value of missing cells.
    producer : tuple
        (number, name) of the data producer.
    metadata : dict
        Free form metadata copied to the output file.

    """

    def __init__(self, descriptor, producer=None, fill_value=None,
                 metadata=None, data=None):
        if producer is None:
            producer = get_default_producer()
        if fill_value is None:
            fill_value = get_fillvalue()
        if metadata is None:
            metadata = {}

        self.descriptor = descriptor
        self.producer = (int(producer[0]), str(producer[1]))
        self.fill_value = float(fill_value)
        self.metadata = metadata

        if data is None:
            try:
                data = np.full(descriptor.shape, self.fill_value,
                               dtype='float32')
            except (MemoryError, ValueError) as err:
                raise AllocationFailure(
                    'Could not allocate memory for result data of shape '
                    f'{descriptor.shape}') from err
        elif data.shape != descriptor.shape:
            raise ValueError(
                f'data shape {data.shape} does not match the axes '
                f'{descriptor.shape}')
        self.data = data

    def __repr__(self):
        return (f'GridTimeSeries(producer={self.producer!r}, '
                f'{self.descriptor!r})')

    @property
    def time(self):
        return self.descriptor.time

    @property
    def param(self):
        return self.descriptor.param

    @property
    def level(self):
        return self.descriptor.level

    @property
    def place(self):
        return self.descriptor.place

    @property
    def shape(self):
        return self.data.shape

    @property
    def size(self):
        return self.data.size

    def masked_data(self):
        """ Data as a masked array with the missing cells masked. """
        return np.ma.masked_equal(self.data, self.fill_value, copy=False)

    def get_slice(self, time_index, param_index, level_index):
        """ (rows, columns) view of one time, parameter and level. """
        return self.data[time_index, param_index, level_index]
