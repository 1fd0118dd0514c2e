"""
odimgrid.map.reproject
======================

Resample a converted grid to another projection and area.

A target grid is described by a string of the form::

    <projection>|<lon1>,<lat1>,<lon2>,<lat2>[|<cols>x<rows>]

where the projection is anything pyproj understands (proj4 string, EPSG
code, WKT), the two points are the geographic lower-left and upper-right
corners and the optional size is the number of grid points. For example
``EPSG:3035|10,55,32,70|300x400``.

.. autosummary::
    :toctree: generated/

    parse_projection
    reproject

"""

import logging

import numpy as np
from scipy.interpolate import RegularGridInterpolator

from ..core.area import Area, PlaceAxis
from ..core.axes import DataDescriptor
from ..core.grid_series import GridTimeSeries
from ..exceptions import InvalidProjection


def _parse_floats(text, count, what):
    try:
        values = [float(v) for v in text.split(',')]
    except ValueError:
        values = []
    if len(values) != count:
        raise InvalidProjection(
            f'Expected {count} comma separated numbers for {what}, got '
            f'{text!r}')
    return values


def _parse_size(text):
    try:
        ncols, nrows = (int(v) for v in text.lower().split('x'))
    except ValueError:
        raise InvalidProjection(
            f'Grid size must be given as <cols>x<rows>, got {text!r}'
        ) from None
    if ncols < 1 or nrows < 1:
        raise InvalidProjection(f'Grid size must be positive, got {text!r}')
    return ncols, nrows


def _snap_to_edges(coord, start, stop):
    """ Move coordinates within rounding error of the grid edges onto them. """
    tolerance = 1e-9 * max(abs(stop - start), 1.)
    coord = np.where(np.abs(coord - start) < tolerance, start, coord)
    return np.where(np.abs(coord - stop) < tolerance, stop, coord)


def parse_projection(text, default_size=None):
    """
    Build a target grid from its string description.

    Parameters
    ----------
    text : str
        Grid description, see the module documentation.
    default_size : tuple of int, optional
        (ncols, nrows) used when the description has no size, typically the
        size of the source grid.

    Returns
    -------
    place_axis : PlaceAxis
        The target grid.

    """
    parts = text.split('|')
    if len(parts) not in (2, 3) or not parts[0].strip():
        raise InvalidProjection(
            'Projection must be given as '
            f'<projection>|<lon1>,<lat1>,<lon2>,<lat2>[|<cols>x<rows>], got '
            f'{text!r}')

    lon1, lat1, lon2, lat2 = _parse_floats(parts[1], 4, 'the area corners')
    if len(parts) == 3:
        ncols, nrows = _parse_size(parts[2])
    elif default_size is not None:
        ncols, nrows = default_size
    else:
        raise InvalidProjection(f'No grid size given in {text!r}')

    area = Area.from_corners(parts[0].strip(), (lon1, lat1), (lon2, lat2))
    return PlaceAxis(area, ncols, nrows)


def reproject(series, place_axis):
    """
    Bilinear interpolation of a grid time series to another grid.

    Interpolation is done in the projection of the source grid. Target
    cells outside the source grid, or next to a missing source cell, are
    missing.

    Parameters
    ----------
    series : GridTimeSeries
        Source data.
    place_axis : PlaceAxis
        Target grid.

    Returns
    -------
    result : GridTimeSeries
        New series with the time, parameter and level axes of the source.

    """
    source = series.place
    logging.info(f'Reprojecting {source.ncols}x{source.nrows} grid to '
                 f'{place_axis.ncols}x{place_axis.nrows} grid')

    lon, lat = place_axis.lonlat()
    x, y = source.area.lonlat_to_xy(lon, lat)
    x = _snap_to_edges(np.ravel(x), source.x[0], source.x[-1])
    y = _snap_to_edges(np.ravel(y), source.y[0], source.y[-1])
    points = np.column_stack((y, x))
    valid = np.all(np.isfinite(points), axis=1)

    descriptor = DataDescriptor(series.time, series.param, series.level,
                                place_axis)
    result = GridTimeSeries(descriptor, producer=series.producer,
                            fill_value=series.fill_value,
                            metadata=dict(series.metadata))

    ntime, nparam, nlevel = series.shape[:3]
    for t, p, k in np.ndindex(ntime, nparam, nlevel):
        raw = series.get_slice(t, p, k)
        values = raw.astype('float64')
        values[raw == raw.dtype.type(series.fill_value)] = np.nan
        interpolator = RegularGridInterpolator(
            (source.y, source.x), values, method='linear',
            bounds_error=False, fill_value=np.nan)

        out = np.full(points.shape[0], np.nan)
        out[valid] = interpolator(points[valid])
        out[~np.isfinite(out)] = series.fill_value
        result.data[t, p, k] = out.reshape(place_axis.nrows, place_axis.ncols)
    return result
