"""
odimgrid.map.polar_to_cartesian
===============================

Nearest neighbour resampling of polar volume scans to the radar centered
Cartesian grid.

.. autosummary::
    :toctree: generated/

    polar_sample_coordinates
    resample_pvol_dataset

"""

import logging

import numpy as np

from ..core.parameters import DEFAULT_PARAMETER_TABLE
from ..exceptions import InconsistentLevelModel, InternalProjectionError
from ..exceptions import SchemaError
from ..model.parameter import resolve_parameter
from ..model.time import extract_valid_time
from .copy import apply_conversion, read_conversion


def polar_sample_coordinates(nrays, nbins, rstart, rscale, elangle):
    """
    Azimuth and ground range of every bin of a scan.

    Ray r is centered at azimuth 360 * (r + 0.5) / nrays degrees clockwise
    from north, bin b at slant range 1000 * rstart + (b + 0.5) * rscale
    meters which is projected to the ground with cos(elangle).

    Parameters
    ----------
    nrays, nbins : int
        Number of rays and of bins per ray.
    rstart : float
        Range of the start of the first bin in kilometers.
    rscale : float
        Bin length in meters.
    elangle : float
        Elevation angle in degrees.

    Returns
    -------
    azimuth : ndarray
        Azimuths in degrees, shape (nrays, nbins).
    ground_range : ndarray
        Ground ranges in meters, shape (nrays, nbins).

    """
    azimuth = 360. * (np.arange(nrays) + 0.5) / nrays
    slant_range = 1000. * rstart + (np.arange(nbins) + 0.5) * rscale
    ground_range = slant_range * np.cos(np.deg2rad(elangle))
    return np.meshgrid(azimuth, ground_range, indexing='ij')


def _last_occurrence(flat_index):
    """ Positions of the last occurrence of each distinct value. """
    reverse = flat_index[::-1]
    _, first = np.unique(reverse, return_index=True)
    return flat_index.size - 1 - first


def resample_pvol_dataset(resolver, series, layout, index,
                          table=DEFAULT_PARAMETER_TABLE):
    """
    Resample all data units of a polar volume scan.

    Every bin is written to the grid cell nearest to its center. When
    several bins fall into the same cell the one with the highest ray and
    bin number wins, cells hit by no bin keep the fill value. All scans are
    placed at the valid time of the first dataset, the level is the
    elevation angle of the scan.

    Parameters
    ----------
    resolver : AttributeResolver
        Attribute reader of the file.
    series : GridTimeSeries
        Output, modified in place. Its place axis must be centered at the
        radar.
    layout : OdimLayout
        Dataset numbering of the file.
    index : int
        Dataset number.
    table : ParameterTable
        Product and quantity mapping.

    """
    where = layout.dataset_path(index) + '/where'
    elangle = resolver.get(where, 'elangle', float)
    nbins = resolver.get(where, 'nbins', int)
    nrays = resolver.get(where, 'nrays', int)
    rstart = resolver.get(where, 'rstart', float)
    rscale = resolver.get(where, 'rscale', float)

    radar_lon = resolver.get('/where', 'lon', float)
    radar_lat = resolver.get('/where', 'lat', float)

    time_index = series.time.index(
        extract_valid_time(resolver, layout, layout.dataset_indices()[0]))
    level_index = series.level.index(elangle)
    if level_index is None:
        raise InconsistentLevelModel(
            f'Failed to activate elevation angle {elangle} in output data')

    place = series.place
    azimuth, ground_range = polar_sample_coordinates(
        nrays, nbins, rstart, rscale, elangle)
    x_center, y_center = place.area.lonlat_to_xy(radar_lon, radar_lat)
    x = x_center + ground_range * np.sin(np.deg2rad(azimuth))
    y = y_center + ground_range * np.cos(np.deg2rad(azimuth))
    lon, lat = place.area.xy_to_lonlat(x, y)

    rows, cols, inside = place.nearest_cell(lon, lat)
    if not np.all(inside):
        raise InternalProjectionError(
            'Internal error in projection calculations, '
            f'{np.count_nonzero(~inside)} bins of scan {index} fall outside '
            'the grid')
    flat_index = (rows * place.ncols + cols).ravel()
    keep = _last_occurrence(flat_index)

    for part, unit_path in enumerate(layout.unit_paths(index), start=1):
        parameter = resolve_parameter(resolver, unit_path, table)
        param_index = series.param.index(parameter)
        conversion = read_conversion(resolver, unit_path)

        logging.info(f'Resampling scan {index} part {part} at elevation '
                     f'{elangle}')
        payload = resolver.source.read_array(unit_path + '/data')
        if payload.shape != (nrays, nbins):
            raise SchemaError(
                f'{unit_path}/data has shape {payload.shape}, expected '
                f'{(nrays, nbins)} from nrays and nbins')

        values = apply_conversion(payload, conversion, series.fill_value)
        target = series.get_slice(time_index, param_index, level_index)
        np.put(target, flat_index[keep], values.ravel()[keep])
