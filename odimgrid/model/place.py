"""
odimgrid.model.place
====================

Horizontal placement of the output grid.

.. autosummary::
    :toctree: generated/

    corners_from_alternate
    create_cartesian_place
    calculate_pvol_range
    calculate_max_nbins
    create_pvol_place
    create_place_axis

"""

import logging
import math

from ..core.area import Area, PlaceAxis
from ..core.kinds import ObjectKind
from ..exceptions import UnsupportedObject
from ..io.schema import read_object_kind


def corners_from_alternate(projection, upper_left, lower_right):
    """
    Geographic lower-left and upper-right corners from the other two.

    Some producers give the upper-left and lower-right corners instead. In
    geographic coordinates these do not bound the projected rectangle, so
    the corners are projected, swapped in projected space and converted
    back.

    Parameters
    ----------
    projection : str or pyproj.CRS
        Projection of the grid.
    upper_left, lower_right : tuple of float
        (lon, lat) of the given corners.

    Returns
    -------
    lower_left, upper_right : tuple of float
        (lon, lat) of the corners bounding the projected rectangle.

    """
    ul_lon, ul_lat = upper_left
    lr_lon, lr_lat = lower_right
    tmparea = Area.from_corners(projection, (ul_lon, lr_lat), (lr_lon, ul_lat))

    ul_x, ul_y = tmparea.lonlat_to_xy(ul_lon, ul_lat)
    lr_x, lr_y = tmparea.lonlat_to_xy(lr_lon, lr_lat)

    lower_left = tmparea.xy_to_lonlat(ul_x, lr_y)
    upper_right = tmparea.xy_to_lonlat(lr_x, ul_y)
    return lower_left, upper_right


def create_cartesian_place(resolver):
    """ Grid of composites and images, defined in /where. """
    projdef = resolver.get('/where', 'projdef', str)
    xsize = resolver.get('/where', 'xsize', int)
    ysize = resolver.get('/where', 'ysize', int)

    if resolver.source.has_attribute('/where', 'LL_lon'):
        lower_left = (resolver.get('/where', 'LL_lon', float),
                      resolver.get('/where', 'LL_lat', float))
        upper_right = (resolver.get('/where', 'UR_lon', float),
                       resolver.get('/where', 'UR_lat', float))
    else:
        upper_left = (resolver.get('/where', 'UL_lon', float),
                      resolver.get('/where', 'UL_lat', float))
        lower_right = (resolver.get('/where', 'LR_lon', float),
                       resolver.get('/where', 'LR_lat', float))
        lower_left, upper_right = corners_from_alternate(
            projdef, upper_left, lower_right)

    area = Area.from_corners(projdef, lower_left, upper_right)
    return PlaceAxis(area, xsize, ysize)


def calculate_pvol_range(resolver, layout):
    """
    Maximum ground range of a polar volume in meters.

    Each dataset has the following attributes in its where group:

    - elangle, the elevation angle of the scan
    - nbins, the number of bins in a ray, f.ex 500
    - rstart, the starting offset in kilometers for bin 1
    - rscale, the distance in meters between bins

    """
    maxrange = -1.
    for i in layout.dataset_indices():
        where = layout.dataset_path(i) + '/where'
        elangle = resolver.get(where, 'elangle', float)
        nbins = resolver.get(where, 'nbins', float)
        rstart = resolver.get(where, 'rstart', float)
        rscale = resolver.get(where, 'rscale', float)

        srange = 1000. * rstart + nbins * rscale * math.cos(
            math.radians(elangle))
        maxrange = max(maxrange, srange)
    return maxrange


def calculate_max_nbins(resolver, layout):
    """ Largest number of bins per ray over the scans of a volume. """
    return max((resolver.get(layout.dataset_path(i) + '/where', 'nbins', int)
                for i in layout.dataset_indices()), default=-1)


def create_pvol_place(resolver, layout):
    """
    Azimuthal equidistant grid centered at the radar.

    The half width is the maximum range rounded up to full kilometers and
    the number of grid points along each axis is twice the number of bins,
    which gives about the native resolution near the radar.
    """
    lon = resolver.get('/where', 'lon', float)
    lat = resolver.get('/where', 'lat', float)

    range_km = math.ceil(calculate_pvol_range(resolver, layout) / 1000.)
    nbins = calculate_max_nbins(resolver, layout)
    logging.info(f'Radar at {lon} {lat}, range {range_km} km, {nbins} bins')

    area = Area.radar_centered(lon, lat, 1000. * range_km)
    return PlaceAxis(area, 2 * nbins, 2 * nbins)


def create_place_axis(resolver, layout, object_kind=None):
    """
    Create the horizontal grid of the data.

    Parameters
    ----------
    resolver : AttributeResolver
        Attribute reader of the file.
    layout : OdimLayout
        Dataset numbering of the file.
    object_kind : ObjectKind, optional
        Data object kind, read from /what.object if not given.

    Returns
    -------
    place_axis : PlaceAxis
        The grid.

    """
    if object_kind is None:
        object_kind = read_object_kind(resolver)

    if object_kind in (ObjectKind.COMP, ObjectKind.IMAGE, ObjectKind.CVOL):
        return create_cartesian_place(resolver)
    if object_kind == ObjectKind.PVOL:
        return create_pvol_place(resolver, layout)
    if object_kind == ObjectKind.SCAN:
        raise UnsupportedObject(
            f'This program cannot handle {object_kind.value} data')
    raise UnsupportedObject(
        'This program cannot handle where-information of '
        f'{object_kind.value} data')
