"""
odimgrid.core.area
==================

Map projected areas and the regular grids placed on them.

.. autosummary::
    :toctree: generated/

    Area
    PlaceAxis

"""

import numpy as np

try:
    import pyproj
    _PYPROJ_AVAILABLE = True
except ImportError:
    _PYPROJ_AVAILABLE = False

from ..exceptions import InvalidProjection, MissingOptionalDependency


def _to_crs(projection):
    if not _PYPROJ_AVAILABLE:
        raise MissingOptionalDependency(
            "pyproj is required to build map areas but is not installed")
    if isinstance(projection, pyproj.CRS):
        return projection
    try:  # pyproj doens't like bytearrays
        projection = projection.decode('utf-8')
    except AttributeError:
        pass
    try:
        return pyproj.CRS.from_user_input(projection)
    except pyproj.exceptions.CRSError as err:
        raise InvalidProjection(
            f'Invalid projection {projection!r}: {err}') from err


class Area:
    """
    A rectangle in projected coordinates.

    Parameters
    ----------
    projection : str, dict or pyproj.CRS
        Projection definition, e.g. a proj4 string.
    x_min, y_min, x_max, y_max : float
        Projected lower-left and upper-right corners.

    Attributes
    ----------
    crs : pyproj.CRS
        The projection.

    """

    def __init__(self, projection, x_min, y_min, x_max, y_max):
        self.crs = _to_crs(projection)
        self.x_min = float(x_min)
        self.y_min = float(y_min)
        self.x_max = float(x_max)
        self.y_max = float(y_max)
        self._forward = pyproj.Transformer.from_crs(
            'EPSG:4326', self.crs, always_xy=True)
        self._inverse = pyproj.Transformer.from_crs(
            self.crs, 'EPSG:4326', always_xy=True)

    @classmethod
    def from_corners(cls, projection, lower_left, upper_right):
        """
        Area bounded by geographic lower-left and upper-right corners.

        Parameters
        ----------
        projection : str, dict or pyproj.CRS
            Projection definition.
        lower_left, upper_right : tuple of float
            (lon, lat) of the corners in degrees.

        """
        crs = _to_crs(projection)
        forward = pyproj.Transformer.from_crs('EPSG:4326', crs, always_xy=True)
        x_min, y_min = forward.transform(*lower_left)
        x_max, y_max = forward.transform(*upper_right)
        if not np.all(np.isfinite([x_min, y_min, x_max, y_max])):
            raise InvalidProjection(
                f'Corners {lower_left} and {upper_right} cannot be projected '
                f'to {crs.name}')
        return cls(crs, x_min, y_min, x_max, y_max)

    @classmethod
    def radar_centered(cls, lon, lat, radius):
        """
        Azimuthal equidistant square centered at a radar.

        Parameters
        ----------
        lon, lat : float
            Radar location in degrees.
        radius : float
            Half width of the square in meters.

        """
        projection = {'proj': 'aeqd', 'lon_0': lon, 'lat_0': lat,
                      'x_0': 0., 'y_0': 0., 'datum': 'WGS84', 'units': 'm'}
        return cls(projection, -radius, -radius, radius, radius)

    def __repr__(self):
        return (f'Area({self.crs.to_proj4()!r}, {self.x_min}, {self.y_min}, '
                f'{self.x_max}, {self.y_max})')

    @property
    def width(self):
        """ Width in projected units. """
        return self.x_max - self.x_min

    @property
    def height(self):
        """ Height in projected units. """
        return self.y_max - self.y_min

    @property
    def lower_left(self):
        """ (lon, lat) of the lower-left corner. """
        return self.xy_to_lonlat(self.x_min, self.y_min)

    @property
    def upper_right(self):
        """ (lon, lat) of the upper-right corner. """
        return self.xy_to_lonlat(self.x_max, self.y_max)

    def lonlat_to_xy(self, lon, lat):
        """ Project geographic coordinates, scalars or arrays. """
        return self._forward.transform(lon, lat)

    def xy_to_lonlat(self, x, y):
        """ Inverse projection to geographic coordinates. """
        return self._inverse.transform(x, y)


class PlaceAxis:
    """
    Regular grid of ncols x nrows points covering an area.

    Grid points include the corners of the area. Row 0 is the
    southernmost row and column 0 the westernmost column.

    Parameters
    ----------
    area : Area
        Covered area.
    ncols, nrows : int
        Number of grid points along x and y.

    """

    def __init__(self, area, ncols, nrows):
        self.area = area
        self.ncols = int(ncols)
        self.nrows = int(nrows)
        self.x = np.linspace(area.x_min, area.x_max, self.ncols)
        self.y = np.linspace(area.y_min, area.y_max, self.nrows)

    def __len__(self):
        return self.ncols * self.nrows

    def __repr__(self):
        return f'PlaceAxis({self.area!r}, {self.ncols}, {self.nrows})'

    @property
    def dx(self):
        """ Grid spacing along x. """
        if self.ncols < 2:
            return 0.
        return self.area.width / (self.ncols - 1)

    @property
    def dy(self):
        """ Grid spacing along y. """
        if self.nrows < 2:
            return 0.
        return self.area.height / (self.nrows - 1)

    def lonlat(self):
        """ Longitude and latitude of every grid point, (nrows, ncols). """
        x, y = np.meshgrid(self.x, self.y)
        return self.area.xy_to_lonlat(x, y)

    def nearest_cell(self, lon, lat):
        """
        Grid cells nearest to geographic points.

        Parameters
        ----------
        lon, lat : array_like
            Point coordinates in degrees.

        Returns
        -------
        rows, cols : ndarray of int
            Indices of the nearest grid point.
        inside : ndarray of bool
            False for points outside the grid.

        """
        x, y = self.area.lonlat_to_xy(np.asarray(lon), np.asarray(lat))
        cols = self._nearest_index(np.asarray(x), self.area.x_min, self.dx)
        rows = self._nearest_index(np.asarray(y), self.area.y_min, self.dy)
        inside = (cols >= 0) & (cols < self.ncols) & \
            (rows >= 0) & (rows < self.nrows)
        return rows, cols, inside

    @staticmethod
    def _nearest_index(coord, start, step):
        if step == 0.:
            return np.zeros(np.shape(coord), dtype=np.intp)
        with np.errstate(invalid='ignore'):
            index = np.rint((coord - start) / step)
        return np.where(np.isfinite(index), index, -1).astype(np.intp)
