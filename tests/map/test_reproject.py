""" Unit Tests for odimgrid's map/reproject.py module. """

import datetime

import pytest
from numpy.testing import assert_almost_equal

from odimgrid.core.area import Area, PlaceAxis
from odimgrid.core.axes import DataDescriptor, LevelAxis, ParamAxis, TimeAxis
from odimgrid.core.grid_series import GridTimeSeries
from odimgrid.core.parameters import DEFAULT_PARAMETER_TABLE, Parameter
from odimgrid.exceptions import InvalidProjection
from odimgrid.map.reproject import parse_projection, reproject

LONLAT = '+proj=longlat +datum=WGS84'
FILL = -9999.


def _series():
    area = Area.from_corners(LONLAT, (0., 0.), (4., 2.))
    descriptor = DataDescriptor(
        TimeAxis(datetime.datetime(2024, 2, 27, 9, 45), []),
        ParamAxis([Parameter.REFLECTIVITY], DEFAULT_PARAMETER_TABLE),
        LevelAxis.empty(), PlaceAxis(area, 5, 3))
    series = GridTimeSeries(descriptor)
    # value = x + 10 * y
    lon, lat = series.place.lonlat()
    series.data[0, 0, 0] = lon + 10. * lat
    return series


def test_parse_projection():
    place = parse_projection(LONLAT + '|10,55,30,65|21x11')
    assert (place.ncols, place.nrows) == (21, 11)
    assert_almost_equal(place.dx, 1.)
    assert_almost_equal(place.area.lower_left, (10., 55.))


def test_parse_projection_default_size():
    place = parse_projection('EPSG:4326|10,55,30,65', default_size=(4, 3))
    assert (place.ncols, place.nrows) == (4, 3)


@pytest.mark.parametrize(
    "text",
    [LONLAT, LONLAT + '|10,55,30', LONLAT + '|10,55,30,a|4x3',
     LONLAT + '|10,55,30,65|4by3', LONLAT + '|10,55,30,65|0x3',
     '|10,55,30,65|4x3', '+proj=bogus|10,55,30,65|4x3',
     LONLAT + '|10,55,30,65'])
def test_parse_projection_invalid(text):
    with pytest.raises(InvalidProjection):
        parse_projection(text)


def test_reproject_identity():
    series = _series()
    result = reproject(series, series.place)
    assert result is not series
    assert result.shape == series.shape
    assert_almost_equal(result.data, series.data, 4)


def test_reproject_subgrid():
    series = _series()
    place = parse_projection(LONLAT + '|0.5,0.5,3.5,1.5|7x3')
    result = reproject(series, place)
    assert result.shape == (1, 1, 1, 3, 7)
    lon, lat = place.lonlat()
    assert_almost_equal(result.data[0, 0, 0], lon + 10. * lat, 4)
    assert result.producer == series.producer
    assert result.time is series.time


def test_reproject_missing():
    series = _series()
    series.data[0, 0, 0, 1, 2] = FILL
    place = parse_projection(LONLAT + '|-1,0,2,1|4x2')
    result = reproject(series, place)
    data = result.data[0, 0, 0]
    # outside the source grid
    assert data[0, 0] == FILL
    # next to the missing cell at lon 2, lat 1
    assert data[1, 3] == FILL
    assert_almost_equal(data[0, 1], 0., 4)
