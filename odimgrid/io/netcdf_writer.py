"""
odimgrid.io.netcdf_writer
=========================

Storage of converted grids in netCDF4 files.

.. autosummary::
    :toctree: generated/

    write_grid_netcdf
    read_grid_netcdf

"""

import datetime

import netCDF4
import numpy as np

from ..core.area import Area, PlaceAxis
from ..core.axes import DataDescriptor, Level, LevelAxis, ParamAxis, TimeAxis
from ..core.grid_series import GridTimeSeries
from ..core.kinds import LevelKind
from ..core.parameters import DEFAULT_PARAMETER_TABLE, Parameter
from .common import make_time_unit_str

_TIME_FORMAT = '%Y-%m-%dT%H:%M:%SZ'

# global attributes written for every file, the others hold metadata
_RESERVED_ATTRS = ('Conventions', 'title', 'history', 'producer_id',
                   'producer_name', 'origin_time', 'interpolation')


def write_grid_netcdf(filename, series, format='NETCDF4', zlib=True):
    """
    Write a grid time series to a netCDF file.

    Parameters
    ----------
    filename : str
        Name of the file to create, overwritten if it exists.
    series : GridTimeSeries
        Data to write.
    format : str
        netCDF format, must support variable length strings.
    zlib : bool
        True to compress the data variable.

    """
    levels = series.level.output_levels
    place = series.place

    with netCDF4.Dataset(filename, 'w', format=format) as ncobj:
        ncobj.Conventions = 'CF-1.7'
        ncobj.title = 'Gridded ODIM_H5 radar data'
        now = datetime.datetime.now(datetime.timezone.utc)
        ncobj.history = 'created by odimgrid ' + now.strftime(_TIME_FORMAT)
        ncobj.producer_id = np.int32(series.producer[0])
        ncobj.producer_name = series.producer[1]
        ncobj.origin_time = series.time.origin.strftime(_TIME_FORMAT)
        ncobj.interpolation = series.param.interpolation
        for key, value in series.metadata.items():
            if key not in _RESERVED_ATTRS:
                ncobj.setncattr(key, value)

        ncobj.createDimension('time', len(series.time))
        ncobj.createDimension('parameter', len(series.param))
        ncobj.createDimension('level', len(levels))
        ncobj.createDimension('y', place.nrows)
        ncobj.createDimension('x', place.ncols)

        time = ncobj.createVariable('time', 'f8', ('time',))
        time.standard_name = 'time'
        time.units = make_time_unit_str(series.time.origin)
        time.calendar = 'standard'
        time[:] = netCDF4.date2num(list(series.time), time.units,
                                   calendar=time.calendar)

        parameter = ncobj.createVariable('parameter', 'i4', ('parameter',))
        parameter.long_name = 'parameter identifier'
        parameter[:] = np.array([int(p) for p in series.param], dtype='i4')
        parameter_name = ncobj.createVariable(
            'parameter_name', str, ('parameter',))
        parameter_name[:] = np.array(series.param.names, dtype=object)

        level = ncobj.createVariable('level', 'f8', ('level',))
        level.long_name = 'level value'
        level.level_kind = series.level.kind.name
        level[:] = np.array([lev.value for lev in levels], dtype='f8')
        level_name = ncobj.createVariable('level_name', str, ('level',))
        level_name[:] = np.array([lev.name for lev in levels], dtype=object)

        y = ncobj.createVariable('y', 'f8', ('y',))
        y.standard_name = 'projection_y_coordinate'
        y[:] = place.y
        x = ncobj.createVariable('x', 'f8', ('x',))
        x.standard_name = 'projection_x_coordinate'
        x[:] = place.x

        crs = ncobj.createVariable('crs', 'i4')
        crs.crs_wkt = place.area.crs.to_wkt()
        crs.proj4 = place.area.crs.to_proj4()

        data = ncobj.createVariable(
            'data', 'f4', ('time', 'parameter', 'level', 'y', 'x'),
            zlib=zlib, fill_value=np.float32(series.fill_value))
        data.grid_mapping = 'crs'
        data.long_name = 'radar data'
        data.comment = 'row 0 is the southernmost row'
        data.set_auto_mask(False)
        data[:] = series.data


def read_grid_netcdf(filename, table=DEFAULT_PARAMETER_TABLE):
    """
    Read a file written by :py:func:`write_grid_netcdf`.

    Parameters
    ----------
    filename : str
        Name of the file.
    table : ParameterTable
        Table used for the parameter names.

    Returns
    -------
    series : GridTimeSeries
        The stored data.

    """
    with netCDF4.Dataset(filename, 'r') as ncobj:
        ncobj.set_auto_mask(False)
        ncvars = ncobj.variables

        origin = datetime.datetime.strptime(ncobj.origin_time, _TIME_FORMAT)
        times = netCDF4.num2date(
            ncvars['time'][:], ncvars['time'].units,
            calendar=ncvars['time'].calendar,
            only_use_cftime_datetimes=False,
            only_use_python_datetimes=True)
        time_axis = TimeAxis(origin, list(times))

        param_axis = ParamAxis(
            [Parameter(int(p)) for p in ncvars['parameter'][:]], table)

        kind = LevelKind[ncvars['level'].level_kind]
        if kind == LevelKind.NONE:
            level_axis = LevelAxis.empty()
        else:
            level_axis = LevelAxis(kind, [
                Level(kind, str(name), float(value)) for name, value in
                zip(ncvars['level_name'][:], ncvars['level'][:])])

        x = ncvars['x'][:]
        y = ncvars['y'][:]
        area = Area(ncvars['crs'].crs_wkt, x[0], y[0], x[-1], y[-1])
        place_axis = PlaceAxis(area, len(x), len(y))

        metadata = {k: ncobj.getncattr(k) for k in ncobj.ncattrs()
                    if k not in _RESERVED_ATTRS}
        producer = (int(ncobj.producer_id), str(ncobj.producer_name))
        fill_value = float(ncvars['data']._FillValue)
        data = np.asarray(ncvars['data'][:], dtype='float32')

    descriptor = DataDescriptor(time_axis, param_axis, level_axis, place_axis)
    return GridTimeSeries(descriptor, producer=producer,
                          fill_value=fill_value, metadata=metadata, data=data)
