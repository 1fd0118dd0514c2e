"""
odimgrid.model.time
===================

Time axis of the output.

The times are stored in the file as

  what.date in YYYYMMDD format
  what.time in HHmmss format

Seconds are ignored, all times have minute precision.

.. autosummary::
    :toctree: generated/

    parse_odim_time
    extract_origin_time
    extract_valid_time
    create_time_axis

"""

import datetime
import logging

from ..core.axes import TimeAxis
from ..exceptions import SchemaError


def parse_odim_time(date, time):
    """ datetime from ODIM date and time strings, truncated to minutes. """
    stamp = (date + time)[:12]
    try:
        return datetime.datetime.strptime(stamp, '%Y%m%d%H%M')
    except ValueError as err:
        raise SchemaError(
            f'Invalid date and time {date!r} {time!r}') from err


def extract_origin_time(resolver):
    """ Nominal time of the data, from /what. """
    date = resolver.get('/what', 'date', str)
    time = resolver.get('/what', 'time', str)
    return parse_odim_time(date, time)


def extract_valid_time(resolver, layout, index):
    """
    Valid time of a dataset.

    The end date and time of the dataset are used if present, each falls
    back to the top level date or time otherwise.
    """
    what = layout.dataset_path(index) + '/what'
    date = resolver.get_optional(what, 'enddate', str)
    if date is None:
        date = resolver.get('/what', 'date', str)
    time = resolver.get_optional(what, 'endtime', str)
    if time is None:
        time = resolver.get('/what', 'time', str)
    return parse_odim_time(date, time)


def create_time_axis(resolver, layout):
    """
    Create the time axis of the data.

    Parameters
    ----------
    resolver : AttributeResolver
        Attribute reader of the file.
    layout : OdimLayout
        Dataset numbering of the file.

    Returns
    -------
    time_axis : TimeAxis
        Valid times in dataset order, or the origin time alone if the file
        has no datasets.

    """
    origin = extract_origin_time(resolver)
    times = [extract_valid_time(resolver, layout, i)
             for i in layout.dataset_indices()]
    if not times:
        logging.warning('No datasets found, using the origin time as the '
                        'only valid time')
    return TimeAxis(origin, times)
