"""
odimgrid.core.axes
==================

The time, parameter and level axes of the output grid and the descriptor
combining them with the horizontal placement.

.. autosummary::
    :toctree: generated/

    TimeAxis
    ParamAxis
    Level
    LevelAxis
    DataDescriptor

"""

from collections import namedtuple

from ..config import get_interpolation_method
from .kinds import LevelKind


class TimeAxis:
    """
    Origin time and the ordered valid times of the data.

    Parameters
    ----------
    origin : datetime
        Nominal time of the data.
    times : list of datetime
        Valid times in dataset order. A time listed more than once is kept
        at its first position. An empty list gives a single valid time equal
        to the origin.

    """

    def __init__(self, origin, times):
        self.origin = origin
        unique = []
        for time in times:
            if time not in unique:
                unique.append(time)
        if not unique:
            unique = [origin]
        self.times = tuple(unique)

    def __len__(self):
        return len(self.times)

    def __iter__(self):
        return iter(self.times)

    def __repr__(self):
        return f'TimeAxis(origin={self.origin!r}, times={self.times!r})'

    def index(self, time):
        """ Position of a valid time, None if it is not on the axis. """
        try:
            return self.times.index(time)
        except ValueError:
            return None


class ParamAxis:
    """
    Unique parameters of the data, ordered by identity.

    Parameters
    ----------
    parameters : iterable of Parameter
        Parameters found in the file, duplicates allowed.
    table : ParameterTable
        Table used for the parameter names.

    """

    def __init__(self, parameters, table):
        self.parameters = tuple(sorted(set(parameters)))
        self.names = tuple(table.name(p) for p in self.parameters)
        self.interpolation = get_interpolation_method()

    def __len__(self):
        return len(self.parameters)

    def __iter__(self):
        return iter(self.parameters)

    def __repr__(self):
        return f'ParamAxis({list(self.names)!r})'

    def index(self, parameter):
        """ Position of a parameter, None if it is not on the axis. """
        try:
            return self.parameters.index(parameter)
        except ValueError:
            return None


Level = namedtuple('Level', ['kind', 'name', 'value'])
Level.__doc__ = """ A level value with its kind and a descriptive name. """

# level used for data without vertical structure
NO_LEVEL = Level(LevelKind.NONE, 'none', 0.0)


class LevelAxis:
    """
    Sorted unique levels sharing one :py:class:`LevelKind`.

    Parameters
    ----------
    kind : LevelKind
        Kind of all levels.
    levels : iterable of Level
        Levels found in the file. A level whose value was already seen is
        dropped.

    """

    def __init__(self, kind=LevelKind.NONE, levels=()):
        self.kind = kind
        unique = {}
        for level in levels:
            unique.setdefault(float(level.value), level)
        self.levels = tuple(
            Level(unique[v].kind, unique[v].name, v) for v in sorted(unique))

    @classmethod
    def empty(cls):
        """ Level axis of data without levels. """
        return cls()

    def __len__(self):
        return len(self.levels)

    def __iter__(self):
        return iter(self.levels)

    def __repr__(self):
        return (f'LevelAxis(kind={self.kind.name}, '
                f'values={[lev.value for lev in self.levels]!r})')

    @property
    def values(self):
        """ Level values in ascending order. """
        return tuple(lev.value for lev in self.levels)

    @property
    def output_levels(self):
        """ Levels of the output grid, one placeholder if the axis is empty. """
        if not self.levels:
            return (NO_LEVEL,)
        return self.levels

    def index(self, value):
        """ Position of a level value in the output grid, None if absent. """
        if not self.levels:
            return 0
        for i, level in enumerate(self.levels):
            if level.value == float(value):
                return i
        return None


class DataDescriptor:
    """
    The four axes defining the shape of the output grid.

    Attributes
    ----------
    time : TimeAxis
    param : ParamAxis
    level : LevelAxis
    place : PlaceAxis

    """

    def __init__(self, time, param, level, place):
        self.time = time
        self.param = param
        self.level = level
        self.place = place

    def __repr__(self):
        return (f'DataDescriptor(time={len(self.time)}, '
                f'param={len(self.param)}, '
                f'level={len(self.level.output_levels)}, '
                f'place={self.place.nrows}x{self.place.ncols})')

    @property
    def shape(self):
        """ (time, param, level, row, column) shape of the data. """
        return (len(self.time), len(self.param),
                len(self.level.output_levels),
                self.place.nrows, self.place.ncols)

    @property
    def size(self):
        """ Total number of cells. """
        ntime, nparam, nlevel, nrows, ncols = self.shape
        return ntime * nparam * nlevel * nrows * ncols
