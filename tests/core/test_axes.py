""" Unit Tests for odimgrid's core/axes.py module. """

import datetime

from odimgrid.core.axes import (
    DataDescriptor, Level, LevelAxis, NO_LEVEL, ParamAxis, TimeAxis)
from odimgrid.core.kinds import LevelKind
from odimgrid.core.parameters import DEFAULT_PARAMETER_TABLE, Parameter

T0 = datetime.datetime(2024, 2, 27, 9, 45)
T1 = datetime.datetime(2024, 2, 27, 10, 0)


class _Place:
    nrows = 3
    ncols = 4


def test_time_axis_order_and_duplicates():
    axis = TimeAxis(T0, [T1, T0, T1])
    assert axis.times == (T1, T0)
    assert len(axis) == 2
    assert axis.index(T0) == 1
    assert axis.index(datetime.datetime(2000, 1, 1)) is None


def test_time_axis_empty():
    axis = TimeAxis(T0, [])
    assert list(axis) == [T0]


def test_param_axis_sorted_unique():
    axis = ParamAxis([Parameter.RADIAL_VELOCITY, Parameter.REFLECTIVITY,
                      Parameter.RADIAL_VELOCITY], DEFAULT_PARAMETER_TABLE)
    assert axis.parameters == (Parameter.REFLECTIVITY,
                               Parameter.RADIAL_VELOCITY)
    assert axis.names == ('REFLECTIVITY', 'RADIAL_VELOCITY')
    assert axis.interpolation == 'linear'
    assert axis.index(Parameter.RADIAL_VELOCITY) == 1
    assert axis.index(Parameter.ECHO_TOP) is None


def test_level_axis_sorted_unique():
    levels = [Level(LevelKind.HEIGHT, 'PCAPPI', v)
              for v in (1000., 500., 1000.)]
    axis = LevelAxis(LevelKind.HEIGHT, levels)
    assert axis.values == (500., 1000.)
    assert axis.output_levels == axis.levels
    assert axis.index(1000) == 1
    assert axis.index(750.) is None


def test_level_axis_empty():
    axis = LevelAxis.empty()
    assert len(axis) == 0
    assert axis.kind == LevelKind.NONE
    assert axis.output_levels == (NO_LEVEL,)
    assert axis.index(123.) == 0


def test_descriptor_shape():
    levels = LevelAxis(LevelKind.GENERIC,
                       [Level(LevelKind.GENERIC, 'PPI', 0.5)])
    descriptor = DataDescriptor(
        TimeAxis(T0, [T0, T1]),
        ParamAxis([Parameter.REFLECTIVITY], DEFAULT_PARAMETER_TABLE),
        levels, _Place())
    assert descriptor.shape == (2, 1, 1, 3, 4)
    assert descriptor.size == 24


def test_descriptor_shape_without_levels():
    descriptor = DataDescriptor(
        TimeAxis(T0, []),
        ParamAxis([Parameter.REFLECTIVITY, Parameter.ECHO_TOP],
                  DEFAULT_PARAMETER_TABLE),
        LevelAxis.empty(), _Place())
    assert descriptor.shape == (1, 2, 1, 3, 4)
    assert descriptor.size > 0
