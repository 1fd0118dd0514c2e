""" Unit Tests for odimgrid's model/level.py module. """

import pytest

from odimgrid.core.kinds import LevelKind, ObjectKind
from odimgrid.exceptions import InconsistentLevelModel, UnsupportedObject
from odimgrid.io.attributes import AttributeResolver
from odimgrid.io.hdf_source import open_odim_h5
from odimgrid.io.schema import enumerate_layout
from odimgrid.model.level import create_level_axis
from odimgrid.testing import (
    make_odim_h5, sample_composite_tree, sample_image_tree, sample_pvol_tree)


def _level_axis(tmp_path, tree, object_kind=None):
    filename = make_odim_h5(str(tmp_path / 'level.h5'), tree)
    with open_odim_h5(filename) as source:
        return create_level_axis(AttributeResolver(source),
                                 enumerate_layout(source), object_kind)


def test_composite_levels(tmp_path):
    axis = _level_axis(tmp_path, sample_composite_tree())
    assert axis.kind == LevelKind.HEIGHT
    assert axis.values == (500., 1000.)
    assert [lev.name for lev in axis] == ['PCAPPI', 'PCAPPI']


def test_levels_sorted_and_unique(tmp_path):
    tree = sample_composite_tree()
    tree['dataset1']['what']['attrs']['prodpar'] = 1500.
    tree['dataset3'] = sample_composite_tree()['dataset2']
    axis = _level_axis(tmp_path, tree)
    assert axis.values == (1000., 1500.)


def test_legacy_ppi_level(tmp_path):
    axis = _level_axis(tmp_path, sample_image_tree())
    assert axis.kind == LevelKind.GENERIC
    assert axis.values == (0.5,)


def test_no_level_products(tmp_path):
    tree = sample_composite_tree()
    for name in ('dataset1', 'dataset2'):
        tree[name]['what']['attrs']['product'] = 'MAX'
    axis = _level_axis(tmp_path, tree)
    assert len(axis) == 0
    assert len(axis.output_levels) == 1


def test_mixed_level_and_non_level(tmp_path):
    tree = sample_composite_tree()
    tree['dataset2']['what']['attrs']['product'] = 'MAX'
    with pytest.raises(InconsistentLevelModel, match='mix'):
        _level_axis(tmp_path, tree)


def test_different_level_products(tmp_path):
    tree = sample_composite_tree()
    tree['dataset2']['what']['attrs']['product'] = 'PPI'
    with pytest.raises(InconsistentLevelModel, match='PCAPPI and PPI'):
        _level_axis(tmp_path, tree)


def test_pvol_levels(tmp_path):
    axis = _level_axis(tmp_path, sample_pvol_tree())
    assert axis.kind == LevelKind.GENERIC
    assert axis.values == (0.5, 1.5)
    assert axis.levels[1].name == 'Elevation angle 1.5'


@pytest.mark.parametrize(
    "object_kind",
    [ObjectKind.RAY, ObjectKind.AZIM, ObjectKind.ELEV, ObjectKind.XSEC,
     ObjectKind.VP, ObjectKind.PIC])
def test_unsupported_objects(tmp_path, object_kind):
    with pytest.raises(UnsupportedObject, match=object_kind.value):
        _level_axis(tmp_path, sample_composite_tree(), object_kind)
