""" Unit Tests for odimgrid's model/time.py module. """

import datetime

import pytest

from odimgrid.exceptions import SchemaError
from odimgrid.io.attributes import AttributeResolver
from odimgrid.io.hdf_source import open_odim_h5
from odimgrid.io.schema import enumerate_layout
from odimgrid.model.time import (
    create_time_axis, extract_origin_time, extract_valid_time,
    parse_odim_time)
from odimgrid.testing import make_odim_h5, sample_composite_tree


def _axis(tmp_path, tree):
    filename = make_odim_h5(str(tmp_path / 'time.h5'), tree)
    with open_odim_h5(filename) as source:
        resolver = AttributeResolver(source)
        layout = enumerate_layout(source)
        return (extract_origin_time(resolver),
                [extract_valid_time(resolver, layout, i)
                 for i in layout.dataset_indices()],
                create_time_axis(resolver, layout))


def test_parse_odim_time():
    assert parse_odim_time('20240227', '094559') == datetime.datetime(
        2024, 2, 27, 9, 45)
    with pytest.raises(SchemaError):
        parse_odim_time('2024', '0945')
    with pytest.raises(SchemaError):
        parse_odim_time('20241327', '094500')


def test_composite_times(tmp_path):
    origin, valid, axis = _axis(tmp_path, sample_composite_tree())
    assert origin == datetime.datetime(2024, 2, 27, 9, 45)
    assert valid == [datetime.datetime(2024, 2, 27, 9, 45),
                     datetime.datetime(2024, 2, 27, 10, 0)]
    assert axis.origin == origin
    assert axis.times == tuple(valid)


def test_end_date_and_time_fall_back_independently(tmp_path):
    tree = sample_composite_tree()
    del tree['dataset1']['what']['attrs']['enddate']
    tree['dataset2']['what']['attrs']['enddate'] = '20240228'
    del tree['dataset2']['what']['attrs']['endtime']
    _, valid, axis = _axis(tmp_path, tree)
    # dataset1 takes the date from /what, dataset2 the time
    assert valid == [datetime.datetime(2024, 2, 27, 9, 45),
                     datetime.datetime(2024, 2, 28, 9, 45)]
    assert len(axis) == 2


def test_duplicate_valid_times(tmp_path):
    tree = sample_composite_tree()
    tree['dataset2']['what']['attrs']['endtime'] = '094530'
    _, valid, axis = _axis(tmp_path, tree)
    assert valid[0] == valid[1]
    assert len(axis) == 1
