""" Unit Tests for odimgrid's io/attributes.py module. """

import numpy as np
import pytest

from odimgrid.exceptions import AttributeNotFound, TypeMismatch
from odimgrid.io.attributes import (
    AttributeResolver, ancestor_paths, coerce_attribute)
from odimgrid.io.hdf_source import open_odim_h5
from odimgrid.testing import make_odim_h5


@pytest.fixture
def resolver(tmp_path):
    tree = {
        'what': {'attrs': {'gain': 1.0, 'offset': 0., 'object': 'COMP',
                           'nodata': 255.}},
        'dataset1': {
            'what': {'attrs': {'gain': 2.0, 'product': 'PPI'}},
            'data1': {'what': {'attrs': {'gain': 3.0, 'quantity': 'DBZH',
                                         'nbins': 7}}},
            'data2': {'what': {'attrs': {'quantity': 'VRAD'}}},
        },
    }
    filename = make_odim_h5(str(tmp_path / 'attrs.h5'), tree)
    with open_odim_h5(filename) as source:
        yield AttributeResolver(source)


def test_ancestor_paths():
    assert ancestor_paths('/dataset1/data2') == [
        '/dataset1/data2', '/dataset1', '/']
    assert ancestor_paths('dataset1') == ['/dataset1', '/']
    assert ancestor_paths('/') == ['/']


def test_coerce_attribute():
    assert coerce_attribute(np.bytes_(b'PVOL\x00'), str) == 'PVOL'
    assert coerce_attribute(np.array([2.5]), float) == 2.5
    assert coerce_attribute(np.int64(7), int) == 7
    assert coerce_attribute(np.float64(7.), int) == 7
    assert isinstance(coerce_attribute(np.int32(3), float), float)


@pytest.mark.parametrize(
    "value, kind",
    [(np.bytes_(b'PVOL'), float), (2.5, str), (np.array([1., 2.]), float),
     (True, int)])
def test_coerce_attribute_mismatch(value, kind):
    with pytest.raises(TypeMismatch):
        coerce_attribute(value, kind)


def test_get(resolver):
    assert resolver.get('/what', 'object', str) == 'COMP'
    assert resolver.get('/dataset1/data1/what', 'nbins', int) == 7
    with pytest.raises(AttributeNotFound, match='/what/date'):
        resolver.get('/what', 'date', str)
    with pytest.raises(TypeMismatch):
        resolver.get('/what', 'object', float)
    assert resolver.get_optional('/what', 'date', str) is None


def test_find_most_local_wins(resolver):
    assert resolver.find('/dataset1/data1', 'what', 'gain', float) == 3.0
    assert resolver.find('/dataset1/data2', 'what', 'gain', float) == 2.0
    assert resolver.find('/dataset1/data2', 'what', 'offset', float) == 0.
    assert resolver.find('/dataset1/data2', 'what', 'product', str) == 'PPI'


def test_find_missing(resolver):
    with pytest.raises(AttributeNotFound, match='threshold_id'):
        resolver.find('/dataset1/data1', 'what', 'threshold_id', int)
    assert resolver.find_optional(
        '/dataset1/data1', 'what', 'undetect', float) is None
    assert resolver.find_optional(
        '/dataset1/data1', 'what', 'nodata', float) == 255.


def test_find_type_mismatch(resolver):
    with pytest.raises(TypeMismatch):
        resolver.find('/dataset1/data1', 'what', 'quantity', float)
