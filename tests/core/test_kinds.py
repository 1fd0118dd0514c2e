""" Unit Tests for odimgrid's core/kinds.py module. """

import pytest

from odimgrid.core.kinds import LevelKind, ObjectKind, ProductKind
from odimgrid.exceptions import UnsupportedObject, UnsupportedProduct


def test_object_kind_from_string():
    assert ObjectKind.from_string('PVOL') == ObjectKind.PVOL
    assert ObjectKind.from_string('COMP') == ObjectKind.COMP
    with pytest.raises(UnsupportedObject, match='XYZ'):
        ObjectKind.from_string('XYZ')


def test_product_kind_from_string():
    assert ProductKind.from_string('PCAPPI') == ProductKind.PCAPPI
    with pytest.raises(UnsupportedProduct):
        ProductKind.from_string('pcappi')


@pytest.mark.parametrize(
    "product, level_kind",
    [('PPI', LevelKind.GENERIC), ('CAPPI', LevelKind.HEIGHT),
     ('PCAPPI', LevelKind.HEIGHT), ('ETOP', LevelKind.GENERIC),
     ('RHI', LevelKind.GENERIC)])
def test_level_products(product, level_kind):
    kind = ProductKind(product)
    assert kind.has_level
    assert kind.level_kind == level_kind


def test_non_level_products():
    level_products = {'PPI', 'CAPPI', 'PCAPPI', 'ETOP', 'RHI'}
    for kind in ProductKind:
        if kind.value not in level_products:
            assert not kind.has_level
            assert kind.level_kind is None
