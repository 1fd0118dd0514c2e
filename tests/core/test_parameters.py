""" Unit Tests for odimgrid's core/parameters.py module. """

import pytest

from odimgrid.core.parameters import (
    DEFAULT_PARAMETER_TABLE, Parameter, ParameterTable)
from odimgrid.exceptions import UnsupportedParameter

table = DEFAULT_PARAMETER_TABLE

# (product, quantity, parameter) of every pair without threshold id
PAIRS = [
    ('PPI', 'TH', Parameter.REFLECTIVITY),
    ('PPI', 'DBZ', Parameter.REFLECTIVITY),
    ('PPI', 'DBZH', Parameter.CORRECTED_REFLECTIVITY),
    ('PPI', 'VRAD', Parameter.RADIAL_VELOCITY),
    ('PPI', 'WRAD', Parameter.SPECTRAL_WIDTH),
    ('PPI', 'W', Parameter.SPECTRAL_WIDTH),
    ('CAPPI', 'TH', Parameter.REFLECTIVITY),
    ('CAPPI', 'DBZ', Parameter.REFLECTIVITY),
    ('CAPPI', 'DBZH', Parameter.CORRECTED_REFLECTIVITY),
    ('CAPPI', 'VRAD', Parameter.RADIAL_VELOCITY),
    ('CAPPI', 'WRAD', Parameter.SPECTRAL_WIDTH),
    ('CAPPI', 'W', Parameter.SPECTRAL_WIDTH),
    ('PCAPPI', 'TH', Parameter.REFLECTIVITY),
    ('PCAPPI', 'DBZ', Parameter.REFLECTIVITY),
    ('PCAPPI', 'DBZH', Parameter.CORRECTED_REFLECTIVITY),
    ('PCAPPI', 'VRAD', Parameter.RADIAL_VELOCITY),
    ('PCAPPI', 'WRAD', Parameter.SPECTRAL_WIDTH),
    ('PCAPPI', 'W', Parameter.SPECTRAL_WIDTH),
    ('ETOP', 'HGHT', Parameter.ECHO_TOP),
    ('MAX', 'TH', Parameter.REFLECTIVITY),
    ('MAX', 'DBZH', Parameter.CORRECTED_REFLECTIVITY),
    ('RR', 'ACRR', Parameter.PRECIPITATION_AMOUNT),
    ('VIL', 'ACRR', Parameter.PRECIPITATION_AMOUNT),
    ('SCAN', 'TH', Parameter.REFLECTIVITY),
    ('SCAN', 'DBZH', Parameter.CORRECTED_REFLECTIVITY),
    ('SCAN', 'VRAD', Parameter.RADIAL_VELOCITY),
    ('SCAN', 'WRAD', Parameter.SPECTRAL_WIDTH),
    ('SCAN', 'W', Parameter.SPECTRAL_WIDTH),
    ('SCAN', 'ZDR', Parameter.DIFFERENTIAL_REFLECTIVITY),
    ('SCAN', 'KDP', Parameter.SPECIFIC_DIFFERENTIAL_PHASE),
    ('SCAN', 'PHIDP', Parameter.DIFFERENTIAL_PHASE),
    ('SCAN', 'SQI', Parameter.SIGNAL_QUALITY_INDEX),
    ('SCAN', 'RHOHV', Parameter.REFLECTIVITY_CORRELATION),
    ('COMP', 'RATE', Parameter.PRECIPITATION_RATE),
    ('COMP', 'BRDR', Parameter.RADAR_BORDER),
    ('COMP', 'TH', Parameter.REFLECTIVITY),
    ('COMP', 'DBZH', Parameter.CORRECTED_REFLECTIVITY),
]


@pytest.mark.parametrize("product, quantity, parameter", PAIRS)
def test_resolve(product, quantity, parameter):
    assert not table.needs_threshold(product, quantity)
    assert table.resolve(product, quantity) == parameter


def test_resolve_probability():
    assert table.needs_threshold('COMP', 'PROB')
    assert (table.resolve('COMP', 'PROB', 0) ==
            Parameter.PROBABILITY_OF_PRECIPITATION)
    for threshold_id in range(1, 11):
        parameter = table.resolve('COMP', 'PROB', threshold_id)
        assert parameter.name.endswith(f'_LIMIT_{threshold_id}')
        assert parameter == Parameter.PROBABILITY_OF_PRECIPITATION + \
            threshold_id


@pytest.mark.parametrize("threshold_id", [None, -1, 11])
def test_resolve_probability_bad_threshold(threshold_id):
    with pytest.raises(UnsupportedParameter, match='threshold_id'):
        table.resolve('COMP', 'PROB', threshold_id)


@pytest.mark.parametrize(
    "product, quantity",
    [('PPI', 'HGHT'), ('ETOP', 'TH'), ('SURF', 'TH'), ('XYZ', 'DBZH')])
def test_resolve_unknown(product, quantity):
    with pytest.raises(UnsupportedParameter, match=quantity):
        table.resolve(product, quantity)


def test_pairs_cover_table():
    pairs = set(table.pairs())
    assert {(p, q) for p, q, _ in PAIRS} | {('COMP', 'PROB')} == pairs


def test_names():
    assert table.name(Parameter.REFLECTIVITY) == 'REFLECTIVITY'
    assert table.parameter('ECHO_TOP') == Parameter.ECHO_TOP
    with pytest.raises(UnsupportedParameter):
        table.parameter('TEMPERATURE')


def test_custom_table():
    custom = ParameterTable(
        mapping={'PPI': {'DBZH': Parameter.REFLECTIVITY}},
        names={Parameter.REFLECTIVITY: 'dBZ'})
    assert custom.resolve('PPI', 'DBZH') == Parameter.REFLECTIVITY
    assert custom.name(Parameter.REFLECTIVITY) == 'dBZ'
    with pytest.raises(UnsupportedParameter):
        custom.resolve('PPI', 'TH')
    # the default table is not modified
    assert table.resolve('PPI', 'DBZH') == Parameter.CORRECTED_REFLECTIVITY
