"""
odimgrid.core.parameters
========================

Canonical output parameters and their mapping from ODIM_H5 product and
quantity names.

Known instances in use:

============  ========  ========  ==========================
file name     product   quantity  parameter
============  ========  ========  ==========================
\\*dBZ.cappi  PCAPPI    TH        REFLECTIVITY
\\*V.cappi    PCAPPI    VRAD      RADIAL_VELOCITY
\\*W.cappi    PCAPPI    W         SPECTRAL_WIDTH
\\*Height.eht ETOP      HGHT      ECHO_TOP
\\*dBZ.max    MAX       TH        REFLECTIVITY
\\*dBA.pac    RR        ACRR      PRECIPITATION_AMOUNT
\\*dBA.vil    VIL       ACRR      PRECIPITATION_AMOUNT
\\*dBZ.ppi    PPI       TH        REFLECTIVITY
\\*pcappi-dbz PCAPPI    DBZ       REFLECTIVITY
============  ========  ========  ==========================

TH, DBZ and W are not ODIM names, DBZH and WRAD would be.

.. autosummary::
    :toctree: generated/

    Parameter
    ParameterTable
    DEFAULT_PARAMETER_TABLE

"""

from enum import IntEnum

from ..exceptions import UnsupportedParameter


class Parameter(IntEnum):
    """ Canonical parameter identities of the output. """

    PRECIPITATION_AMOUNT = 50
    PRECIPITATION_RATE = 353
    PROBABILITY_OF_PRECIPITATION = 380
    PROBABILITY_OF_PRECIPITATION_LIMIT_1 = 381
    PROBABILITY_OF_PRECIPITATION_LIMIT_2 = 382
    PROBABILITY_OF_PRECIPITATION_LIMIT_3 = 383
    PROBABILITY_OF_PRECIPITATION_LIMIT_4 = 384
    PROBABILITY_OF_PRECIPITATION_LIMIT_5 = 385
    PROBABILITY_OF_PRECIPITATION_LIMIT_6 = 386
    PROBABILITY_OF_PRECIPITATION_LIMIT_7 = 387
    PROBABILITY_OF_PRECIPITATION_LIMIT_8 = 388
    PROBABILITY_OF_PRECIPITATION_LIMIT_9 = 389
    PROBABILITY_OF_PRECIPITATION_LIMIT_10 = 390
    REFLECTIVITY = 1101
    CORRECTED_REFLECTIVITY = 1102
    RADIAL_VELOCITY = 1103
    SPECTRAL_WIDTH = 1104
    ECHO_TOP = 1105
    DIFFERENTIAL_REFLECTIVITY = 1106
    SPECIFIC_DIFFERENTIAL_PHASE = 1107
    DIFFERENTIAL_PHASE = 1108
    SIGNAL_QUALITY_INDEX = 1109
    REFLECTIVITY_CORRELATION = 1110
    RADAR_BORDER = 1111


# quantity of composites refined by the threshold_id attribute
THRESHOLD_QUANTITY = 'PROB'

_PROBABILITY_LIMITS = (
    Parameter.PROBABILITY_OF_PRECIPITATION,
    Parameter.PROBABILITY_OF_PRECIPITATION_LIMIT_1,
    Parameter.PROBABILITY_OF_PRECIPITATION_LIMIT_2,
    Parameter.PROBABILITY_OF_PRECIPITATION_LIMIT_3,
    Parameter.PROBABILITY_OF_PRECIPITATION_LIMIT_4,
    Parameter.PROBABILITY_OF_PRECIPITATION_LIMIT_5,
    Parameter.PROBABILITY_OF_PRECIPITATION_LIMIT_6,
    Parameter.PROBABILITY_OF_PRECIPITATION_LIMIT_7,
    Parameter.PROBABILITY_OF_PRECIPITATION_LIMIT_8,
    Parameter.PROBABILITY_OF_PRECIPITATION_LIMIT_9,
    Parameter.PROBABILITY_OF_PRECIPITATION_LIMIT_10,
)

_CARTESIAN_SLICES = {
    'TH': Parameter.REFLECTIVITY,
    'DBZ': Parameter.REFLECTIVITY,
    'DBZH': Parameter.CORRECTED_REFLECTIVITY,
    'VRAD': Parameter.RADIAL_VELOCITY,
    'WRAD': Parameter.SPECTRAL_WIDTH,
    'W': Parameter.SPECTRAL_WIDTH,
}

ODIM_PARAMETERS = {
    'PPI': _CARTESIAN_SLICES,
    'CAPPI': _CARTESIAN_SLICES,
    'PCAPPI': _CARTESIAN_SLICES,
    'ETOP': {'HGHT': Parameter.ECHO_TOP},
    'MAX': {
        'TH': Parameter.REFLECTIVITY,
        'DBZH': Parameter.CORRECTED_REFLECTIVITY},
    'RR': {'ACRR': Parameter.PRECIPITATION_AMOUNT},
    'VIL': {'ACRR': Parameter.PRECIPITATION_AMOUNT},
    'SCAN': {
        'TH': Parameter.REFLECTIVITY,
        'DBZH': Parameter.CORRECTED_REFLECTIVITY,
        'VRAD': Parameter.RADIAL_VELOCITY,
        'WRAD': Parameter.SPECTRAL_WIDTH,
        'W': Parameter.SPECTRAL_WIDTH,
        'ZDR': Parameter.DIFFERENTIAL_REFLECTIVITY,
        'KDP': Parameter.SPECIFIC_DIFFERENTIAL_PHASE,
        'PHIDP': Parameter.DIFFERENTIAL_PHASE,
        'SQI': Parameter.SIGNAL_QUALITY_INDEX,
        'RHOHV': Parameter.REFLECTIVITY_CORRELATION},
    'COMP': {
        'RATE': Parameter.PRECIPITATION_RATE,
        'BRDR': Parameter.RADAR_BORDER,
        'TH': Parameter.REFLECTIVITY,
        'DBZH': Parameter.CORRECTED_REFLECTIVITY,
        THRESHOLD_QUANTITY: _PROBABILITY_LIMITS},
}


class ParameterTable:
    """
    Mapping between ODIM_H5 names, parameter identities and their names.

    The table holds no state beyond what it is constructed with, a custom
    table can be passed to the builders in place of
    :py:data:`DEFAULT_PARAMETER_TABLE`.

    Parameters
    ----------
    mapping : dict of dicts, optional
        product -> quantity -> Parameter. For the threshold quantity the
        value is a sequence of parameters indexed by threshold id.
    names : dict, optional
        Parameter -> name. Defaults to the enumeration member names.

    """

    def __init__(self, mapping=None, names=None):
        if mapping is None:
            mapping = ODIM_PARAMETERS
        if names is None:
            names = {p: p.name for p in Parameter}
        self._mapping = {product: dict(quantities)
                         for product, quantities in mapping.items()}
        self._names = dict(names)
        self._ids = {name: p for p, name in self._names.items()}

    def needs_threshold(self, product, quantity):
        """ True if resolving the pair requires a threshold id. """
        entry = self._mapping.get(product, {}).get(quantity)
        return isinstance(entry, (tuple, list))

    def resolve(self, product, quantity, threshold_id=None):
        """
        Return the parameter of a product and quantity.

        Parameters
        ----------
        product, quantity : str
            what.product and what.quantity of the data.
        threshold_id : int, optional
            what.threshold_id, required for probability products.

        Returns
        -------
        parameter : Parameter
            Canonical parameter identity.

        """
        entry = self._mapping.get(product, {}).get(quantity)
        if entry is None:
            raise UnsupportedParameter(
                f'Unable to handle parameters of type {product} with '
                f'quantity {quantity}')
        if isinstance(entry, (tuple, list)):
            if threshold_id is None or not 0 <= threshold_id < len(entry):
                raise UnsupportedParameter(
                    f'Unable to handle parameters of type {product} with '
                    f'quantity {quantity} with threshold_id outside range '
                    f'0-{len(entry) - 1}')
            return entry[threshold_id]
        return entry

    def name(self, parameter):
        """ Name of a parameter. """
        return self._names[parameter]

    def parameter(self, name):
        """ Parameter with the given name. """
        try:
            return self._ids[name]
        except KeyError:
            raise UnsupportedParameter(f'Unknown parameter name {name}') from None

    def pairs(self):
        """ Iterate over (product, quantity) pairs of the table. """
        for product, quantities in self._mapping.items():
            for quantity in quantities:
                yield product, quantity


DEFAULT_PARAMETER_TABLE = ParameterTable()
