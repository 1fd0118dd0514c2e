"""
odimgrid.core.kinds
===================

Closed enumerations of the ODIM_H5 data object kinds and product kinds
known to odimgrid.

.. autosummary::
    :toctree: generated/

    ObjectKind
    ProductKind
    LevelKind

"""

from enum import Enum

from ..exceptions import UnsupportedObject, UnsupportedProduct


class LevelKind(Enum):
    """ Physical meaning of a level value. """

    HEIGHT = 'height'   # meters above the radar
    GENERIC = 'generic'  # angles, dBZ limits and other non-physical levels
    NONE = 'none'       # single placeholder level of data without levels


class ObjectKind(Enum):
    """ Value of the /what.object attribute. """

    PVOL = 'PVOL'    # polar volume
    CVOL = 'CVOL'    # cartesian volume
    SCAN = 'SCAN'    # polar scan
    RAY = 'RAY'      # single polar ray
    AZIM = 'AZIM'    # azimuthal object
    ELEV = 'ELEV'    # elevational object
    IMAGE = 'IMAGE'  # 2-D cartesian image
    COMP = 'COMP'    # cartesian composite image(s)
    XSEC = 'XSEC'    # 2-D vertical cross section(s)
    VP = 'VP'        # 1-D vertical profile
    PIC = 'PIC'      # embedded graphical image

    @classmethod
    def from_string(cls, text):
        """ Return the kind for an object string. """
        try:
            return cls(text)
        except ValueError:
            raise UnsupportedObject(
                f"Unknown data object: '{text}' is not listed in the Opera "
                "specs followed by this implementation") from None


# product string: (level bearing, level kind)
_PRODUCTS = {
    'SCAN': (False, None),
    'PPI': (True, LevelKind.GENERIC),     # elevation angle in degrees
    'CAPPI': (True, LevelKind.HEIGHT),    # layer height in meters
    'PCAPPI': (True, LevelKind.HEIGHT),   # layer height in meters
    'ETOP': (True, LevelKind.GENERIC),    # reflectivity limit in dBZ
    'EBASE': (False, None),
    'RHI': (True, LevelKind.GENERIC),     # azimuth angle in degrees
    'XSEC': (False, None),
    'VSP': (False, None),
    'HSP': (False, None),
    'RAY': (False, None),
    'AZIM': (False, None),
    'QUAL': (False, None),
    'MAX': (False, None),
    'RR': (False, None),
    # two level values, bottom and top of the layer, cannot be expressed
    'VIL': (False, None),
    'SURF': (False, None),
    'COMP': (False, None),
    'VP': (False, None),
    'PVOL': (False, None),
}


class ProductKind(Enum):
    """ Value of the what.product attribute of a dataset. """

    SCAN = 'SCAN'
    PPI = 'PPI'
    CAPPI = 'CAPPI'
    PCAPPI = 'PCAPPI'
    ETOP = 'ETOP'
    EBASE = 'EBASE'
    RHI = 'RHI'
    XSEC = 'XSEC'
    VSP = 'VSP'
    HSP = 'HSP'
    RAY = 'RAY'
    AZIM = 'AZIM'
    QUAL = 'QUAL'
    MAX = 'MAX'
    RR = 'RR'
    VIL = 'VIL'
    SURF = 'SURF'
    COMP = 'COMP'
    VP = 'VP'
    PVOL = 'PVOL'

    @classmethod
    def from_string(cls, text):
        """ Return the kind for a product string. """
        try:
            return cls(text)
        except ValueError:
            raise UnsupportedProduct(
                f"Unknown product: '{text}' is not listed in the Opera specs "
                "followed by this implementation") from None

    @property
    def has_level(self):
        """ True if datasets of this product are told apart by prodpar. """
        return _PRODUCTS[self.value][0]

    @property
    def level_kind(self):
        """ Kind of the prodpar level value, None if there is no level. """
        return _PRODUCTS[self.value][1]
