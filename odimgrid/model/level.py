"""
odimgrid.model.level
====================

Level axis of the output.

The following products have an associated prodpar which describes the
level in some manner:

  CAPPI  Layer height in meters above the radar
  PCAPPI Layer height in meters above the radar
  PPI    Elevation angle in degrees
  ETOP   Reflectivity limit in dBZ (clouds=-10, rain=10, thunder=20 etc)
  RHI    Azimuth angle in degrees
  VIL    Bottom and top heights of the integration layer

Polar volumes use the where.elangle attribute of each scan as the level
value. The two VIL level values are ignored.

.. autosummary::
    :toctree: generated/

    read_dataset_product
    collect_product_levels
    collect_pvol_levels
    create_level_axis

"""

import logging

from ..core.axes import Level, LevelAxis
from ..core.kinds import LevelKind, ObjectKind, ProductKind
from ..exceptions import InconsistentLevelModel, UnsupportedObject
from ..io.schema import read_object_kind


def read_dataset_product(resolver, path):
    """ ProductKind of a dataset or data unit. """
    return ProductKind.from_string(resolver.find(path, 'what', 'product', str))


def collect_product_levels(resolver, layout):
    """
    Collect the unique prodpar levels of gridded products.

    All level bearing datasets must have the same product, and level bearing
    products cannot be mixed with other products.
    """
    common = None
    has_levels = False
    has_nonlevels = False

    for i in layout.dataset_indices():
        product = read_dataset_product(resolver, layout.dataset_path(i))
        if product.has_level:
            has_levels = True
        else:
            has_nonlevels = True

        if common is None:
            common = product
        elif product.has_level and product != common:
            raise InconsistentLevelModel(
                'Cannot have different kinds of products when level data '
                f'is used: {common.value} and {product.value}')

    if has_levels and has_nonlevels:
        raise InconsistentLevelModel(
            'Cannot mix non-level type parameters with level type parameters')

    if not has_levels:
        return LevelAxis.empty()

    logging.info('Level values:')
    levels = []
    for i in layout.dataset_indices():
        prodpar = resolver.find(layout.dataset_path(i), 'what', 'prodpar',
                                float)
        logging.info(f'  {i}: {prodpar}')
        levels.append(Level(common.level_kind, common.value, prodpar))
    return LevelAxis(common.level_kind, levels)


def elevation_level_name(angle):
    """ Name of the level of an elevation angle. """
    return f'Elevation angle {angle:g}'


def collect_pvol_levels(resolver, layout):
    """ Collect the unique elevation angles of a polar volume. """
    logging.info('Elevation angles:')
    levels = []
    for i in layout.dataset_indices():
        angle = resolver.get(layout.dataset_path(i) + '/where', 'elangle',
                             float)
        logging.info(f'  {i}: {angle}')
        levels.append(
            Level(LevelKind.GENERIC, elevation_level_name(angle), angle))
    return LevelAxis(LevelKind.GENERIC, levels)


_UNSUPPORTED = {
    ObjectKind.RAY: 'single polar rays (RAY)',
    ObjectKind.AZIM: 'azimuthal objects (AZIM)',
    ObjectKind.ELEV: 'elevational objects (ELEV)',
    ObjectKind.XSEC: '2D vertical cross sections (XSEC)',
    ObjectKind.VP: 'vertical profile (VP)',
    ObjectKind.PIC: 'embedded graphical image (PIC)',
}


def create_level_axis(resolver, layout, object_kind=None):
    """
    Create the level axis of the data.

    Parameters
    ----------
    resolver : AttributeResolver
        Attribute reader of the file.
    layout : OdimLayout
        Dataset numbering of the file.
    object_kind : ObjectKind, optional
        Data object kind, read from /what.object if not given.

    Returns
    -------
    level_axis : LevelAxis
        Unique sorted levels, empty for data without levels.

    """
    if object_kind is None:
        object_kind = read_object_kind(resolver)

    if object_kind in (ObjectKind.COMP, ObjectKind.CVOL, ObjectKind.SCAN,
                       ObjectKind.IMAGE):
        return collect_product_levels(resolver, layout)
    if object_kind == ObjectKind.PVOL:
        return collect_pvol_levels(resolver, layout)
    if object_kind in _UNSUPPORTED:
        raise UnsupportedObject(
            f'This program cannot handle {_UNSUPPORTED[object_kind]} data')
    raise UnsupportedObject(f'Unhandled data object {object_kind.value}')
