"""
odimgrid.model.parameter
========================

Parameter axis of the output.

.. autosummary::
    :toctree: generated/

    read_product_quantity
    resolve_parameter
    create_param_axis

"""

import logging

from ..core.axes import ParamAxis
from ..core.parameters import DEFAULT_PARAMETER_TABLE


def read_product_quantity(resolver, unit_path):
    """ (product, quantity) of a data unit, searched from its what group. """
    product = resolver.find(unit_path, 'what', 'product', str)
    quantity = resolver.find(unit_path, 'what', 'quantity', str)
    return product, quantity


def resolve_parameter(resolver, unit_path, table=DEFAULT_PARAMETER_TABLE):
    """
    Canonical parameter of a data unit.

    Parameters
    ----------
    resolver : AttributeResolver
        Attribute reader of the file.
    unit_path : str
        Path of the data group, e.g. ``/dataset1/data1``, or of the dataset
        for files storing a single unnumbered payload.
    table : ParameterTable
        Product and quantity mapping.

    Returns
    -------
    parameter : Parameter
        Canonical parameter.

    """
    product, quantity = read_product_quantity(resolver, unit_path)
    threshold_id = None
    if table.needs_threshold(product, quantity):
        threshold_id = resolver.find(unit_path, 'what', 'threshold_id', int)
    parameter = table.resolve(product, quantity, threshold_id)
    logging.info(f'Product: {product} Quantity: {quantity} '
                 f'Parameter: {table.name(parameter)}')
    return parameter


def create_param_axis(resolver, layout, table=DEFAULT_PARAMETER_TABLE):
    """ Collect the unique parameters of all data units of a file. """
    parameters = [resolve_parameter(resolver, path, table)
                  for _, path in layout.all_unit_paths()]
    return ParamAxis(parameters, table)
