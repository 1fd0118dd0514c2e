"""
odimgrid.io.info
================

Human readable listing of the metadata of an ODIM_H5 file.

.. autosummary::
    :toctree: generated/

    describe_group
    describe_odim_h5

"""

import logging

import numpy as np

from .attributes import _to_str

_META_GROUPS = ('what', 'where', 'how')


def _format_value(value):
    if isinstance(value, np.ndarray):
        if value.size == 1:
            value = value.reshape(-1)[0]
        else:
            return np.array2string(value, threshold=10)
    if isinstance(value, (bytes, np.bytes_)):
        return _to_str(value)
    return str(value)


def describe_group(source, path):
    """
    Describe the attributes of one group.

    Parameters
    ----------
    source : OdimSource
        Open file.
    path : str
        Group path, e.g. ``/dataset1/what``.

    Returns
    -------
    lines : list of str
        One ``path/name (type) = value`` line per attribute, nothing if the
        group does not exist.

    """
    lines = []
    for name in source.attribute_names(path):
        value = _format_value(source.read_attribute(path, name))
        htype = source.attribute_type(path, name)
        lines.append(f'{path}/{name} ({htype}) = {value}')
    return lines


def describe_odim_h5(source, layout):
    """
    Describe the metadata of a file.

    The what, where and how groups at the root, of every dataset and of
    every data unit are listed and logged at INFO level.

    Parameters
    ----------
    source : OdimSource
        Open file.
    layout : OdimLayout
        Dataset numbering of the file.

    Returns
    -------
    lines : list of str
        The description, one attribute per line.

    """
    parents = ['/']
    for i in layout.dataset_indices():
        parents.append(layout.dataset_path(i))
        parents.extend(p for p in layout.unit_paths(i) if p not in parents)

    lines = []
    for parent in parents:
        for group in _META_GROUPS:
            path = f'/{group}' if parent == '/' else f'{parent}/{group}'
            lines.extend(describe_group(source, path))

    for line in lines:
        logging.info(line)
    return lines
