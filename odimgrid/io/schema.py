"""
odimgrid.io.schema
==================

Structural validation of ODIM_H5 files and enumeration of their numbered
dataset and data groups.

.. autosummary::
    :toctree: generated/

    OdimLayout
    validate_odim_h5
    count_datasets
    count_data_units
    enumerate_layout
    read_object_kind

"""

import logging
import re

from ..config import get_dataset_prefix
from ..core.kinds import ObjectKind
from ..exceptions import SchemaError


def validate_odim_h5(source, prefix=None):
    """
    Check that a file looks like OPERA radar data.

    The top level how group is optional.

    Parameters
    ----------
    source : OdimSource
        Open file.
    prefix : str, optional
        Prefix of the dataset groups. None uses the configured default.

    """
    if prefix is None:
        prefix = get_dataset_prefix()
    names = source.list_groups('/')

    if 'what' not in names:
        raise SchemaError(
            'Opera HDF5 radar data is required to contain a /what group')
    if not source.has_attribute('/what', 'date'):
        raise SchemaError(
            'Opera HDF5 radar data is required to contain /what.date '
            'attribute')
    if not source.has_attribute('/what', 'time'):
        raise SchemaError(
            'Opera HDF5 radar data is required to contain /what.time '
            'attribute')
    if f'{prefix}1' not in names:
        raise SchemaError(
            'Opera HDF5 radar data is required to contain at least '
            f'/{prefix}1 group')
    if 'where' not in names:
        raise SchemaError(
            'Opera HDF5 radar data is required to contain a /where group')


def _count_numbered(names, prefix):
    n = 0
    while f'{prefix}{n + 1}' in names:
        n += 1

    # groups past a numbering gap are ignored
    pattern = re.compile(re.escape(prefix) + r'(\d+)$')
    skipped = sorted(
        int(m.group(1)) for m in map(pattern.match, names)
        if m is not None and int(m.group(1)) > n + 1)
    if skipped:
        logging.warning(
            f'Ignoring {prefix} groups {skipped} after the numbering gap '
            f'at {prefix}{n + 1}')
    return n


def count_datasets(source, prefix=None):
    """
    Count the datasets of a file.

    There is no meta information for this, the groups ``<prefix>1``,
    ``<prefix>2``, ... are probed until the first one which is missing.
    """
    if prefix is None:
        prefix = get_dataset_prefix()
    return _count_numbered(source.list_groups('/'), prefix)


def count_data_units(source, index, prefix=None):
    """
    Count the numbered data groups ``data1``, ``data2``, ... of a dataset.

    Returns 0 for datasets which store a single unnumbered ``data`` array.
    """
    if prefix is None:
        prefix = get_dataset_prefix()
    names = source.list_groups(f'/{prefix}{index}')
    if not names:
        return 0
    return _count_numbered(names, 'data')


class OdimLayout:
    """
    Dataset and data group numbering of a file.

    Attributes
    ----------
    prefix : str
        Prefix of the dataset groups.
    data_units : tuple of int
        Number of numbered data groups in each dataset, 0 for the legacy
        layout with a single unnumbered payload.

    """

    def __init__(self, prefix, data_units):
        self.prefix = prefix
        self.data_units = tuple(data_units)

    def __repr__(self):
        return (f'OdimLayout(prefix={self.prefix!r}, '
                f'data_units={self.data_units!r})')

    @property
    def ndatasets(self):
        """ Number of datasets. """
        return len(self.data_units)

    def dataset_indices(self):
        """ Dataset numbers, 1 to N. """
        return range(1, self.ndatasets + 1)

    def dataset_path(self, index):
        """ Absolute path of a dataset group. """
        return f'/{self.prefix}{index}'

    def unit_paths(self, index):
        """
        Paths of the groups holding the data units of a dataset.

        For the legacy layout this is the dataset group itself.
        """
        dataset = self.dataset_path(index)
        nunits = self.data_units[index - 1]
        if nunits == 0:
            return [dataset]
        return [f'{dataset}/data{j}' for j in range(1, nunits + 1)]

    def all_unit_paths(self):
        """ (dataset index, unit path) for every data unit of the file. """
        return [(i, path) for i in self.dataset_indices()
                for path in self.unit_paths(i)]


def enumerate_layout(source, prefix=None):
    """ Count datasets and data groups and return an :py:class:`OdimLayout`. """
    if prefix is None:
        prefix = get_dataset_prefix()
    ndatasets = count_datasets(source, prefix)
    units = [count_data_units(source, i, prefix)
             for i in range(1, ndatasets + 1)]
    return OdimLayout(prefix, units)


def read_object_kind(resolver):
    """ Data object kind of a file, from /what.object. """
    return ObjectKind.from_string(resolver.get('/what', 'object', str))
