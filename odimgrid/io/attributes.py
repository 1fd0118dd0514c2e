"""
odimgrid.io.attributes
======================

Typed attribute lookup with group-hierarchy fallback.

ODIM_H5 lets a producer declare a default once near the root, for example
``/what/gain``, and override it in a more specific group, for example
``/dataset1/data1/what/gain``. :py:meth:`AttributeResolver.find` searches
from the most local group towards the root.

.. autosummary::
    :toctree: generated/

    AttributeResolver
    coerce_attribute
    ancestor_paths
    _to_str

"""

import numpy as np

from ..exceptions import AttributeNotFound, TypeMismatch


def _to_str(text):
    """ Convert bytes to str if necessary, dropping NUL terminators. """
    if hasattr(text, 'decode'):
        text = text.decode('utf-8')
    return str(text).rstrip('\x00')


def coerce_attribute(value, kind, name='attribute'):
    """
    Convert a raw HDF5 attribute value to a Python scalar.

    Parameters
    ----------
    value : any
        Value as returned by h5py: bytes, str, numpy scalar or a one
        element array.
    kind : type
        One of str, int or float.
    name : str
        Attribute name, used in error messages.

    Returns
    -------
    value : str, int or float
        The converted value.

    """
    if isinstance(value, np.ndarray):
        if value.size != 1:
            raise TypeMismatch(
                f'Element {name} is not of size 1, but {value.size}')
        value = value.reshape(-1)[0]

    is_text = isinstance(value, (bytes, str, np.bytes_, np.str_))

    if kind is str:
        if not is_text:
            raise TypeMismatch(f'{name} is not a string')
        return _to_str(value)

    if kind not in (int, float):
        raise ValueError(f'Unsupported attribute type {kind}')

    if is_text or isinstance(value, (bool, np.bool_)):
        raise TypeMismatch(f'{name} is not numeric')
    try:
        return kind(value)
    except (TypeError, ValueError) as err:
        raise TypeMismatch(f'{name} cannot be read as {kind.__name__}') from err


def ancestor_paths(path):
    """
    Return path and all its ancestors, most specific first.

    >>> ancestor_paths('/dataset1/data2')
    ['/dataset1/data2', '/dataset1', '/']

    """
    if not path.startswith('/'):
        path = '/' + path
    parts = [p for p in path.split('/') if p]
    paths = ['/' + '/'.join(parts[:i]) for i in range(len(parts), 0, -1)]
    paths.append('/')
    return paths


def _join(parent, group):
    if parent == '/':
        return '/' + group
    return parent + '/' + group


class AttributeResolver:
    """
    Typed attribute reader on top of an :py:class:`OdimSource`.

    Parameters
    ----------
    source : OdimSource
        Open file.

    """

    def __init__(self, source):
        self.source = source

    def get(self, path, name, kind):
        """
        Read the attribute name of the group at path.

        Raises AttributeNotFound if it is absent and TypeMismatch if it
        cannot be converted to kind.
        """
        if not self.source.has_attribute(path, name):
            raise AttributeNotFound(
                f'Failed to read attribute {path}/{name}')
        return coerce_attribute(
            self.source.read_attribute(path, name), kind, f'{path}/{name}')

    def get_optional(self, path, name, kind):
        """ Like :py:meth:`get` but returns None if the attribute is absent. """
        if not self.source.has_attribute(path, name):
            return None
        return self.get(path, name, kind)

    def find(self, parent_path, group_name, name, kind):
        """
        Read the most local instance of an attribute.

        Parameters
        ----------
        parent_path : str
            Path of the most specific parent group, e.g.
            ``/dataset1/data1``.
        group_name : str
            Name of the attribute group looked up under each ancestor,
            usually ``what``, ``where`` or ``how``.
        name : str
            Attribute name.
        kind : type
            str, int or float.

        Returns
        -------
        value : str, int or float
            Value from the first ``<ancestor>/<group_name>`` group that
            declares the attribute.

        """
        value = self.find_optional(parent_path, group_name, name, kind)
        if value is None:
            raise AttributeNotFound(
                f'Did not find attribute: {name} with group: {group_name}')
        return value

    def find_optional(self, parent_path, group_name, name, kind):
        """ Like :py:meth:`find` but returns None if nothing is found. """
        for ancestor in ancestor_paths(parent_path):
            group_path = _join(ancestor, group_name)
            if self.source.has_attribute(group_path, name):
                return self.get(group_path, name, kind)
        return None
