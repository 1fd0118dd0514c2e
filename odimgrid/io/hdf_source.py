"""
odimgrid.io.hdf_source
======================

Read-only access to the groups, attributes and arrays of an ODIM_H5 file.

.. autosummary::
    :toctree: generated/

    OdimSource
    open_odim_h5

"""

import numpy as np

try:
    import h5py
    _H5PY_AVAILABLE = True
except ImportError:
    _H5PY_AVAILABLE = False

from ..exceptions import MissingOptionalDependency, SchemaError


def _normalize(path):
    """ Return an absolute group path without a trailing slash. """
    if not path.startswith('/'):
        path = '/' + path
    if len(path) > 1:
        path = path.rstrip('/')
    return path


class OdimSource:
    """
    Thin wrapper around an open :py:class:`h5py.File`.

    Only the operations needed by the converter are exposed: probing for
    groups and attributes, listing child groups, reading raw attribute
    values and reading numeric arrays. Paths are absolute group paths such
    as ``/dataset1/data1/what``.

    Parameters
    ----------
    hfile : h5py.File or h5py.Group
        Open HDF5 file.
    filename : str, optional
        Name of the file, used in messages.

    """

    def __init__(self, hfile, filename=None):
        self._hfile = hfile
        self.filename = filename

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        """ Close the underlying file. """
        if hasattr(self._hfile, 'close'):
            self._hfile.close()

    def has_group(self, path):
        """ True if a group exists at path. """
        path = _normalize(path)
        if path == '/':
            return True
        try:
            obj = self._hfile.get(path)
        except (KeyError, ValueError):
            return False
        return isinstance(obj, h5py.Group)

    def list_groups(self, path='/'):
        """ Names of the child groups of path, in file order. """
        path = _normalize(path)
        if not self.has_group(path):
            return []
        group = self._hfile[path]
        return [k for k in group if isinstance(group.get(k), h5py.Group)]

    def has_attribute(self, path, name):
        """ True if the group at path carries the named attribute. """
        path = _normalize(path)
        if not self.has_group(path):
            return False
        return name in self._hfile[path].attrs

    def attribute_names(self, path):
        """ Names of the attributes of the group at path. """
        path = _normalize(path)
        if not self.has_group(path):
            return []
        return list(self._hfile[path].attrs.keys())

    def read_attribute(self, path, name):
        """ Raw value of an attribute, as stored by h5py. """
        return self._hfile[_normalize(path)].attrs[name]

    def attribute_type(self, path, name):
        """ Name of the HDF5 storage type of an attribute. """
        attr_id = self._hfile[_normalize(path)].attrs.get_id(name)
        dtype = attr_id.dtype
        if dtype.kind in ('S', 'U', 'O'):
            return 'H5T_STRING'
        return f'H5T_NATIVE_{dtype.name.upper()}'

    def read_array(self, path):
        """
        Read a numeric dataset as a float64 array.

        Parameters
        ----------
        path : str
            Path of the HDF5 dataset, e.g. ``/dataset1/data1/data``.

        Returns
        -------
        data : ndarray
            The dataset values. The shape of the dataset is preserved.

        """
        path = _normalize(path)
        obj = self._hfile.get(path)
        if not isinstance(obj, h5py.Dataset):
            raise SchemaError(f'Failed to read {path}: no such data array')
        return np.asarray(obj[()], dtype='float64')


def open_odim_h5(filename):
    """
    Open an ODIM_H5 file read-only.

    Parameters
    ----------
    filename : str
        Name of the file.

    Returns
    -------
    source : OdimSource
        Source object, usable as a context manager.

    """
    # check that h5py is available
    if not _H5PY_AVAILABLE:
        raise MissingOptionalDependency(
            "h5py is required to use open_odim_h5 but is not installed")

    return OdimSource(h5py.File(filename, 'r'), filename=filename)
