"""
odimgrid.config
===============

odimgrid configuration.

The default values can be overridden by a Python configuration file which
defines any of the module level names below in upper case. The file is
loaded when odimgrid is imported if the ``ODIMGRID_CONFIG`` environment
variable points to it, or explicitly with :py:func:`load_config`.

.. autosummary::
    :toctree: generated/

    load_config
    get_fillvalue
    get_dataset_prefix
    get_default_producer
    get_interpolation_method

"""

import importlib.util
import os
from warnings import warn

# prefix of the numbered dataset groups, /dataset1, /dataset2, ...
DEFAULT_DATASET_PREFIX = 'dataset'

# producer identity stored in the output
DEFAULT_PRODUCER_ID = 1014
DEFAULT_PRODUCER_NAME = 'RADAR'

# value marking missing cells in the output grid
FILL_VALUE = -9999.0

# interpolation hint attached to every parameter of the output
INTERPOLATION_METHOD = 'linear'

_CONFIG_NAMES = ('DEFAULT_DATASET_PREFIX', 'DEFAULT_PRODUCER_ID',
                 'DEFAULT_PRODUCER_NAME', 'FILL_VALUE',
                 'INTERPOLATION_METHOD')

_current = {name: globals()[name] for name in _CONFIG_NAMES}


def load_config(filename=None):
    """
    Load an odimgrid configuration from a Python file.

    Parameters
    ----------
    filename : str, optional
        Path of the configuration file. Names not defined in the file keep
        their current value. None restores the built-in defaults.

    """
    if filename is None:
        _current.update({name: globals()[name] for name in _CONFIG_NAMES})
        return

    spec = importlib.util.spec_from_file_location('odimgrid_config', filename)
    cfile = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(cfile)
    for name in _CONFIG_NAMES:
        if hasattr(cfile, name):
            _current[name] = getattr(cfile, name)


def get_fillvalue():
    """ Return the fill value for missing cells. """
    return _current['FILL_VALUE']


def get_dataset_prefix():
    """ Return the default prefix of the numbered dataset groups. """
    return _current['DEFAULT_DATASET_PREFIX']


def get_default_producer():
    """ Return the default producer as a (number, name) tuple. """
    return (int(_current['DEFAULT_PRODUCER_ID']),
            str(_current['DEFAULT_PRODUCER_NAME']))


def get_interpolation_method():
    """ Return the interpolation hint given to output parameters. """
    return _current['INTERPOLATION_METHOD']


_config_file = os.environ.get('ODIMGRID_CONFIG')
if _config_file is not None:
    if os.path.isfile(_config_file):
        load_config(_config_file)
    else:
        warn(f'ODIMGRID_CONFIG file {_config_file} not found, '
             'using the default configuration')
