"""
odimgrid.io.common
==================

Input/output routines common to the readers and writers.

.. autosummary::
    :toctree: generated/

    _test_arguments
    make_time_unit_str

"""


def _test_arguments(dic):
    """ Issue a warning if receive non-empty argument dict. """
    if dic:
        import warnings

        warnings.warn(f'Unexpected arguments: {dic.keys()}')


def make_time_unit_str(dtobj):
    """ Return a time unit string from a datetime object. """
    return 'seconds since ' + dtobj.strftime('%Y-%m-%dT%H:%M:%SZ')
