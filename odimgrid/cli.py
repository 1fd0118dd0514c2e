"""
odimgrid.cli
============

Command line interface, installed as the ``h5togrid`` script.

::

    h5togrid [-v] [-c CONFIG] [-P PROJECTION] [--datasetname PREFIX]
             [-p ID,NAME] [--producernumber ID] [--producername NAME]
             infile outfile

.. autosummary::
    :toctree: generated/

    producer_type
    build_parser
    main

"""

import argparse
import sys

from .config import get_default_producer, load_config
from .convert import convert_odim_h5
from .exceptions import OdimGridError


def producer_type(text):
    """ Parse a ``number,name`` producer definition. """
    number, sep, name = text.partition(',')
    if not sep or not name:
        raise argparse.ArgumentTypeError(
            f'Producer must be given as number,name, got {text!r}')
    try:
        return int(number), name
    except ValueError:
        raise argparse.ArgumentTypeError(
            f'Producer number must be an integer, got {number!r}') from None


def build_parser():
    """ Create the argument parser of the h5togrid command. """
    parser = argparse.ArgumentParser(
        prog='h5togrid',
        description='Convert an OPERA ODIM_H5 radar file to a gridded '
                    'netCDF file.')
    parser.add_argument('infile', nargs='?', help='ODIM_H5 input file')
    parser.add_argument('outfile', nargs='?', help='netCDF output file')
    parser.add_argument('-i', '--infile', dest='infile_opt', metavar='FILE',
                        help='input file, alternative to the positional '
                             'argument')
    parser.add_argument('-o', '--outfile', dest='outfile_opt', metavar='FILE',
                        help='output file, alternative to the positional '
                             'argument')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print the file metadata and progress')
    parser.add_argument('-c', '--config', metavar='FILE',
                        help='Python configuration file overriding the '
                             'defaults')
    parser.add_argument('-P', '--projection', metavar='PROJECTION',
                        help='target grid as '
                             'projection|lon1,lat1,lon2,lat2[|colsxrows]')
    parser.add_argument('--datasetname', metavar='PREFIX',
                        help='prefix of the dataset groups (default: '
                             'dataset)')
    parser.add_argument('-p', '--producer', type=producer_type,
                        metavar='ID,NAME', help='producer number and name')
    parser.add_argument('--producernumber', type=int, metavar='ID',
                        help='producer number')
    parser.add_argument('--producername', metavar='NAME',
                        help='producer name')
    return parser


def _resolve_files(parser, args):
    infile = args.infile_opt or args.infile
    outfile = args.outfile_opt or args.outfile
    if args.infile_opt and args.infile and not args.outfile_opt \
            and not args.outfile:
        # -i given, the single positional argument is the output
        outfile = args.infile
    if not infile or not outfile:
        parser.error('both an input and an output file are required')
    return infile, outfile


def _resolve_producer(args):
    number, name = args.producer or get_default_producer()
    if args.producernumber is not None:
        number = args.producernumber
    if args.producername is not None:
        name = args.producername
    return number, name


def main(argv=None):
    """
    Run the converter.

    Parameters
    ----------
    argv : list of str, optional
        Command line arguments without the program name, sys.argv[1:] if
        None.

    Returns
    -------
    status : int
        0 on success, 1 if the conversion failed.

    """
    parser = build_parser()
    args = parser.parse_args(argv)
    infile, outfile = _resolve_files(parser, args)

    try:
        if args.config is not None:
            load_config(args.config)
        convert_odim_h5(infile, outfile,
                        dataset_prefix=args.datasetname,
                        projection=args.projection,
                        producer=_resolve_producer(args),
                        verbose=args.verbose)
    except (OdimGridError, OSError) as err:
        print(f'Error: {err}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
