#!/usr/bin/env python
"""odimgrid: OPERA ODIM_H5 radar data to gridded time series

odimgrid reads weather radar data stored in the EUMETNET OPERA ODIM_H5
format and stores it in a regular 4-axis (time, parameter, level, location)
grid. Composites, images and Cartesian volumes are copied as is, polar
volumes are resampled to a grid centered at the radar. The result can be
reprojected to another grid and written to netCDF.
"""


DOCLINES = __doc__.split("\n")

import glob
import sys
from os import path

from setuptools import find_packages, setup

CLASSIFIERS = """\
    Development Status :: 4 - Beta
    Intended Audience :: Science/Research
    Intended Audience :: Developers
    License :: OSI Approved :: BSD License
    Programming Language :: Python
    Programming Language :: Python :: 3
    Topic :: Scientific/Engineering
    Topic :: Scientific/Engineering :: Atmospheric Science
    Operating System :: POSIX :: Linux
    Operating System :: MacOS :: MacOS X
    Operating System :: Microsoft :: Windows
"""

NAME = 'odimgrid'
MAINTAINER = "odimgrid Developers"
DESCRIPTION = DOCLINES[0]
LICENSE = 'BSD'
CLASSIFIERS = list(filter(None, CLASSIFIERS.split('\n')))
PLATFORMS = ["Linux", "Mac OS-X", "Unix"]
MAJOR = 0
MINOR = 1
MICRO = 0
VERSION = '%d.%d.%d' % (MAJOR, MINOR, MICRO)
SCRIPTS = glob.glob('scripts/*')

min_version = (3, 8)
if sys.version_info < min_version:
    error = """
odimgrid does not support Python {}.{}.
Python {}.{} and above is required. Check your Python version like so:
python3 --version
This may be due to an out-of-date pip. Make sure you have pip >= 9.0.1.
Upgrade pip like so:
pip install --upgrade pip
""".format(
        *sys.version_info[:2], *min_version
    )
    sys.exit(error)

here = path.abspath(path.dirname(__file__))

with open(path.join(here, 'README.rst'), encoding='utf-8') as readme_file:
    readme = readme_file.read()

with open(path.join(here, 'requirements.txt')) as requirements_file:
    # Parse requirements.txt, ignoring any commented-out lines.
    requirements = [
        line for line in requirements_file.read().splitlines()
        if line and not line.startswith('#')
    ]


if __name__ == '__main__':
    setup(
        name=NAME,
        description=DESCRIPTION,
        long_description=readme,
        long_description_content_type='text/x-rst',
        author=MAINTAINER,
        maintainer=MAINTAINER,
        version=VERSION,
        packages=find_packages(include=['odimgrid', 'odimgrid.*'],
                               exclude=['docs', 'tests']),
        include_package_data=True,
        scripts=SCRIPTS,
        install_requires=requirements,
        extras_require={'tests': ['pytest']},
        python_requires='>=3.8',
        license=LICENSE,
        platforms=PLATFORMS,
        classifiers=CLASSIFIERS,
        zip_safe=False,
    )
