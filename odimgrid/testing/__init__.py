"""
Utilities helpful when writing and running unit tests such as sample files.

"""

from .sample_files import *  # noqa
from .tmpdirs import InTemporaryDirectory  # noqa

__all__ = [s for s in dir() if not s.startswith("_")]
