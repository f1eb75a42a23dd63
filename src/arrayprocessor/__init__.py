"""
arrayprocessor
==============
Stateless utilities for 32-bit integer arrays and matrices: predicate checks,
slicing, rearrangement, merging of sorted arrays and validated matrix
multiplication.
"""
from arrayprocessor.config import APP_VERSION as __version__
from arrayprocessor.errors import NullValueError
from arrayprocessor.logging_config import setup_logging
from arrayprocessor.processing import *  # noqa: F401,F403
from arrayprocessor.processing import __all__ as _processing_all

__all__ = ["__version__", "NullValueError", "setup_logging", *_processing_all]
