"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants shared by the
array and matrix operations.

Why is this file needed?
------------------------
1. Single source of truth: the element type and the magic values used by the
   operations are defined once instead of being scattered as literals.
2. Versioning: it resolves the installed package version, falling back to a
   development marker when running from a source checkout.

Exports:
    INT_DTYPE: NumPy dtype of every array handled by the package.
    NONE_MATCH_DIVISOR (int): Elements divisible by this value count as a match.
    MISSING_ENTRY_SENTINEL (int): Matrix entry value treated as a missing element.
    APP_VERSION (str): Installed package version.
"""
from importlib.metadata import version, PackageNotFoundError

import numpy as np


def get_app_version(distribution: str = "arrayprocessor") -> str:
    """
    Get the installed version of the package, works for dev checkouts too.
    """
    try:
        return version(distribution)
    except PackageNotFoundError:
        # Running from src/ without an install
        return "0.0.0-dev"


# Global Constants
INT_DTYPE = np.int32
NONE_MATCH_DIVISOR: int = 10
MISSING_ENTRY_SENTINEL: int = 0
APP_VERSION: str = get_app_version()
