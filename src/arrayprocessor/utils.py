from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from arrayprocessor.config import INT_DTYPE

if TYPE_CHECKING:
    import numpy.typing as npt

# Signed and unsigned integer dtype kinds
INTEGER_KINDS = "iu"


def _require_integers(values: Any) -> None:
    """Raise TypeError unless ``values`` holds integers only (empty input passes)."""
    raw = np.asarray(values)
    if raw.size and raw.dtype.kind not in INTEGER_KINDS:
        raise TypeError(f"Expected integer values, got dtype '{raw.dtype}'.")


def as_int_array(values: Any) -> npt.NDArray[np.int32]:
    """
    Coerce a sequence of integers into a 1-D int32 array.

    The input is never modified; when ``values`` already is a 1-D int32 array
    it is returned as is, so callers must treat the result as read-only.

    Args:
        values: Sequence of ints or a NumPy array.

    Raises:
        TypeError: If the values are not integers (floats, strings, bools...).
        ValueError: If the values do not form a one-dimensional array.
        OverflowError: If a Python int does not fit into int32.

    Returns:
        (n, ) int32 array.
    """
    _require_integers(values)
    array = np.asarray(values, dtype=INT_DTYPE)
    if array.ndim != 1:
        raise ValueError(f"Expected a one-dimensional array, got shape {array.shape}.")
    return array


def as_int_matrix(rows: Any) -> npt.NDArray[np.int32]:
    """
    Coerce a sequence of equal-length rows into a C-contiguous 2-D int32 array.

    An empty sequence becomes a (0, 0) matrix so that "no rows" can be checked
    uniformly through ``matrix.shape[0]``.

    Args:
        rows: Sequence of rows (each a sequence of ints) or a 2-D NumPy array.

    Raises:
        TypeError: If the entries are not integers.
        ValueError: If the rows are ragged or the input is not two-dimensional.

    Returns:
        (rows, cols) int32 array.
    """
    _require_integers(rows)
    matrix = np.asarray(rows, dtype=INT_DTYPE)
    if matrix.ndim == 1 and matrix.size == 0:
        matrix = matrix.reshape(0, 0)
    if matrix.ndim != 2:
        raise ValueError(f"Expected a two-dimensional matrix, got shape {matrix.shape}.")
    return np.ascontiguousarray(matrix)


def is_sorted_ascending(array: npt.NDArray[np.int32]) -> bool:
    """Non-strict ascending check; empty and single-element arrays are sorted."""
    return bool(np.all(array[:-1] <= array[1:]))
