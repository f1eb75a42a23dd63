"""
One-dimensional array operations.

Every function accepts any sequence of ints (or a NumPy array), coerces it to
int32 and returns a new array; inputs are never modified in place.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence
import logging

import numpy as np

from arrayprocessor.config import NONE_MATCH_DIVISOR
from arrayprocessor.utils import as_int_array, is_sorted_ascending

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

IntPredicate = Callable[[int], bool]


def none_match(values: Sequence[int]) -> bool:
    """Return True if no element is divisible by 10."""
    array = as_int_array(values)
    return not bool(np.any(array % NONE_MATCH_DIVISOR == 0))


def some_match(values: Sequence[int], predicate: IntPredicate) -> bool:
    """
    Return True if at least one element matches the predicate.

    Args:
        values: Input integers.
        predicate: Called with each element (as a Python int) until one matches.
    """
    return any(predicate(int(value)) for value in as_int_array(values))


def all_match(
    values: Sequence[str],
    transform: Callable[[str], int],
    predicate: IntPredicate,
) -> bool:
    """
    Return True if every string, once transformed to an int, matches the predicate.

    Args:
        values: Input strings. No element may be None.
        transform: Maps each string to an int.
        predicate: Tested on the transformed value.
    """
    return all(predicate(transform(value)) for value in values)


def copy_values(values: Sequence[int], start_inclusive: int, end_exclusive: int) -> npt.NDArray[np.int32]:
    """
    Copy the elements between two indices into a new array.

    The upper bound is checked against the last index rather than the length,
    so the final element of ``values`` can never be copied.

    Args:
        values: Input integers.
        start_inclusive: Index of the first element to copy.
        end_exclusive: Index prior to which elements are copied.

    Raises:
        ValueError: If ``start_inclusive < 0``, ``end_exclusive > len(values) - 1``
            or ``start_inclusive > end_exclusive``.

    Returns:
        Copy of ``values[start_inclusive:end_exclusive]``.
    """
    array = as_int_array(values)
    if start_inclusive < 0 or end_exclusive > array.size - 1:
        logger.debug(f"copy_values rejected range [{start_inclusive}, {end_exclusive}) for size {array.size}")
        raise ValueError(
            f"Indices [{start_inclusive}, {end_exclusive}) are outside of the input bounds "
            f"(size {array.size})."
        )
    if start_inclusive > end_exclusive:
        logger.debug(f"copy_values rejected inverted range [{start_inclusive}, {end_exclusive})")
        raise ValueError(f"start_inclusive ({start_inclusive}) > end_exclusive ({end_exclusive}).")
    return array[start_inclusive:end_exclusive].copy()


def replace(values: Sequence[int]) -> npt.NDArray[np.int32]:
    """Double the even-indexed elements and negate the odd-indexed ones."""
    array = as_int_array(values)
    result = array.copy()
    result[0::2] *= 2
    result[1::2] *= -1
    return result


def find_second_max(values: Sequence[int]) -> int:
    """
    Find the second largest value.

    The values are sorted descending and the first one strictly below the
    maximum is returned. When all elements are equal, the maximum itself is
    returned.

    Raises:
        IndexError: If ``values`` is empty.
    """
    array = as_int_array(values)
    if array.size == 0:
        raise IndexError("Cannot find the second maximum of an empty array.")

    sorted_desc = np.sort(array)[::-1]
    maximum = sorted_desc[0]
    smaller = sorted_desc[sorted_desc < maximum]
    return int(smaller[0]) if smaller.size else int(maximum)


def rearrange(values: Sequence[int]) -> npt.NDArray[np.int32]:
    """
    Negative numbers sorted ascending, then the positive numbers in reverse order.

    Zeros are dropped.

    **Example**:

        rearrange([3, -5, 4, -7, 2, 9])
        # Output: [-7 -5  9  2  4  3]
    """
    array = as_int_array(values)
    negatives = np.sort(array[array < 0])
    positives = array[array > 0][::-1]
    return np.concatenate((negatives, positives))


def filter_values(values: Sequence[int]) -> npt.NDArray[np.int32]:
    """Drop the negative elements, keeping the order of the rest."""
    array = as_int_array(values)
    return array[array >= 0]


def insert_values(
    values: Sequence[int],
    start_inclusive: int,
    inserted: Sequence[int],
) -> npt.NDArray[np.int32]:
    """
    Insert values into a copy of the input at a given index.

    Args:
        values: Input integers.
        start_inclusive: Index of ``values`` at which the first inserted element lands.
        inserted: Values to insert.

    Raises:
        ValueError: If ``start_inclusive`` is not a valid index of ``values``.

    Returns:
        ``values[:start] + inserted + values[start:]`` as a new array.
    """
    array = as_int_array(values)
    if start_inclusive < 0 or start_inclusive > array.size - 1:
        logger.debug(f"insert_values rejected index {start_inclusive} for size {array.size}")
        raise ValueError(f"start_inclusive ({start_inclusive}) is out of bounds for size {array.size}.")

    return np.concatenate((array[:start_inclusive], as_int_array(inserted), array[start_inclusive:]))


def merge_sorted_arrays(values: Sequence[int], values2: Sequence[int]) -> npt.NDArray[np.int32]:
    """
    Merge two ascending arrays into one ascending array, duplicates included.

    Raises:
        ValueError: If either input is not sorted ascending.
    """
    first = as_int_array(values)
    second = as_int_array(values2)
    if not (is_sorted_ascending(first) and is_sorted_ascending(second)):
        logger.debug("merge_sorted_arrays received unsorted input")
        raise ValueError("Arrays are not sorted!")

    return np.sort(np.concatenate((first, second)), kind="stable")


def distinct(values: Sequence[int]) -> npt.NDArray[np.int32]:
    """Keep the first occurrence of every value, in original order."""
    array = as_int_array(values)
    _, first_indices = np.unique(array, return_index=True)
    return array[np.sort(first_indices)]
