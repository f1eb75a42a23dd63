"""
Operations Layer
================
Pure functions over int32 arrays and matrices.

Note: This package holds no state and performs no I/O.
"""
from arrayprocessor.processing.arrays import (
    all_match,
    copy_values,
    distinct,
    filter_values,
    find_second_max,
    insert_values,
    merge_sorted_arrays,
    none_match,
    rearrange,
    replace,
    some_match,
)
from arrayprocessor.processing.matrices import (
    matrix_multiplication,
    validate_for_matrix_multiplication,
)
from arrayprocessor.processing.processor import ArrayProcessor, LoopArrayProcessor

__all__ = [
    "all_match",
    "copy_values",
    "distinct",
    "filter_values",
    "find_second_max",
    "insert_values",
    "merge_sorted_arrays",
    "none_match",
    "rearrange",
    "replace",
    "some_match",
    "matrix_multiplication",
    "validate_for_matrix_multiplication",
    "ArrayProcessor",
    "LoopArrayProcessor",
]
