"""
Array Processor
===============
The capability interface grouping all array and matrix operations.

Why is this file needed?
------------------------
Callers that want to inject the operations (e.g. into a higher-level service
or a test double) depend on the ``ArrayProcessor`` protocol; the module-level
functions in ``arrays`` and ``matrices`` remain the implementation.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, Sequence

import numpy as np

from arrayprocessor.processing import arrays, matrices

if TYPE_CHECKING:
    import numpy.typing as npt

    from arrayprocessor.processing.arrays import IntPredicate
    from arrayprocessor.processing.matrices import MatrixLike


class ArrayProcessor(Protocol):
    def none_match(self, values: Sequence[int]) -> bool: ...
    def some_match(self, values: Sequence[int], predicate: IntPredicate) -> bool: ...
    def all_match(
        self,
        values: Sequence[str],
        transform: Callable[[str], int],
        predicate: IntPredicate,
    ) -> bool: ...
    def copy_values(
        self, values: Sequence[int], start_inclusive: int, end_exclusive: int
    ) -> npt.NDArray[np.int32]: ...
    def replace(self, values: Sequence[int]) -> npt.NDArray[np.int32]: ...
    def find_second_max(self, values: Sequence[int]) -> int: ...
    def rearrange(self, values: Sequence[int]) -> npt.NDArray[np.int32]: ...
    def filter(self, values: Sequence[int]) -> npt.NDArray[np.int32]: ...
    def insert_values(
        self, values: Sequence[int], start_inclusive: int, inserted: Sequence[int]
    ) -> npt.NDArray[np.int32]: ...
    def merge_sorted_arrays(self, values: Sequence[int], values2: Sequence[int]) -> npt.NDArray[np.int32]: ...
    def validate_for_matrix_multiplication(self, left_matrix: MatrixLike, right_matrix: MatrixLike) -> None: ...
    def matrix_multiplication(self, left_matrix: MatrixLike, right_matrix: MatrixLike) -> npt.NDArray[np.int32]: ...
    def distinct(self, values: Sequence[int]) -> npt.NDArray[np.int32]: ...


class LoopArrayProcessor:
    """
    Stateless ``ArrayProcessor`` backed by the NumPy functions and the
    loop-based multiplication kernel. Safe to share between threads.
    """

    none_match = staticmethod(arrays.none_match)
    some_match = staticmethod(arrays.some_match)
    all_match = staticmethod(arrays.all_match)
    copy_values = staticmethod(arrays.copy_values)
    replace = staticmethod(arrays.replace)
    find_second_max = staticmethod(arrays.find_second_max)
    rearrange = staticmethod(arrays.rearrange)
    filter = staticmethod(arrays.filter_values)
    insert_values = staticmethod(arrays.insert_values)
    merge_sorted_arrays = staticmethod(arrays.merge_sorted_arrays)
    validate_for_matrix_multiplication = staticmethod(matrices.validate_for_matrix_multiplication)
    matrix_multiplication = staticmethod(matrices.matrix_multiplication)
    distinct = staticmethod(arrays.distinct)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
