"""
Exceptions raised by the array and matrix operations.

Invalid arguments are reported with the builtin ``ValueError`` and empty inputs
with ``IndexError``; only the missing-entry condition needs its own type.
"""


class NullValueError(ValueError):
    """A matrix contains an entry equal to the missing-entry sentinel."""

    def __init__(self, message: str, matrix_name: str) -> None:
        super().__init__(message)
        self.matrix_name = matrix_name
