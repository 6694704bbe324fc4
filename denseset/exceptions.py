"""Denseset exceptions."""


# Imports.
from typing import Any


class DenseSetException(Exception):
    """A generic denseset exception."""


class NullArgumentError(DenseSetException, ValueError):
    """``None`` was given where an element is required."""


class NotFoundError(DenseSetException, KeyError):
    """An element is not a member of an indexed set."""

    def __init__(self, msg: str, element: Any):
        """Initialize a not found error.

        Parameters
        ----------
        msg : str
            Exception message.
        element : Any
            The element that was looked up.
        """
        super().__init__(msg, element)
        self.element = element

    def __str__(self) -> str:
        """Return the exception message.

        ``KeyError`` would otherwise render the repr of all arguments.
        """
        return str(self.args[0])


class IndexOutOfRangeError(DenseSetException, IndexError):
    """An index is outside of ``[0, size)``."""

    def __init__(self, msg: str, index: int, size: int):
        """Initialize an index out of range error.

        Parameters
        ----------
        msg : str
            Exception message.
        index : int
            The offending index.
        size : int
            Size of the indexed set.
        """
        super().__init__(msg, index, size)
        self.index = index
        self.size = size


class BitVectorLengthError(DenseSetException, ValueError):
    """A bit vector does not have one bit per element."""

    def __init__(self, msg: str, length: int, size: int):
        """Initialize a bit vector length error.

        Parameters
        ----------
        msg : str
            Exception message.
        length : int
            Length of the bit vector.
        size : int
            Size of the indexed set.
        """
        super().__init__(msg, length, size)
        self.length = length
        self.size = size
