"""Immutable sets with dense element indices."""


# Imports.
from denseset.exceptions import (
    BitVectorLengthError,
    DenseSetException,
    IndexOutOfRangeError,
    NotFoundError,
    NullArgumentError,
)
from denseset.indexed_set import IndexedSet


__all__ = [
    'BitVectorLengthError',
    'DenseSetException',
    'IndexedSet',
    'IndexOutOfRangeError',
    'NotFoundError',
    'NullArgumentError',
]
