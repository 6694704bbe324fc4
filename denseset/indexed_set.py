"""Indexed sets.

An indexed set is an immutable, deduplicated collection which assigns every
distinct element a dense index in ``[0, size)``. It is meant for algorithms
that represent subsets of a domain as bit vectors, or that need a row or
column number for each domain object.

Element order is decided by a ``frozenset`` during deduplication and is not
guaranteed to match the input order, even for input without duplicates. It
is, however, fixed for the lifetime of an instance.
"""


# Imports.
from __future__ import annotations

import operator
from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, TypeVar

import numpy as np

from denseset.exceptions import (
    BitVectorLengthError,
    IndexOutOfRangeError,
    NotFoundError,
    NullArgumentError,
)
from denseset.logging import logger


# Types.
T = TypeVar('T', bound=Hashable)


# Constants.
NOT_FOUND = -1
HASH_MULTIPLIER = 31


@dataclass(frozen=True, eq=False, repr=False)
class IndexedSet(Generic[T]):
    """An immutable set whose elements are numbered ``0`` to ``size - 1``.

    Two indexed sets are equal iff they are of the same type and contain the
    same elements at the same indices. An indexed set is never equal to a
    plain sequence or set, and its hash differs from the hash of the tuple of
    its elements.
    """

    _elements: tuple[T, ...]
    _index_map: dict[T, int]
    _set: frozenset[T]

    def __init__(self, items: Iterable[T] = ()):
        """Create a new indexed set.

        Parameters
        ----------
        items : Iterable[T]
            Elements of the set. Duplicates are collapsed and the input order
            is not preserved. Any iterable is accepted, including one-shot
            iterators.

        Raises
        ------
        TypeError
            Raised if an element is not hashable.
        """
        items = list(items)
        unique = frozenset(items)
        elements = tuple(unique)
        index_map = {element: index for index, element in enumerate(elements)}

        object.__setattr__(self, '_elements', elements)
        object.__setattr__(self, '_index_map', index_map)
        object.__setattr__(self, '_set', unique)

        logger.spam(
            f'Indexed {len(elements)} distinct elements from {len(items)} '
            f'items.'
        )

    def __iter__(self) -> Iterator[T]:
        """Iterate over the elements in order of increasing index.

        Returns
        -------
        Iterator[T]
            A new iterator on every call.
        """
        return iter(self._elements)

    def __len__(self) -> int:
        """Get the number of distinct elements."""
        return len(self._elements)

    def __contains__(self, item: Any) -> bool:
        """Determine if ``item`` is an element of the set.

        Parameters
        ----------
        item : Any
            Item to check membership of. Must be hashable.

        Returns
        -------
        bool
            True iff ``item`` is in the set.
        """
        return item in self._set

    def __eq__(self, other: Any) -> bool:
        """Determine if one indexed set is equal to another.

        Parameters
        ----------
        other : Any
            Object to compare with.

        Returns
        -------
        bool
            True iff ``other`` is an indexed set of the same type holding
            equal elements at equal indices.
        """
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented

        return self._elements == other._elements

    def __hash__(self) -> int:
        """Hash self.

        The element tuple hash is combined with the size so that an indexed
        set and the tuple of its elements do not collide.

        Returns
        -------
        int
            A hash generated from the ordered elements and the size.
        """
        return hash(self._elements) * HASH_MULTIPLIER + len(self._elements)

    def __repr__(self) -> str:
        """Return a string representation of self."""
        return f'{type(self).__name__}({self._elements!r})'

    def as_array(self) -> list[T]:
        """Copy the elements into a new list.

        Changing the list has no effect on this set. Changes to the elements
        themselves are, of course, visible through both.

        Returns
        -------
        list[T]
            The elements in index order.
        """
        return list(self._elements)

    def as_sequence(self) -> tuple[T, ...]:
        """Get the elements as a tuple, in index order."""
        return self._elements

    def as_set(self) -> frozenset[T]:
        """Get the elements as a frozenset."""
        return self._set

    def index_map(self) -> Mapping[T, int]:
        """Get a read-only mapping from each element to its index.

        Returns
        -------
        Mapping[T, int]
            A mapping proxy. Any attempt to modify it raises ``TypeError``.
        """
        return MappingProxyType(self._index_map)

    def index_of(self, item: T) -> int:
        """Get the index of an element.

        Parameters
        ----------
        item : T
            The element whose index to retrieve.

        Returns
        -------
        int
            The index of ``item``, or ``-1`` if ``item`` is not an element of
            this set.

        Raises
        ------
        NullArgumentError
            Raised if ``item`` is ``None``.

        See Also
        --------
        index_of_strict
        """
        if item is None:
            raise NullArgumentError('Cannot look up the index of None.')
        return self._index_map.get(item, NOT_FOUND)

    def index_of_strict(self, item: T) -> int:
        """Get the index of an element that must be in the set.

        Parameters
        ----------
        item : T
            The element whose index to retrieve.

        Returns
        -------
        int
            The index of ``item``.

        Raises
        ------
        NotFoundError
            Raised if ``item`` is not an element of this set.
        """
        try:
            return self._index_map[item]
        except KeyError:
            raise NotFoundError(
                f'{item!r} is not an element of this indexed set.',
                item,
            ) from None

    def element_at(self, index: int) -> T:
        """Get the element at ``index``.

        Parameters
        ----------
        index : int
            Index of the element. Negative indices are not accepted.

        Returns
        -------
        T
            The element with the given index.

        Raises
        ------
        IndexOutOfRangeError
            Raised if ``index < 0`` or ``index >= size``.
        TypeError
            Raised if ``index`` is not an integer, or is a ``bool``.
        """
        return self._elements[self._check_index(index)]

    def size(self) -> int:
        """Get the number of distinct elements."""
        return len(self._elements)

    def empty_bit_vector(self) -> np.ndarray:
        """Create a bit vector with all ``size`` bits cleared."""
        return np.zeros(len(self._elements), dtype=np.bool_)

    def full_bit_vector(self) -> np.ndarray:
        """Create a bit vector with all ``size`` bits set."""
        return np.ones(len(self._elements), dtype=np.bool_)

    def single_bit_vector(self, index: int) -> np.ndarray:
        """Create a bit vector with only the bit at ``index`` set.

        Parameters
        ----------
        index : int
            The bit to set.

        Returns
        -------
        np.ndarray
            A new boolean array of length ``size``.

        Raises
        ------
        IndexOutOfRangeError
            Raised if ``index < 0`` or ``index >= size``.
        """
        bits = self.empty_bit_vector()
        bits[self._check_index(index)] = True
        return bits

    def single_bit_vector_for(self, item: T) -> np.ndarray:
        """Create a bit vector with only the bit for ``item`` set.

        Raises ``NotFoundError`` if ``item`` is not an element of this set.
        """
        return self.single_bit_vector(self.index_of_strict(item))

    def bit_vector(self, items: Iterable[T]) -> np.ndarray:
        """Create a bit vector representing a subset of this set.

        Parameters
        ----------
        items : Iterable[T]
            Elements of the subset. Duplicates are allowed.

        Returns
        -------
        np.ndarray
            A new boolean array of length ``size`` with the bit of every item
            set.

        Raises
        ------
        NotFoundError
            Raised if any item is not an element of this set.
        """
        bits = self.empty_bit_vector()
        for item in items:
            bits[self.index_of_strict(item)] = True
        return bits

    def elements_of(self, bits: Any) -> tuple[T, ...]:
        """Get the elements whose bits are set.

        Parameters
        ----------
        bits : Any
            A one dimensional array-like of length ``size``. Values are
            interpreted as booleans.

        Returns
        -------
        tuple[T, ...]
            The selected elements in index order.

        Raises
        ------
        BitVectorLengthError
            Raised if ``bits`` is not a vector of length ``size``.
        """
        bits = np.asarray(bits, dtype=np.bool_)
        if bits.shape != (len(self._elements),):
            raise BitVectorLengthError(
                f'Bit vector shape {bits.shape} does not match size '
                f'{len(self._elements)}.',
                bits.size,
                len(self._elements),
            )
        return tuple(self._elements[i] for i in np.flatnonzero(bits))

    def _check_index(self, index: int) -> int:
        """Validate an index and return it as an ``int``."""
        if isinstance(index, (bool, np.bool_)):
            raise TypeError(f'Index must be an integer, not {index!r}.')
        index = operator.index(index)
        if not 0 <= index < len(self._elements):
            raise IndexOutOfRangeError(
                f'Index: {index}; Size: {len(self._elements)}',
                index,
                len(self._elements),
            )
        return index
