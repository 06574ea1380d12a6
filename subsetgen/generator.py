"""Lazy power-set enumeration over an ordered collection.

``SubsetGenerator`` wraps a sequence of N items and hands out independent
``SubsetIterator`` sessions. Each session walks the power set by treating an
N-bit boolean cursor as a binary counter (bit 0 least significant, bit ``i``
selects item ``i``), so working memory stays O(N) regardless of the 2^N
subsets produced.

The generator keeps a reference to the caller's sequence and never copies it.
Mutating that sequence while a session is active is undefined behaviour: the
cursor is not re-validated and emitted subsets may mix old and new items.

Example:
    >>> sg = SubsetGenerator([1, 2, 3], include_empty=True)
    >>> len(sg)
    8
    >>> [s for s in sg][:4]
    [[], [1], [2], [1, 2]]
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Sequence, Tuple, TypeVar

import numpy as np

from subsetgen.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def subset_count(n: int, include_empty: bool = False) -> int:
    """Return how many subsets a full session over ``n`` items yields.

    Args:
        n: Number of items in the source collection.
        include_empty: Whether the empty subset is counted.

    Returns:
        ``2**n`` when ``include_empty`` is True, otherwise ``2**n - 1``.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Item count must be non-negative, got {n}")
    total = 1 << n
    return total if include_empty else total - 1


class SubsetGenerator(Generic[T]):
    """Configuration for enumerating every subset of ``data``.

    Attributes:
        data: Source sequence. Borrowed, not copied.
        include_empty: Whether sessions emit the empty subset first.
    """

    def __init__(self, data: Sequence[T], include_empty: bool = False) -> None:
        self.data = data
        self.include_empty = include_empty

    def iter(self) -> SubsetIterator[T]:
        """Start a new, independent enumeration session."""
        return SubsetIterator(self.data, self.include_empty)

    def __iter__(self) -> Iterator[List[T]]:
        return self.iter()

    def __len__(self) -> int:
        """Number of subsets a full session yields.

        ``len()`` only accepts values up to ``sys.maxsize``, so this raises
        ``OverflowError`` from 63 items on (64-bit builds). Use
        :func:`subset_count` when the collection may be that large.
        """
        return subset_count(len(self.data), self.include_empty)

    def __repr__(self) -> str:
        return (
            f"SubsetGenerator(items={len(self.data)}, "
            f"include_empty={self.include_empty})"
        )


class SubsetIterator(Generic[T]):
    """One traversal of the power set with its own private cursor.

    Sessions created from the same generator share only the read-only source
    sequence, so they can be advanced independently (including from separate
    threads).
    """

    def __init__(self, data: Sequence[T], include_empty: bool) -> None:
        self._data = data
        self._bits = np.zeros(len(data), dtype=bool)
        self._pending_empty = include_empty
        self._exhausted = False
        self._indices: Tuple[int, ...] = ()
        self.emitted = 0
        logger.debug(
            f"Starting subset session over {len(data)} items "
            f"(include_empty={include_empty})"
        )

    @property
    def indices(self) -> Tuple[int, ...]:
        """Source indices of the most recently emitted subset, ascending."""
        return self._indices

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> SubsetIterator[T]:
        return self

    def __next__(self) -> List[T]:
        if self._pending_empty:
            self._pending_empty = False
            self._indices = ()
            self.emitted += 1
            return []

        if self._exhausted or not self._increment():
            if not self._exhausted:
                self._exhausted = True
                logger.debug(f"Subset session exhausted after {self.emitted} subsets")
            raise StopIteration

        self._indices = tuple(int(i) for i in np.flatnonzero(self._bits))
        self.emitted += 1
        return [self._data[i] for i in self._indices]

    def _increment(self) -> bool:
        """Add one to the cursor.

        Returns False without touching the cursor when every bit is already set,
        which also covers the zero-width cursor of an empty collection.
        """
        clear = np.flatnonzero(~self._bits)
        if clear.size == 0:
            return False
        first = clear[0]
        self._bits[:first] = False
        self._bits[first] = True
        return True
