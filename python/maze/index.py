"""Reference k-mer index.

The index maps every distinct k-mer of a reference sequence to the
ordered tuple of positions where it starts.  It is built once for a
``(reference, k)`` pair and never modified afterwards; a change of
reference or ``k`` means building a new index.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Union

from maze.kmers import Kmer, check_k, iter_kmers
from maze.sequence import Sequence, as_sequence

_log = logging.getLogger(__name__)


class ReferenceIndex:
    """Ordered multimap from k-mer to its start positions in a reference.

    Positions for each k-mer are stored in ascending order with every
    occurrence kept, so ``positions_of`` returns one entry per occurrence.
    Lookups are dictionary lookups.

    Use :meth:`build` (or :func:`build_index`) rather than calling the
    constructor with hand-made data.

    Parameters
    ----------
    k : int
        Window length the index was built with.
    reference_length : int
        Length of the indexed reference.
    kmers : iterable of tuple[str, int]
        ``(kmer, position)`` pairs in ascending position order.

    Examples
    --------
    >>> idx = ReferenceIndex.build('AAAA', 2)
    >>> idx.positions_of('AA')
    (0, 1, 2)
    >>> idx.positions_of('TT')
    ()
    """

    def __init__(self, k: int, reference_length: int, kmers: Iterable[Kmer]) -> None:
        self._k = k
        self._reference_length = reference_length
        positions: dict[str, list[int]] = {}
        for kmer, pos in kmers:
            if kmer in positions:
                positions[kmer].append(pos)
            else:
                positions[kmer] = [pos]
        self._positions: dict[str, tuple[int, ...]] = {
            kmer: tuple(hits) for kmer, hits in positions.items()
        }
        self._n_positions = sum(len(p) for p in self._positions.values())

    @classmethod
    def build(cls, reference: Union[Sequence, str], k: int) -> 'ReferenceIndex':
        """Index every k-mer of *reference*.

        Parameters
        ----------
        reference : Sequence or str
            Reference residues.  A ``str`` is upper-cased and validated.
        k : int
            Window length, at least 1.

        Returns
        -------
        ReferenceIndex
            The finished, read-only index.  Empty when ``k`` exceeds the
            reference length.

        Raises
        ------
        InvalidKError
            If *k* is not a positive integer.
        InvalidAlphabetError
            If a ``str`` reference contains characters outside
            ``{A, C, G, T}``.
        """
        k = check_k(k)
        reference = as_sequence(reference)
        index = cls(k, len(reference), iter_kmers(reference, k))
        _log.debug(
            'Built reference index: length=%d k=%d distinct=%d positions=%d',
            index.reference_length,
            k,
            len(index),
            index.n_positions,
        )
        return index

    @property
    def k(self) -> int:
        """Window length used to build the index."""
        return self._k

    @property
    def reference_length(self) -> int:
        """Length of the indexed reference sequence."""
        return self._reference_length

    @property
    def n_positions(self) -> int:
        """Total number of indexed windows (``max(0, L - k + 1)``)."""
        return self._n_positions

    def positions_of(self, kmer: str) -> tuple[int, ...]:
        """Return the ascending start positions of *kmer*, or ``()``."""
        return self._positions.get(kmer, ())

    def kmers(self) -> list[str]:
        """Return the distinct k-mers in order of first occurrence."""
        return list(self._positions)

    def kmer_set(self) -> set[str]:
        """Return the set of distinct k-mers."""
        return set(self._positions)

    def items(self) -> Iterator[tuple[str, tuple[int, ...]]]:
        """Iterate ``(kmer, positions)`` in order of first occurrence."""
        return iter(self._positions.items())

    def __contains__(self, kmer: object) -> bool:
        return kmer in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def __repr__(self) -> str:
        return (
            f'ReferenceIndex(k={self._k}, reference_length={self._reference_length}, '
            f'kmers={len(self._positions)})'
        )


def build_index(reference: Union[Sequence, str], k: int) -> ReferenceIndex:
    """Build a :class:`ReferenceIndex` for *reference* with window length *k*."""
    return ReferenceIndex.build(reference, k)
