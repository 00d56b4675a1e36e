"""K-mer enumeration over validated sequences.

A sequence of length ``L`` has ``max(0, L - k + 1)`` windows of length
``k``.  :func:`iter_kmers` yields them lazily; :class:`KmerEnumerator`
materialises them once so that the same windows can be walked several
times (once per strand) without re-validating or re-slicing the
sequence.
"""

from __future__ import annotations

import logging
import operator
from typing import Generator, Iterator, Union

from maze.errors import InvalidKError
from maze.sequence import Sequence, as_sequence

_log = logging.getLogger(__name__)

Kmer = tuple[str, int]


def check_k(k: object) -> int:
    """Return *k* as an ``int`` if it is a usable window length.

    Any integer type is accepted (anything implementing ``__index__``,
    such as ``numpy.int64``).

    Parameters
    ----------
    k : object
        Candidate window length.

    Returns
    -------
    int
        *k* as a plain ``int``.

    Raises
    ------
    InvalidKError
        If *k* is not an integer (``bool`` is rejected) or is below 1.
    """
    if isinstance(k, bool):
        raise InvalidKError(k)
    try:
        value = operator.index(k)
    except TypeError:
        raise InvalidKError(k) from None
    if value < 1:
        raise InvalidKError(k)
    return value


def iter_kmers(
    seq: Union[Sequence, str], k: int, start: int = 0
) -> Generator[Kmer, None, None]:
    """Yield ``(kmer, position)`` pairs in ascending position order.

    A ``str`` is upper-cased and validated first.  The caller is
    responsible for checking *k* (see :func:`check_k`).

    Parameters
    ----------
    seq : Sequence or str
        The residues to scan.
    k : int
        Window length, at least 1.
    start : int, optional
        First position to yield.  Default is ``0``.

    Yields
    ------
    tuple[str, int]
        The window content and its 0-based start position.
    """
    residues = as_sequence(seq).residues
    for pos in range(max(start, 0), len(residues) - k + 1):
        yield residues[pos : pos + k], pos


class KmerEnumerator:
    """Restartable, eagerly materialised k-mer enumeration.

    Every window of *seq* is sliced once on construction.  Iterating the
    enumerator always starts again from position 0; :meth:`seek` starts
    from an arbitrary position.

    Parameters
    ----------
    seq : Sequence or str
        The residues to enumerate.
    k : int
        Window length, at least 1.

    Examples
    --------
    >>> kmers = KmerEnumerator('ACGTA', 3)
    >>> list(kmers)
    [('ACG', 0), ('CGT', 1), ('GTA', 2)]
    >>> list(kmers.seek(2))
    [('GTA', 2)]
    """

    def __init__(self, seq: Union[Sequence, str], k: int) -> None:
        self.k = k
        self._kmers: tuple[Kmer, ...] = tuple(iter_kmers(seq, k))
        if not self._kmers:
            _log.debug(
                'k=%d exceeds sequence length %d; no windows to enumerate',
                k,
                len(seq),
            )

    def __iter__(self) -> Iterator[Kmer]:
        return iter(self._kmers)

    def __len__(self) -> int:
        return len(self._kmers)

    def __getitem__(self, position: int) -> Kmer:
        return self._kmers[position]

    def seek(self, position: int) -> Iterator[Kmer]:
        """Return an iterator starting at window *position*.

        Parameters
        ----------
        position : int
            0-based start position.  Positions past the last window give
            an empty iterator.
        """
        return iter(self._kmers[max(position, 0) :])

    def __repr__(self) -> str:
        return f'KmerEnumerator(k={self.k}, windows={len(self._kmers)})'


def enumerate_kmers(seq: Union[Sequence, str], k: int) -> KmerEnumerator:
    """Validate *k* and return a :class:`KmerEnumerator` for *seq*.

    Raises
    ------
    InvalidKError
        If *k* is not a positive integer.
    """
    return KmerEnumerator(seq, check_k(k))
