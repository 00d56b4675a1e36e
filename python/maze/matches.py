"""Exact k-mer match finding on both strands.

Every query window is looked up in a :class:`~maze.index.ReferenceIndex`
twice: once as-is (forward, ``'+'``) and once reverse-complemented
(reverse, ``'-'``).  Each reference position returned by a lookup
produces one :class:`Hit`.  Hits are never merged or deduplicated, so a
repetitive pair such as ``AAAA`` / ``TTTT`` yields every
``(reference_start, query_start)`` combination.

Examples
--------
>>> from maze.index import build_index
>>> idx = build_index('ACGT', 2)
>>> hits = find_hits(idx, 'ACGT', 2)
>>> hits.pairs('+')
[(0, 0), (1, 1), (2, 2)]
>>> hits.pairs('-')
[(2, 0), (1, 1), (0, 2)]
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Generator, Iterable, Iterator, Optional, Union

from maze.errors import HitLimitExceededError
from maze.index import ReferenceIndex
from maze.kmers import Kmer, KmerEnumerator
from maze.sequence import Sequence, reverse_complement_kmer

_log = logging.getLogger(__name__)

FORWARD = '+'
REVERSE = '-'
STRANDS = (FORWARD, REVERSE)

Point = tuple[int, int]


@dataclass(frozen=True)
class Hit:
    """One exact match between a reference window and a query window.

    For a forward hit ``reference[rs:rs+k] == query[qs:qs+k]``; for a
    reverse hit the reference window equals the reverse complement of the
    query window.  Coordinates are 0-based; ends are exclusive.

    Parameters
    ----------
    reference_start : int
        Start of the window in the reference (x axis).
    query_start : int
        Start of the window in the query (y axis).
    strand : str
        ``'+'`` for forward or ``'-'`` for reverse-complement matches.
    k : int
        Window length.
    """

    reference_start: int
    query_start: int
    strand: str
    k: int

    @property
    def reference_end(self) -> int:
        return self.reference_start + self.k

    @property
    def query_end(self) -> int:
        return self.query_start + self.k

    def segment(self) -> tuple[Point, Point]:
        """Return the dot-plot line segment ``((x1, y1), (x2, y2))``.

        Forward hits run along the main diagonal from
        ``(reference_start, query_start)``; reverse hits run along the
        anti-diagonal from ``(reference_start, query_end)`` to
        ``(reference_end, query_start)``.
        """
        if self.strand == REVERSE:
            return (
                (self.reference_start, self.query_end),
                (self.reference_end, self.query_start),
            )
        return (
            (self.reference_start, self.query_start),
            (self.reference_end, self.query_end),
        )


@dataclass(frozen=True)
class HitSet:
    """Forward and reverse hits of one comparison, kept apart.

    Iterating a ``HitSet`` yields all forward hits followed by all reverse
    hits.
    """

    forward: tuple[Hit, ...] = ()
    reverse: tuple[Hit, ...] = ()

    def __iter__(self) -> Iterator[Hit]:
        yield from self.forward
        yield from self.reverse

    def __len__(self) -> int:
        return len(self.forward) + len(self.reverse)

    def strand(self, strand: str) -> tuple[Hit, ...]:
        """Return the hits of one strand (``'+'`` or ``'-'``)."""
        _check_strand(strand)
        return self.forward if strand == FORWARD else self.reverse

    def pairs(self, strand: str) -> list[Point]:
        """Return ``(reference_start, query_start)`` for one strand, in order."""
        return [(h.reference_start, h.query_start) for h in self.strand(strand)]

    def within(
        self,
        reference_range: tuple[float, float],
        query_range: tuple[float, float],
    ) -> 'HitSet':
        """Return the hits whose windows overlap a rectangular view.

        A hit is kept when its reference window ``[rs, rs + k)`` overlaps
        the half-open *reference_range* and its query window overlaps
        *query_range*.  The result is what filtering a full recomputation
        would give; order is preserved.

        Parameters
        ----------
        reference_range : tuple[float, float]
            ``(start, end)`` on the reference axis.
        query_range : tuple[float, float]
            ``(start, end)`` on the query axis.
        """
        r0, r1 = reference_range
        q0, q1 = query_range

        def visible(hit: Hit) -> bool:
            return (
                hit.reference_start < r1
                and hit.reference_end > r0
                and hit.query_start < q1
                and hit.query_end > q0
            )

        return HitSet(
            forward=tuple(h for h in self.forward if visible(h)),
            reverse=tuple(h for h in self.reverse if visible(h)),
        )


def _check_strand(strand: str) -> None:
    if strand not in STRANDS:
        raise ValueError(f"strand must be '+' or '-', got {strand!r}")


def _resolve_k(index: ReferenceIndex, k: Optional[int]) -> int:
    if k is not None and k != index.k:
        raise ValueError(
            f'k={k} does not match the reference index (k={index.k}); '
            'rebuild the index for a new k.'
        )
    return index.k


def _scan(
    index: ReferenceIndex, kmers: Iterable[Kmer], strand: str, k: int
) -> Generator[Hit, None, None]:
    for kmer, query_start in kmers:
        lookup = reverse_complement_kmer(kmer) if strand == REVERSE else kmer
        for reference_start in index.positions_of(lookup):
            yield Hit(reference_start, query_start, strand, k)


def iter_hits(
    index: ReferenceIndex,
    query: Union[Sequence, str, KmerEnumerator],
    k: Optional[int] = None,
    strand: str = FORWARD,
) -> Generator[Hit, None, None]:
    """Lazily yield the hits of one strand.

    Hits come in ascending ``query_start`` order, and for each query
    window in the index's stored (ascending) reference order.

    Parameters
    ----------
    index : ReferenceIndex
        Index of the reference sequence.
    query : Sequence, str or KmerEnumerator
        Query residues, or their pre-built enumeration.  A ``str`` is
        upper-cased and validated.
    k : int, optional
        Window length.  Defaults to ``index.k``; any other value is an
        error.
    strand : str, optional
        ``'+'`` (default) or ``'-'``.

    Yields
    ------
    Hit

    Raises
    ------
    ValueError
        If *strand* is unknown or *k* disagrees with the index.
    InvalidAlphabetError
        If a ``str`` query contains characters outside ``{A, C, G, T}``.
    """
    _check_strand(strand)
    k = _resolve_k(index, k)
    kmers = query if isinstance(query, KmerEnumerator) else KmerEnumerator(query, k)
    return _scan(index, kmers, strand, k)


def find_hits(
    index: ReferenceIndex,
    query: Union[Sequence, str],
    k: Optional[int] = None,
    max_hits: Optional[int] = None,
) -> HitSet:
    """Find all forward and reverse-complement hits of *query*.

    The query windows are enumerated once and scanned twice, once per
    strand.  The number of hits is not bounded by the sequence lengths;
    a single repeated base gives ``O(L_ref * L_query)`` hits.

    Parameters
    ----------
    index : ReferenceIndex
        Index of the reference sequence.
    query : Sequence or str
        Query residues.  A ``str`` is upper-cased and validated.
    k : int, optional
        Window length.  Defaults to ``index.k``.
    max_hits : int, optional
        Upper bound on the total number of hits.  ``None`` (default)
        means no bound.

    Returns
    -------
    HitSet
        Forward and reverse hits.

    Raises
    ------
    HitLimitExceededError
        If *max_hits* is given and more hits are found.  No partial
        result is returned.
    ValueError
        If *k* disagrees with the index.
    InvalidAlphabetError
        If a ``str`` query contains characters outside ``{A, C, G, T}``.
    """
    k = _resolve_k(index, k)
    kmers = KmerEnumerator(query, k)
    found: dict[str, list[Hit]] = {FORWARD: [], REVERSE: []}
    total = 0
    for strand in STRANDS:
        bucket = found[strand]
        for hit in _scan(index, kmers, strand, k):
            total += 1
            if max_hits is not None and total > max_hits:
                raise HitLimitExceededError(max_hits)
            bucket.append(hit)
    _log.debug(
        'Found %d forward and %d reverse hits for %d query windows (k=%d)',
        len(found[FORWARD]),
        len(found[REVERSE]),
        len(kmers),
        k,
    )
    return HitSet(forward=tuple(found[FORWARD]), reverse=tuple(found[REVERSE]))
