"""Run-level orchestration: validate inputs, index once, find hits.

:class:`SequenceComparison` holds one reference sequence, one ``k`` and
the index built from them.  It can be asked for the hits of any number
of query sequences.  Results for the most recent queries are cached so
that repeated requests (for example on every redraw of an interactive
view) return the identical :class:`~maze.matches.HitSet` without
rescanning.

:func:`compare` is the one-shot entry point taking raw text.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
import logging
from typing import Optional

from maze.errors import EmptySequenceError, HitLimitExceededError
from maze.index import ReferenceIndex, build_index
from maze.kmers import check_k
from maze.matches import Hit, HitSet, find_hits
from maze.sequence import Sequence, parse_sequence

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """The inputs and hits of one comparison.

    Parameters
    ----------
    reference : Sequence
        Reference sequence (x axis of the dot plot).
    query : Sequence
        Query sequence (y axis of the dot plot).
    k : int
        Window length.
    hits : HitSet
        Forward and reverse hits.
    """

    reference: Sequence
    query: Sequence
    k: int
    hits: HitSet

    @property
    def forward(self) -> tuple[Hit, ...]:
        return self.hits.forward

    @property
    def reverse(self) -> tuple[Hit, ...]:
        return self.hits.reverse


class SequenceComparison:
    """Compare query sequences against one fixed reference.

    The reference index is built once on construction and is read-only
    afterwards.  To change the reference or ``k`` create a new
    ``SequenceComparison``.

    Parameters
    ----------
    reference : Sequence
        Validated, non-empty reference sequence.
    k : int
        Window length, at least 1.
    cache_size : int, optional
        Number of query results kept.  The least recently used result is
        dropped first.  Default is ``8``; ``0`` disables caching.

    Raises
    ------
    InvalidKError
        If *k* is not a positive integer.
    EmptySequenceError
        If *reference* is empty.

    Examples
    --------
    >>> from maze.sequence import normalize
    >>> cmp = SequenceComparison(normalize('AAAA', 'Reference'), k=2)
    >>> result = cmp.compare(normalize('TTTT', 'Query'))
    >>> len(result.forward), len(result.reverse)
    (0, 9)
    """

    def __init__(self, reference: Sequence, k: int, cache_size: int = 8) -> None:
        k = check_k(k)
        if not len(reference):
            raise EmptySequenceError('Reference')
        self._reference = reference
        self._index = build_index(reference, k)
        self._cache_size = max(cache_size, 0)
        self._cache: OrderedDict[str, HitSet] = OrderedDict()

    @classmethod
    def from_text(
        cls, reference_text: str, k: int, fallback_id: str = 'Reference'
    ) -> 'SequenceComparison':
        """Parse raw reference text and build the comparison.

        Raises
        ------
        InvalidKError, EmptySequenceError, InvalidAlphabetError
            On bad input, checked in that order.
        """
        k = check_k(k)
        seq_id, residues = parse_sequence(reference_text, fallback_id)
        if not residues:
            raise EmptySequenceError('Reference')
        return cls(Sequence(residues, seq_id), k)

    @property
    def reference(self) -> Sequence:
        return self._reference

    @property
    def k(self) -> int:
        return self._index.k

    @property
    def index(self) -> ReferenceIndex:
        return self._index

    def find_hits(self, query: Sequence, max_hits: Optional[int] = None) -> HitSet:
        """Return the hits of *query* against the reference.

        Results for the last ``cache_size`` distinct queries are cached by
        query residues.  A cached result larger than *max_hits* raises just
        as a fresh computation would.

        Raises
        ------
        EmptySequenceError
            If *query* is empty.
        HitLimitExceededError
            If more than *max_hits* hits exist.
        """
        if not len(query):
            raise EmptySequenceError('Query')
        cached = self._cache.get(query.residues)
        if cached is not None:
            self._cache.move_to_end(query.residues)
            _log.debug('Reusing cached hits for query %r', query.id)
            if max_hits is not None and len(cached) > max_hits:
                raise HitLimitExceededError(max_hits)
            return cached
        hits = find_hits(self._index, query, self.k, max_hits=max_hits)
        if self._cache_size:
            self._cache[query.residues] = hits
            if len(self._cache) > self._cache_size:
                self._cache.popitem(last=False)
        return hits

    def compare(self, query: Sequence, max_hits: Optional[int] = None) -> ComparisonResult:
        """Return a :class:`ComparisonResult` for *query*."""
        hits = self.find_hits(query, max_hits=max_hits)
        return ComparisonResult(self._reference, query, self.k, hits)

    def clear_cache(self) -> None:
        """Forget all cached hit sets."""
        self._cache.clear()

    def __repr__(self) -> str:
        return (
            f'SequenceComparison(reference={self._reference.id!r}, '
            f'length={len(self._reference)}, k={self.k})'
        )


def compare(
    reference_text: str,
    query_text: str,
    k: int,
    max_hits: Optional[int] = None,
) -> ComparisonResult:
    """Compare two raw sequence texts with window length *k*.

    Each text may be bare residues or a FASTA record.  Inputs are checked
    before any indexing: first ``k`` and non-emptiness, then the DNA
    alphabet of both sequences.

    Parameters
    ----------
    reference_text : str
        Reference residues or FASTA record.
    query_text : str
        Query residues or FASTA record.
    k : int
        Window length, at least 1.
    max_hits : int, optional
        Upper bound on the total number of hits.

    Returns
    -------
    ComparisonResult

    Raises
    ------
    InvalidKError
        If *k* is not a positive integer.
    EmptySequenceError
        If either sequence is empty after normalisation.
    InvalidAlphabetError
        If either sequence contains characters outside ``{A, C, G, T}``.
    HitLimitExceededError
        If *max_hits* is exceeded.
    """
    k = check_k(k)
    ref_id, ref_residues = parse_sequence(reference_text, 'Reference')
    query_id, query_residues = parse_sequence(query_text, 'Query')
    if not ref_residues:
        raise EmptySequenceError('Reference')
    if not query_residues:
        raise EmptySequenceError('Query')
    reference = Sequence(ref_residues, ref_id)
    query = Sequence(query_residues, query_id)
    return SequenceComparison(reference, k).compare(query, max_hits=max_hits)
