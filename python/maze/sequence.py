"""Sequence normalisation, validation and reverse complementation.

Raw input is either a bare residue string or a FASTA record whose first
line starts with ``>``.  :func:`normalize` turns such text into an
immutable :class:`Sequence` holding an identifier and an uppercase,
whitespace-free residue string over the DNA alphabet ``{A, C, G, T}``.

Examples
--------
>>> seq = normalize('>chr1 some description\\nacgt\\nTTGA\\n', 'Reference')
>>> seq.id, seq.residues
('chr1', 'ACGTTTGA')
>>> reverse_complement(seq).residues
'TCAAACGT'
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import TypeVar, Union

from maze.errors import InvalidAlphabetError

_log = logging.getLogger(__name__)

DNA_ALPHABET = frozenset('ACGT')

_WHITESPACE_RE = re.compile(r'\s+')
_HEADER_ID_RE = re.compile(r'>\s*(\S+)')
# Start of any further FASTA record after the first one.
_NEXT_RECORD_RE = re.compile(r'^>', re.MULTILINE)

_COMPLEMENT = str.maketrans('ACGTacgt', 'TGCAtgca')


@dataclass(frozen=True)
class Sequence:
    """A validated DNA sequence.

    Residues are upper-cased on construction and must be drawn from
    ``{A, C, G, T}``.  The empty sequence is a valid value; callers that
    need residues report :class:`~maze.errors.EmptySequenceError`
    themselves.

    Parameters
    ----------
    residues : str
        DNA residue string.  Lowercase input is accepted.
    id : str, optional
        Identifier, e.g. the first token of a FASTA header.

    Raises
    ------
    InvalidAlphabetError
        If ``residues`` contains any character outside the DNA alphabet.
    """

    residues: str
    id: str = ''

    def __post_init__(self) -> None:
        residues = self.residues.upper()
        _check_alphabet(residues)
        object.__setattr__(self, 'residues', residues)

    def __len__(self) -> int:
        return len(self.residues)

    def __str__(self) -> str:
        return self.residues


_SeqT = TypeVar('_SeqT', Sequence, str)


def _invalid_characters(residues: str) -> str:
    """Return the distinct non-DNA characters of *residues* in order."""
    return ''.join(
        dict.fromkeys(c for c in residues.upper() if c not in DNA_ALPHABET)
    )


def _check_alphabet(residues: str) -> None:
    invalid = _invalid_characters(residues)
    if invalid:
        raise InvalidAlphabetError(
            'Sequences must contain only the DNA alphabet {A, C, G, T}; '
            f'found {invalid!r}.',
            invalid=invalid,
        )


def is_dna(seq: Union[Sequence, str]) -> bool:
    """Return ``True`` if *seq* contains only ``A``, ``C``, ``G`` or ``T``.

    The test is case-insensitive.  Ambiguity codes such as ``N`` are not
    DNA for this purpose.  The empty string passes.
    """
    return not _invalid_characters(str(seq))


def validate(seq: _SeqT) -> _SeqT:
    """Check that *seq* is drawn from the DNA alphabet.

    Parameters
    ----------
    seq : Sequence or str
        The residues to check (case-insensitive).

    Returns
    -------
    Sequence or str
        *seq* unchanged, so calls can be chained.

    Raises
    ------
    InvalidAlphabetError
        If any character lies outside ``{A, C, G, T}``.
    """
    _check_alphabet(str(seq))
    return seq


def as_sequence(seq: Union[Sequence, str]) -> Sequence:
    """Return *seq* as a :class:`Sequence`.

    A ``str`` is upper-cased and checked against the DNA alphabet; a
    :class:`Sequence` is returned unchanged.

    Raises
    ------
    InvalidAlphabetError
        If a ``str`` contains characters outside ``{A, C, G, T}``.
    """
    if isinstance(seq, Sequence):
        return seq
    return Sequence(seq)


def parse_sequence(raw: str, fallback_id: str = '') -> tuple[str, str]:
    """Split raw text into an identifier and a residue string.

    If *raw* starts with ``>`` the first line is a FASTA header.  Its first
    whitespace-delimited token becomes the identifier and the whole line is
    discarded.  Only the first record is used; any later ``>`` record is
    dropped with a warning.  All whitespace is removed from the remaining
    text, which is then upper-cased.  No alphabet validation happens here.

    Parameters
    ----------
    raw : str
        Plain residues or a single FASTA record.
    fallback_id : str, optional
        Identifier used when there is no header or the header is blank.

    Returns
    -------
    tuple[str, str]
        ``(identifier, residues)``.
    """
    seq_id = fallback_id
    body = raw
    if raw.startswith('>'):
        header, _, body = raw.partition('\n')
        match = _HEADER_ID_RE.match(header)
        if match:
            seq_id = match.group(1)
        next_record = _NEXT_RECORD_RE.search(body)
        if next_record is not None:
            _log.warning(
                'Input %r contains more than one FASTA record; only the first '
                'record is used.',
                seq_id,
            )
            body = body[: next_record.start()]
    residues = _WHITESPACE_RE.sub('', body).upper()
    return seq_id, residues


def normalize(raw: str, fallback_id: str = '') -> Sequence:
    """Parse and validate raw text into a :class:`Sequence`.

    Parameters
    ----------
    raw : str
        Plain residues or a FASTA record (see :func:`parse_sequence`).
    fallback_id : str, optional
        Identifier used when the input carries none.

    Returns
    -------
    Sequence
        The validated sequence.  It may be empty.

    Raises
    ------
    InvalidAlphabetError
        If the residues contain characters outside ``{A, C, G, T}``.
    """
    seq_id, residues = parse_sequence(raw, fallback_id)
    return Sequence(residues, seq_id)


def reverse_complement(seq: _SeqT) -> _SeqT:
    """Return the reverse complement of *seq*.

    ``A`` and ``T`` are swapped, as are ``C`` and ``G``, and the order is
    reversed.  Applying the transform twice returns the input.  A plain
    string keeps its letter case; a :class:`Sequence` keeps its identifier.

    Parameters
    ----------
    seq : Sequence or str
        DNA residues.

    Returns
    -------
    Sequence or str
        Same type as *seq*.

    Raises
    ------
    InvalidAlphabetError
        If *seq* contains anything other than DNA residues.
    """
    if isinstance(seq, Sequence):
        return Sequence(seq.residues.translate(_COMPLEMENT)[::-1], seq.id)
    invalid = _invalid_characters(seq)
    if invalid:
        raise InvalidAlphabetError(
            f'Only raw DNA sequences can be reverse complemented; found {invalid!r}.',
            invalid=invalid,
        )
    return seq.translate(_COMPLEMENT)[::-1]


def reverse_complement_kmer(kmer: str) -> str:
    """Reverse-complement an uppercase k-mer without validating it."""
    return kmer.translate(_COMPLEMENT)[::-1]
