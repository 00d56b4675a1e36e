"""
maze: exact k-mer dot plots of two DNA sequences.

This package provides:
- Sequence normalisation (plain or FASTA text) and DNA alphabet validation
- Reverse complementation
- Restartable k-mer enumeration and an ordered reference k-mer index
- Forward and reverse-complement exact match finding
- Dotplot visualization with matplotlib

Examples
--------
Basic usage:

>>> from maze import compare, DotPlotter
>>> result = compare(">ref\\nACGTACGTTTGCA", ">qry\\nTGCAAACGTACGT", k=4)
>>> fig = DotPlotter(result).plot(output_path="dotplot.png")
"""

from maze.compare import (  # noqa: F401
    ComparisonResult,
    SequenceComparison,
    compare,
)
from maze.dotplot import DotPlotter  # noqa: F401
from maze.example import EXAMPLE_K, load_example  # noqa: F401
from maze.errors import (  # noqa: F401
    EmptySequenceError,
    HitLimitExceededError,
    InvalidAlphabetError,
    InvalidKError,
    MazeError,
)
from maze.fasta import read_sequence_file, read_sequence_text  # noqa: F401
from maze.index import ReferenceIndex, build_index  # noqa: F401
from maze.kmers import KmerEnumerator, check_k, enumerate_kmers, iter_kmers  # noqa: F401
from maze.matches import FORWARD, REVERSE, Hit, HitSet, find_hits, iter_hits  # noqa: F401
from maze.sequence import (  # noqa: F401
    as_sequence,
    Sequence,
    is_dna,
    normalize,
    parse_sequence,
    reverse_complement,
    validate,
)

DEFAULT_K = EXAMPLE_K

__version__ = '0.1.0'
__all__ = [
    'DEFAULT_K',
    'Sequence',
    'as_sequence',
    'normalize',
    'parse_sequence',
    'validate',
    'is_dna',
    'reverse_complement',
    'iter_kmers',
    'enumerate_kmers',
    'check_k',
    'KmerEnumerator',
    'ReferenceIndex',
    'build_index',
    'FORWARD',
    'REVERSE',
    'Hit',
    'HitSet',
    'find_hits',
    'iter_hits',
    'SequenceComparison',
    'ComparisonResult',
    'compare',
    'DotPlotter',
    'load_example',
    'read_sequence_file',
    'read_sequence_text',
    'MazeError',
    'InvalidAlphabetError',
    'EmptySequenceError',
    'InvalidKError',
    'HitLimitExceededError',
]
