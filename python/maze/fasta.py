"""Reading sequence files from disk.

Plain text and gzip-compressed files are supported; compression is
detected from a ``.gz`` suffix.  Only the first FASTA record of a file is
used (see :func:`maze.sequence.parse_sequence`).
"""

from __future__ import annotations

import gzip
import logging
from pathlib import Path
from typing import Optional, Union

from maze.sequence import Sequence, normalize

_log = logging.getLogger(__name__)


def read_sequence_text(path: Union[str, Path]) -> str:
    """Return the decoded text of a plain or gzipped sequence file.

    Parameters
    ----------
    path : str or Path
        Path to a ``.fa``/``.fasta``/``.txt`` file, optionally with a
        trailing ``.gz``.

    Returns
    -------
    str
        The file contents.

    Raises
    ------
    ValueError
        If the file cannot be opened, decompressed or decoded.
    """
    path = Path(path)
    try:
        if path.suffix == '.gz':
            with gzip.open(path, 'rt', encoding='utf-8') as fh:
                text = fh.read()
        else:
            text = path.read_text(encoding='utf-8')
    except (OSError, EOFError, UnicodeDecodeError) as exc:
        raise ValueError(f'Could not read sequence file {str(path)!r}: {exc}') from exc
    _log.debug('Read %d characters from %s', len(text), path)
    return text


def read_sequence_file(
    path: Union[str, Path], fallback_id: Optional[str] = None
) -> Sequence:
    """Read and normalise the first sequence of a file.

    Parameters
    ----------
    path : str or Path
        Plain or gzipped FASTA (or bare residue) file.
    fallback_id : str, optional
        Identifier used when the file has no FASTA header.  Defaults to
        the file name without its ``.gz`` and format suffixes.

    Returns
    -------
    Sequence
        The validated sequence, possibly empty.

    Raises
    ------
    ValueError
        If the file cannot be read.
    InvalidAlphabetError
        If the residues are not DNA.
    """
    path = Path(path)
    if fallback_id is None:
        stem = path.name[: -len('.gz')] if path.name.endswith('.gz') else path.name
        fallback_id = Path(stem).stem
    return normalize(read_sequence_text(path), fallback_id)
