"""Exception types raised by the maze dot-plot core.

Every error derives from :class:`MazeError`, which is itself a
``ValueError`` so that callers catching ``ValueError`` keep working.
"""

from __future__ import annotations


class MazeError(ValueError):
    """Base class for all input errors raised by maze."""


class InvalidAlphabetError(MazeError):
    """A residue string contains characters outside ``{A, C, G, T}``.

    Parameters
    ----------
    message : str
        Human readable description.
    invalid : str, optional
        The distinct offending characters, in order of first appearance.
    """

    def __init__(self, message: str, invalid: str = '') -> None:
        super().__init__(message)
        self.invalid = invalid


class EmptySequenceError(MazeError):
    """A sequence is empty after normalisation."""

    def __init__(self, label: str) -> None:
        super().__init__(f'{label} sequence is empty.')
        self.label = label


class InvalidKError(MazeError):
    """The window length ``k`` is not a positive integer."""

    def __init__(self, k: object) -> None:
        super().__init__(
            f'k must be a positive integer, got {k!r}. '
            'Please provide a positive integer for the match length.'
        )
        self.k = k


class HitLimitExceededError(MazeError):
    """More hits were produced than the caller-supplied ceiling allows."""

    def __init__(self, max_hits: int) -> None:
        super().__init__(
            f'Comparison produced more than {max_hits} hits; '
            'increase k or raise max_hits.'
        )
        self.max_hits = max_hits
