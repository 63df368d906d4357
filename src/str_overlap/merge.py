"""Concatenation that does not repeat the boundary shared by two pieces of text."""

from collections.abc import Sequence

from .errors import JoinerClosedError
from .overlap import overlap_index
from .utils.logger import log


def _check_min_overlap(min_overlap: int) -> None:
    if min_overlap < 1:
        raise ValueError(f"min_overlap must be at least 1, got {min_overlap}")


def _overlap_length[T](left: Sequence[T], right: Sequence[T], min_overlap: int) -> int:
    length = len(left) - overlap_index(left, right)
    return length if length >= min_overlap else 0


def merge(left: str, right: str, min_overlap: int = 1) -> str:
    """
    Join two strings, keeping their overlap only once.

    Parameters
    ----------
    left : str
        The first string.
    right : str
        The second string.
    min_overlap : int, optional
        Shorter overlaps are ignored and the strings are simply concatenated, by default 1

    Returns
    -------
    str
        The merged string.

    Examples
    --------
    >>> merge("Hello wor", "world!")
    'Hello world!'
    >>> merge("abc", "cde", min_overlap=2)
    'abccde'
    """
    _check_min_overlap(min_overlap)
    return left + right[_overlap_length(left, right, min_overlap) :]


def merge_by_overlap[T](prev: Sequence[T], new: Sequence[T], min_overlap: int = 1) -> list[T]:
    """
    Merge two token sequences by their overlap.

    Only exact overlaps between the end of `prev` and the start of `new` count.
    If there is none, the result is `prev` followed by `new`.

    Examples
    --------
    >>> merge_by_overlap(["The", "quick", "brown", "fox"], ["brown", "fox", "jumps"])
    ['The', 'quick', 'brown', 'fox', 'jumps']
    """
    _check_min_overlap(min_overlap)
    prev, new = list(prev), list(new)
    return prev + new[_overlap_length(prev, new, min_overlap) :]


class ChunkJoiner:
    """
    Incrementally joins streamed chunks that may repeat the end of earlier ones.

    Parameters
    ----------
    min_overlap : int, optional
        Overlaps shorter than this are treated as no overlap, by default 1
    window : int | None, optional
        Only the last `window` characters of the joined text are matched
        against a new chunk, by default all of it.
    """

    def __init__(self, min_overlap: int = 1, window: int | None = None) -> None:
        _check_min_overlap(min_overlap)
        if window is not None and window < 1:
            raise ValueError(f"window must be at least 1, got {window}")
        self.min_overlap: int = min_overlap
        self.window: int | None = window
        self.closed: bool = False
        self._text: str = ""

    @property
    def text(self) -> str:
        return self._text

    def push(self, chunk: str) -> str:
        """Add a chunk and return the part of it that was not already there."""
        if self.closed:
            raise JoinerClosedError()
        tail = self._text if self.window is None else self._text[-self.window :]
        skip = _overlap_length(tail, chunk, self.min_overlap)
        if skip:
            log.debug(f"Dropping {skip} overlapping characters from chunk")
        new = chunk[skip:]
        self._text += new
        return new

    def close(self) -> str:
        self.closed = True
        return self._text
