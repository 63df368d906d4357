"""Suffix/prefix overlap between two strings."""

from collections.abc import Sequence
from dataclasses import dataclass


def overlap_index[T](left: Sequence[T], right: Sequence[T]) -> int:
    """
    Find where the overlap between the end of `left` and the start of `right` begins.

    Candidate offsets are tried in ascending order, so the first match is the
    longest overlap. Offsets that would leave a suffix longer than `right` can
    never match and are skipped.

    Parameters
    ----------
    left : Sequence[T]
        The sequence whose suffix is matched, usually a str.
    right : Sequence[T]
        The sequence whose prefix is matched, of the same type as `left`.

    Returns
    -------
    int
        The offset into `left` where the overlap starts, or `len(left)` when
        there is no overlap.

    Examples
    --------
    >>> overlap_index("abc", "bcd")
    1
    >>> overlap_index("abc", "def")
    3
    """
    size = len(left)
    # Stops before `size`: an empty match is reported as no overlap.
    for index in range(max(0, size - len(right)), size):
        if left[index:] == right[: size - index]:
            return index
    return size


def overlap(left: str, right: str) -> str:
    """
    Find the largest substring that is both a suffix of `left` and a prefix of `right`.

    Only this one direction is evaluated. Call again with the arguments swapped
    for the other one.

    Parameters
    ----------
    left : str
        The first string.
    right : str
        The second string.

    Returns
    -------
    str
        The overlap, taken from `left`, or an empty string.

    Examples
    --------
    >>> overlap("abc", "bcd")
    'bc'
    >>> overlap("abcd", "cdab"), overlap("cdab", "abcd")
    ('cd', 'ab')
    """
    return left[overlap_index(left, right) :]


def overlap_end(text: str, other: str) -> str:
    """The end of `text` that `other` starts with."""
    return overlap(text, other)


def overlap_start(text: str, other: str) -> str:
    """
    The start of `text` that `other` ends with.

    The matching is `overlap_end` with the arguments swapped, but the result is
    cut from `text` rather than `other`.

    Examples
    --------
    >>> overlap_start("bcd", "abc")
    'bc'
    """
    return text[: len(other) - overlap_index(other, text)]


@dataclass(frozen=True)
class OverlapSpan:
    """
    A range of `source` holding an overlap.

    Offsets count code points, so they always fall between characters.
    """

    source: str
    start: int
    stop: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.stop <= len(self.source):
            raise ValueError(f"Invalid span [{self.start}, {self.stop}) for a source of length {len(self.source)}")

    @property
    def text(self) -> str:
        return self.source[self.start : self.stop]

    @property
    def byte_start(self) -> int:
        """UTF-8 byte offset of `start`."""
        return _utf8_length(self.source[: self.start])

    @property
    def byte_stop(self) -> int:
        """UTF-8 byte offset of `stop`."""
        return _utf8_length(self.source[: self.stop])

    def __len__(self) -> int:
        return self.stop - self.start

    def __str__(self) -> str:
        return self.text


def overlap_span(left: str, right: str) -> OverlapSpan:
    """
    Same as `overlap`, but returns the position of the overlap in `left`.

    Parameters
    ----------
    left : str
        The first string.
    right : str
        The second string.

    Returns
    -------
    OverlapSpan
        A span of `left`; empty and positioned at `len(left)` when there is no overlap.
    """
    return OverlapSpan(left, overlap_index(left, right), len(left))


def _utf8_length(text: str) -> int:
    return len(text.encode("utf-8", errors="surrogatepass"))
