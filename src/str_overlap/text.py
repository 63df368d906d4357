from .overlap import overlap_end
from .overlap import overlap_start


class OverlapStr(str):
    """A str with `overlap_start` and `overlap_end` methods."""

    __slots__ = ()

    def overlap_end(self, other: str) -> str:
        """
        The end of this string that `other` starts with.

        Examples
        --------
        >>> OverlapStr("abc").overlap_end("bcd")
        'bc'
        """
        return str(overlap_end(self, other))

    def overlap_start(self, other: str) -> str:
        """
        The start of this string that `other` ends with.

        Examples
        --------
        >>> OverlapStr("bcd").overlap_start("abc")
        'bc'
        """
        return str(overlap_start(self, other))
