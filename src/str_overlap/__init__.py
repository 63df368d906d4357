"""Find the overlap between the end of one string and the start of another."""

from .errors import JoinerClosedError
from .errors import OverlapError
from .merge import ChunkJoiner
from .merge import merge
from .merge import merge_by_overlap
from .overlap import OverlapSpan
from .overlap import overlap
from .overlap import overlap_end
from .overlap import overlap_index
from .overlap import overlap_span
from .overlap import overlap_start
from .text import OverlapStr

__all__ = [
    "ChunkJoiner",
    "JoinerClosedError",
    "OverlapError",
    "OverlapSpan",
    "OverlapStr",
    "merge",
    "merge_by_overlap",
    "overlap",
    "overlap_end",
    "overlap_index",
    "overlap_span",
    "overlap_start",
]
