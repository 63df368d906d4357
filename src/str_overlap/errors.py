class OverlapError(Exception):
    """Base class for errors raised by str_overlap."""


class JoinerClosedError(OverlapError):
    def __init__(self) -> None:
        super().__init__("Cannot push to a closed ChunkJoiner")
