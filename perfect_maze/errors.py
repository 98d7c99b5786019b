"""Exception hierarchy.

Every error raised on purpose by the package derives from :class:`MazeError`.
Input validation errors additionally derive from :class:`ValueError` so that
callers treating bad arguments generically keep working.

An unreachable goal is *not* an error: path queries return an empty list.
"""


class MazeError(Exception):
    """Base class for all package errors."""


class InvalidDimensionError(MazeError, ValueError):
    """Maze width or height is not an integer >= 1."""

    def __init__(self, width: object, height: object) -> None:
        super().__init__(
            f"Maze dimensions must be integers >= 1, got width={width!r}, height={height!r}"
        )
        self.width = width
        self.height = height


class RandomSourceExhaustedError(MazeError):
    """A replayed random sequence ran out of values."""


class InvalidRasterError(MazeError, ValueError):
    """Matrix or array input does not describe a rectangular wall/passage grid."""
