"""
Error Taxonomy
==============

Closed set of errors raised by the pixel-probe pipeline.

Every failure in the pipeline is terminal. Each error carries a
machine-readable ErrorKind plus the structured fields needed to
explain it, so callers and tests never match on message text.

Kinds:
    CONFIG          - Missing or invalid command-line / settings input
    EMPTY_PATH      - No file path was given
    NOT_FOUND       - Path does not exist or cannot be accessed
    IS_DIRECTORY    - Path resolves to a directory
    UNSUPPORTED_TYPE - File extension is not in the allow-list
    DECODE          - Bytes are not a recognized or valid image
    OUT_OF_BOUNDS   - Coordinates fall outside the image rectangle
"""

from enum import Enum
from typing import Iterable, Tuple


class ErrorKind(str, Enum):
    """Machine-readable error categories."""

    CONFIG = "CONFIG"
    EMPTY_PATH = "EMPTY_PATH"
    NOT_FOUND = "NOT_FOUND"
    IS_DIRECTORY = "IS_DIRECTORY"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    DECODE = "DECODE"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"


class PixelProbeError(Exception):
    """Base class for all pipeline errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(PixelProbeError):
    """Raised when required input is missing or settings are invalid."""

    kind = ErrorKind.CONFIG


class EmptyPathError(PixelProbeError):
    kind = ErrorKind.EMPTY_PATH

    def __init__(self) -> None:
        super().__init__("no file path provided")


class NotFoundError(PixelProbeError):
    """Raised when a path does not exist or cannot be accessed."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str, reason: str = "no such file or directory") -> None:
        super().__init__(f"cannot access {path}: {reason}")
        self.path = path
        self.reason = reason


class IsDirectoryError(PixelProbeError):
    kind = ErrorKind.IS_DIRECTORY

    def __init__(self, path: str) -> None:
        super().__init__(
            f"expected file path but directory path was provided: {path}"
        )
        self.path = path


class UnsupportedTypeError(PixelProbeError):
    """
    Raised when a file extension is not in the allow-list.

    Attributes:
        extension: The rejected extension, as it appeared in the path
        allowed: The allow-list the extension was checked against
    """

    kind = ErrorKind.UNSUPPORTED_TYPE

    def __init__(self, extension: str, allowed: Iterable[str]) -> None:
        self.extension = extension
        self.allowed: Tuple[str, ...] = tuple(allowed)
        shown = extension or "(none)"
        super().__init__(
            f"file type {shown} is not one of the supported types: "
            f"{', '.join(self.allowed)}"
        )


class DecodeError(PixelProbeError):
    """Raised when image bytes are malformed or of an unknown format."""

    kind = ErrorKind.DECODE


class OutOfBoundsError(PixelProbeError):
    """
    Raised when pixel coordinates fall outside the image rectangle.

    Attributes:
        x: Requested column
        y: Requested row
        bounds: The image Bounds the coordinates were checked against
    """

    kind = ErrorKind.OUT_OF_BOUNDS

    def __init__(self, x: int, y: int, bounds) -> None:
        self.x = x
        self.y = y
        self.bounds = bounds
        super().__init__(
            f"coordinates ({x}, {y}) are out of image bounds "
            f"[{bounds.min_x}, {bounds.max_x}) x [{bounds.min_y}, {bounds.max_y})"
        )
