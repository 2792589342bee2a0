"""Exception taxonomy for sharp-score.

Every error here is terminal for the command line: it is reported on
stderr and the process exits with a non-zero code.
"""


class SharpScoreError(Exception):
    """Base class for all sharp-score failures."""


class UsageError(SharpScoreError):
    """Raised when no image path (or an invalid argument) was supplied."""


class NotFoundError(SharpScoreError):
    """Raised when the image path does not exist on disk."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class DecodeError(SharpScoreError):
    """Raised when the file exists but cannot be decoded as an image."""


class InvalidImage(SharpScoreError):
    """Raised for images the pipeline cannot score (e.g. zero area)."""
