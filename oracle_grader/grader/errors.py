"""Exceptions for grader module."""


class GraderError(Exception):
    """Base exception for block grader errors."""

    pass


class UnsupportedVersionError(GraderError):
    """
    Raised when a grader is requested for an unknown protocol version.

    This is a configuration error (most likely an outdated package),
    raised before any grader is constructed.
    """

    def __init__(self, version: int, supported: list[int] | None = None):
        supported = supported or []
        super().__init__(
            f"Unsupported grader version {version}. Supported versions: {supported}"
        )
        self.version = version
        self.supported = supported


class GraderStateError(GraderError):
    """
    Raised when a grader is used out of order.

    This can happen when:
    - Records are added after the block was graded
    """

    pass
