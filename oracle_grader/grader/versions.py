"""Protocol versions and their grading parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .errors import UnsupportedVersionError


class GraderVersion(IntEnum):
    """Supported grading rule sets, keyed by protocol version."""

    V1 = 1
    V2 = 2


@dataclass(frozen=True)
class GradingParams:
    """Rule set for one protocol version."""

    limit: int = 50
    """Honest records collected by difficulty before grading."""

    minimum: int = 10
    """Set size grading narrows down to; fewer honest records means no winners."""

    winner_count: int = 10
    """Number of winners per height."""

    band: float = 0.0
    """Relative deviation tolerance in the grade formula (0.0 = plain quartic)."""

    def __post_init__(self) -> None:
        """Validate parameters are consistent."""
        if self.minimum < 1:
            raise ValueError(f"minimum must be positive, got {self.minimum}")
        if self.limit < self.minimum:
            raise ValueError(
                f"limit ({self.limit}) must be at least minimum ({self.minimum})"
            )
        if not 1 <= self.winner_count <= self.minimum:
            raise ValueError(
                f"winner_count ({self.winner_count}) must be between 1 and minimum ({self.minimum})"
            )
        if self.band < 0:
            raise ValueError(f"band must be non-negative, got {self.band}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "limit": self.limit,
            "minimum": self.minimum,
            "winner_count": self.winner_count,
            "band": self.band,
        }


VERSION_PARAMS: dict[GraderVersion, GradingParams] = {
    GraderVersion.V1: GradingParams(),
    GraderVersion.V2: GradingParams(band=0.01),
}


def resolve_version(version: int) -> GraderVersion:
    """
    Map a protocol version number to a supported version.

    Raises:
        UnsupportedVersionError: If the version is unknown
    """
    try:
        return GraderVersion(version)
    except ValueError:
        raise UnsupportedVersionError(
            version, supported=[int(v) for v in GraderVersion]
        ) from None


def get_params(version: int) -> GradingParams:
    """Grading parameters for a protocol version."""
    return VERSION_PARAMS[resolve_version(version)]
