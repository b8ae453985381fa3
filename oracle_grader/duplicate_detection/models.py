"""Data models for duplicate detection module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DuplicateGroup:
    """
    Submissions sharing one identity key (nonce + record hash).

    Only the first occurrence survives deduplication.
    """

    identity_key: bytes
    first_index: int
    occurrences: int

    def __post_init__(self) -> None:
        """Validate group has at least 2 members."""
        if self.occurrences < 2:
            raise ValueError("DuplicateGroup must have at least 2 occurrences")

    @property
    def removed(self) -> int:
        """Number of submissions dropped from this group."""
        return self.occurrences - 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "identity_key": self.identity_key.hex(),
            "first_index": self.first_index,
            "occurrences": self.occurrences,
        }
