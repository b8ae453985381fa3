"""Data models for records module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MAX_UINT64 = 2**64 - 1
SHORT_HASH_BYTES = 8


def short_hash(entry_id: bytes) -> str:
    """Hex-encoded first 8 bytes of an entry id, used for cross-height references."""
    return entry_id[:SHORT_HASH_BYTES].hex()


@dataclass(frozen=True)
class AssetRegistry:
    """
    Ordered list of recognized asset codes.

    Defines the length and positional meaning of every record's price vector.
    Supplied once by the host process and never mutated during grading.
    """

    assets: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate registry is non-empty and has unique codes."""
        if not self.assets:
            raise ValueError("AssetRegistry must contain at least one asset")
        if len(set(self.assets)) != len(self.assets):
            raise ValueError("AssetRegistry contains duplicate asset codes")

    def __len__(self) -> int:
        return len(self.assets)

    def index_of(self, asset: str) -> int:
        """Position of an asset code in every price vector."""
        return self.assets.index(asset)


@dataclass(frozen=True)
class Record:
    """
    A price-report submission for one block height.

    All fields are set by the intake layer before grading begins and are
    immutable. Values computed during grading (verified difficulty, grade)
    live on the grading snapshots, not here.
    """

    nonce: bytes
    record_hash: bytes
    claimed_difficulty: int
    prices: tuple[float, ...]
    prior_winner_refs: tuple[str, ...] = ()
    entry_id: bytes = b""

    def __post_init__(self) -> None:
        """Validate claimed difficulty fits an unsigned 64-bit integer."""
        if not 0 <= self.claimed_difficulty <= MAX_UINT64:
            raise ValueError(
                f"claimed_difficulty {self.claimed_difficulty} is not an unsigned 64-bit value"
            )
        # Accept lists from the intake layer but store tuples
        object.__setattr__(self, "prices", tuple(self.prices))
        object.__setattr__(self, "prior_winner_refs", tuple(self.prior_winner_refs))

    @property
    def identity_key(self) -> bytes:
        """Deduplication key: nonce bytes followed by record hash bytes."""
        return self.nonce + self.record_hash

    @property
    def short_hash(self) -> str:
        """Short hash exposed to records of the next height."""
        return short_hash(self.entry_id)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "nonce": self.nonce.hex(),
            "record_hash": self.record_hash.hex(),
            "claimed_difficulty": self.claimed_difficulty,
            "prices": list(self.prices),
            "prior_winner_refs": list(self.prior_winner_refs),
            "short_hash": self.short_hash,
        }
